"""Data models for heuristic image classification."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from glimpse.core.constants import (
    ANIMAL_FEATURES_PRESENT,
    CLOTHING_COLORS_PRESENT,
    FACE_STRUCTURE_PRESENT,
    FLESH_TONE_PRESENT,
    HAIR_TEXTURE_PRESENT,
)

ImageType = Literal["person", "animal", "object", "landscape", "unknown"]


@dataclass(frozen=True, slots=True)
class ClassificationResult:
    """A candidate label for an image.

    Attributes:
        id: Stable label identifier (e.g. "person").
        name: Display name.
        confidence: Confidence in (0, 1).
    """

    id: str
    name: str
    confidence: float

    def __post_init__(self) -> None:
        if not 0.0 < self.confidence < 1.0:
            raise ValueError(f"confidence must be in (0.0, 1.0), got {self.confidence}")


@dataclass(frozen=True, slots=True)
class ImageCharacteristics:
    """Pixel statistics gathered in one scan of an image.

    Feature percentages are fractions of the pixel count in [0, 1].
    """

    width: int
    height: int
    brightness: float
    contrast: float
    colorfulness: float
    average_rgb: tuple[float, float, float]
    dominant_colors: tuple[str, ...]
    flesh_tone_percentage: float
    face_structure_percentage: float
    hair_percentage: float
    clothing_percentage: float
    animal_feature_percentage: float
    human_score: float
    animal_score: float
    image_type: ImageType

    @property
    def has_flesh_tones(self) -> bool:
        return self.flesh_tone_percentage > FLESH_TONE_PRESENT

    @property
    def has_face_structure(self) -> bool:
        return self.face_structure_percentage > FACE_STRUCTURE_PRESENT

    @property
    def has_hair_texture(self) -> bool:
        return self.hair_percentage > HAIR_TEXTURE_PRESENT

    @property
    def has_clothing_colors(self) -> bool:
        return self.clothing_percentage > CLOTHING_COLORS_PRESENT

    @property
    def has_animal_features(self) -> bool:
        return self.animal_feature_percentage > ANIMAL_FEATURES_PRESENT


@dataclass(frozen=True, slots=True)
class ImageAnalysisResult:
    """Outcome of classifying one image.

    Attributes:
        predictions: Up to three candidate labels, most confident first.
        dominant_colors: Up to five quantized colours as "rgb(r,g,b)".
        image_type: Coarse category; "unknown" only when nothing could be analysed.
    """

    predictions: tuple[ClassificationResult, ...] = field(default_factory=tuple)
    dominant_colors: tuple[str, ...] = field(default_factory=tuple)
    image_type: ImageType = "unknown"
