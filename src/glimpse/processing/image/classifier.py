"""Heuristic image classifier built on raw RGB statistics.

No model is involved: the image is decoded with Pillow, downsampled, and
every pixel is run through the colour predicates in ``features``. The share
of pixels matching each predicate decides a coarse image type, and a fixed
per-type template turns that type into ranked candidate labels.
"""

from __future__ import annotations

import io
import math
import random
from collections.abc import Iterable
from dataclasses import replace

import numpy as np
from PIL import Image, UnidentifiedImageError

from glimpse.core.constants import (
    COLOR_BUCKET_SIZE,
    DOMINANT_COLOR_COUNT,
    FILENAME_HINT_CONFIDENCE,
    FILENAME_PERSON_HINTS,
    FLESH_TONE_PRESENT,
    IMAGE_MAX_DIMENSION,
    MAX_PREDICTION_CONFIDENCE,
    MAX_PREDICTIONS,
    MIN_PREDICTION_CONFIDENCE,
    RANK_CONFIDENCE_STEP,
)
from glimpse.core.exceptions import DecodeError, InputTooLargeError
from glimpse.core.logging import get_logger
from glimpse.processing.image.features import FEATURE_PREDICATES
from glimpse.processing.image.models import (
    ClassificationResult,
    ImageAnalysisResult,
    ImageCharacteristics,
    ImageType,
)

logger = get_logger(__name__)

# Weights of each feature share in the human score
HUMAN_SCORE_WEIGHTS = {
    "flesh_tone": 3.0,
    "face_structure": 4.0,
    "hair": 2.0,
    "clothing": 1.5,
}
ANIMAL_SCORE_WEIGHT = 2.0


def decode_image(data: bytes, max_dimension: int = IMAGE_MAX_DIMENSION) -> Image.Image:
    """Decode image bytes into an RGB image no larger than max_dimension per side.

    Width and height are clamped independently, so the aspect ratio is not
    preserved.

    Args:
        data: Encoded image (PNG, JPEG, GIF, ...).
        max_dimension: Largest allowed width and height.

    Returns:
        RGB Pillow image.

    Raises:
        DecodeError: If the bytes are not a readable raster image.
    """
    try:
        with Image.open(io.BytesIO(data)) as img:
            img.load()
            rgb = _to_rgb(img)
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError) as exc:
        raise DecodeError(f"Cannot decode image: {exc}") from exc

    size = (min(rgb.width, max_dimension), min(rgb.height, max_dimension))
    if size != rgb.size:
        rgb = rgb.resize(size, Image.Resampling.BILINEAR)
    return rgb


def _to_rgb(img: Image.Image) -> Image.Image:
    """Drop alpha the way a canvas read-back does: fully transparent pixels become black.

    Partially transparent pixels keep their stored colour.
    """
    if not img.has_transparency_data:
        return img.convert("RGB")

    rgba = img.convert("RGBA")
    transparent = rgba.getchannel("A").point(lambda a: 255 if a == 0 else 0)
    rgb = rgba.convert("RGB")
    rgb.paste((0, 0, 0), mask=transparent)
    return rgb


def classify_image_type(
    flesh_tone_percentage: float,
    human_score: float,
    animal_score: float,
    brightness: float,
    colorfulness: float,
) -> ImageType:
    """Map feature scores to an image type; the first matching rule wins."""
    if human_score > 0.3 and flesh_tone_percentage > 0.08:
        return "person"
    if animal_score > 0.4 and human_score < 0.2:
        return "animal"
    if brightness > 150 and colorfulness > 50 and flesh_tone_percentage < 0.05:
        return "landscape"
    if human_score < 0.1 and animal_score < 0.2:
        return "object"
    # Any noticeable skin tips an ambiguous image towards person
    return "person" if flesh_tone_percentage > FLESH_TONE_PRESENT else "object"


def characterize(image: Image.Image) -> ImageCharacteristics | None:
    """Scan every pixel of an RGB image once and summarise it.

    Args:
        image: RGB image, already downsampled.

    Returns:
        ImageCharacteristics, or None for an image without pixels.
    """
    pixels = np.asarray(image, dtype=np.float64).reshape(-1, 3)
    pixel_count = len(pixels)
    if pixel_count == 0:
        return None

    r, g, b = pixels[:, 0], pixels[:, 1], pixels[:, 2]
    shares = {
        name: float(np.count_nonzero(predicate(r, g, b))) / pixel_count
        for name, predicate in FEATURE_PREDICATES.items()
    }

    avg_r, avg_g, avg_b = (float(v) for v in pixels.mean(axis=0))
    pixel_brightness = pixels.mean(axis=1)
    brightness = float(pixel_brightness.mean())
    contrast = float(np.abs(pixel_brightness - brightness).mean())
    colorfulness = math.sqrt(
        (avg_r - avg_g) ** 2 + (avg_g - avg_b) ** 2 + (avg_b - avg_r) ** 2
    )

    human_score = sum(shares[name] * weight for name, weight in HUMAN_SCORE_WEIGHTS.items())
    animal_score = shares["animal"] * ANIMAL_SCORE_WEIGHT

    return ImageCharacteristics(
        width=image.width,
        height=image.height,
        brightness=brightness,
        contrast=contrast,
        colorfulness=colorfulness,
        average_rgb=(avg_r, avg_g, avg_b),
        dominant_colors=dominant_colors(image),
        flesh_tone_percentage=shares["flesh_tone"],
        face_structure_percentage=shares["face_structure"],
        hair_percentage=shares["hair"],
        clothing_percentage=shares["clothing"],
        animal_feature_percentage=shares["animal"],
        human_score=human_score,
        animal_score=animal_score,
        image_type=classify_image_type(
            shares["flesh_tone"], human_score, animal_score, brightness, colorfulness
        ),
    )


def dominant_colors(image: Image.Image, count: int = DOMINANT_COLOR_COUNT) -> tuple[str, ...]:
    """Most frequent quantized colours, formatted as "rgb(r,g,b)".

    Channels are floored to multiples of 32. Equal counts keep the order in
    which the colours first appear in the image.
    """
    pixels = np.asarray(image, dtype=np.int64).reshape(-1, 3)
    quantized = pixels // COLOR_BUCKET_SIZE * COLOR_BUCKET_SIZE
    keys = (quantized[:, 0] << 16) | (quantized[:, 1] << 8) | quantized[:, 2]
    buckets, first_seen, counts = np.unique(keys, return_index=True, return_counts=True)
    order = np.lexsort((first_seen, -counts))[:count]
    return tuple(
        f"rgb({key >> 16},{(key >> 8) & 0xFF},{key & 0xFF})" for key in buckets[order].tolist()
    )


def rank_predictions(
    candidates: Iterable[ClassificationResult],
) -> tuple[ClassificationResult, ...]:
    """Deduplicate, sort and cut candidates to the final prediction list.

    Repeated ids keep their first name and their highest confidence. The top
    three are then lowered by 0.03 per rank and clamped to [0.1, 0.95], which
    leaves confidences non-increasing down the list.
    """
    best: dict[str, ClassificationResult] = {}
    for candidate in candidates:
        existing = best.get(candidate.id)
        if existing is None:
            best[candidate.id] = candidate
        elif candidate.confidence > existing.confidence:
            best[candidate.id] = replace(existing, confidence=candidate.confidence)

    ranked = sorted(best.values(), key=lambda c: c.confidence, reverse=True)[:MAX_PREDICTIONS]
    return tuple(
        replace(
            prediction,
            confidence=min(
                MAX_PREDICTION_CONFIDENCE,
                max(MIN_PREDICTION_CONFIDENCE, prediction.confidence - rank * RANK_CONFIDENCE_STEP),
            ),
        )
        for rank, prediction in enumerate(ranked)
    )


def has_person_hint(filename: str | None) -> bool:
    """True when a file name suggests a photo of a person."""
    if not filename:
        return False
    lower = filename.lower()
    return any(hint in lower for hint in FILENAME_PERSON_HINTS)


class ImageClassifier:
    """Classifies images from pixel statistics.

    Confidence jitter is drawn from ``rng`` so that a seeded generator gives
    reproducible predictions.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        max_dimension: int = IMAGE_MAX_DIMENSION,
        max_bytes: int | None = None,
    ) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._max_dimension = max_dimension
        self._max_bytes = max_bytes

    def analyze(self, data: bytes, filename: str | None = None) -> ImageAnalysisResult:
        """Classify an encoded image.

        Args:
            data: Encoded image bytes.
            filename: Original file name, used only for keyword hints.

        Returns:
            ImageAnalysisResult with up to three ranked predictions.

        Raises:
            InputTooLargeError: If ``data`` exceeds the configured byte ceiling.
            DecodeError: If ``data`` is not a decodable image.
        """
        if self._max_bytes is not None and len(data) > self._max_bytes:
            raise InputTooLargeError(len(data), self._max_bytes)

        image = decode_image(data, self._max_dimension)
        characteristics = characterize(image)
        if characteristics is None:
            return fallback_analysis()

        result = ImageAnalysisResult(
            predictions=self.predict(characteristics, filename),
            dominant_colors=characteristics.dominant_colors,
            image_type=characteristics.image_type,
        )
        logger.debug(
            "Image classified",
            width=characteristics.width,
            height=characteristics.height,
            image_type=result.image_type,
            brightness=round(characteristics.brightness, 2),
            contrast=round(characteristics.contrast, 2),
            colorfulness=round(characteristics.colorfulness, 2),
            average_rgb=tuple(round(c, 1) for c in characteristics.average_rgb),
            human_score=round(characteristics.human_score, 4),
            animal_score=round(characteristics.animal_score, 4),
            top=result.predictions[0].id,
        )
        return result

    def predict(
        self,
        characteristics: ImageCharacteristics,
        filename: str | None = None,
    ) -> tuple[ClassificationResult, ...]:
        """Turn image characteristics into ranked candidate labels."""
        candidates = self._candidates(characteristics)
        if has_person_hint(filename):
            candidates.insert(0, ClassificationResult("person", "Person", FILENAME_HINT_CONFIDENCE))
        return rank_predictions(candidates)

    def _candidates(self, c: ImageCharacteristics) -> list[ClassificationResult]:
        flesh = c.flesh_tone_percentage

        if c.image_type == "person":
            return [
                ClassificationResult("person", "Person", 0.85 + min(0.1, flesh * 2)),
                ClassificationResult("human", "Human", 0.80 + min(0.1, flesh * 1.5)),
                self._jittered("face", 0.75, 0.1)
                if c.has_face_structure
                else self._jittered("portrait", 0.65, 0.15),
            ]

        if c.image_type == "animal":
            if flesh >= FLESH_TONE_PRESENT:
                return [self._jittered("person", 0.75, 0.1), self._jittered("human", 0.65, 0.15)]
            if c.has_animal_features:
                return [
                    self._jittered("animal", 0.80, 0.1),
                    self._jittered("mammal", 0.65, 0.15),
                    self._jittered("pet", 0.55, 0.2),
                ]
            return [self._jittered("wildlife", 0.70, 0.15), self._jittered("creature", 0.60, 0.2)]

        if c.image_type == "landscape":
            return [
                self._jittered("landscape", 0.85, 0.1),
                self._jittered("nature", 0.75, 0.15),
                self._jittered("scenery", 0.65, 0.2),
            ]

        if c.image_type == "object":
            return [
                self._jittered("object", 0.75, 0.1),
                self._jittered("item", 0.65, 0.15),
                self._jittered("artifact", 0.55, 0.2),
            ]

        if flesh > 0.03:
            return [self._jittered("person", 0.70, 0.15), self._jittered("human", 0.60, 0.2)]
        return [self._jittered("unknown", 0.50, 0.2), self._jittered("image", 0.90, 0.05)]

    def _jittered(self, label: str, base: float, spread: float) -> ClassificationResult:
        return ClassificationResult(label, label.capitalize(), base + self._rng.random() * spread)


def fallback_analysis() -> ImageAnalysisResult:
    """Generic result for images that could not be analysed."""
    return ImageAnalysisResult(
        predictions=rank_predictions(
            [
                ClassificationResult("image", "Image", 0.90),
                ClassificationResult("unknown", "Unknown", 0.50),
            ]
        ),
        dominant_colors=(),
        image_type="unknown",
    )


# Convenience function for quick analysis
def analyze_image(
    data: bytes,
    filename: str | None = None,
    *,
    rng: random.Random | None = None,
    max_dimension: int = IMAGE_MAX_DIMENSION,
    max_bytes: int | None = None,
) -> ImageAnalysisResult:
    """Classify an encoded image with a fresh classifier.

    Args:
        data: Encoded image bytes.
        filename: Original file name, used only for keyword hints.
        rng: Source of confidence jitter; a new unseeded generator if None.
        max_dimension: Largest width and height scanned.
        max_bytes: Optional ceiling on ``len(data)``.

    Returns:
        ImageAnalysisResult.
    """
    classifier = ImageClassifier(rng=rng, max_dimension=max_dimension, max_bytes=max_bytes)
    return classifier.analyze(data, filename)
