"""Pixel-heuristic image classification."""

from glimpse.processing.image.classifier import (
    ImageClassifier,
    analyze_image,
    characterize,
    classify_image_type,
    decode_image,
    dominant_colors,
    fallback_analysis,
    has_person_hint,
    rank_predictions,
)
from glimpse.processing.image.features import (
    FEATURE_PREDICATES,
    is_animal_feature,
    is_clothing_color,
    is_face_structure,
    is_hair_texture,
    is_human_flesh_tone,
)
from glimpse.processing.image.models import (
    ClassificationResult,
    ImageAnalysisResult,
    ImageCharacteristics,
    ImageType,
)

__all__ = [
    # Classifier
    "ImageClassifier",
    "analyze_image",
    "characterize",
    "classify_image_type",
    "decode_image",
    "dominant_colors",
    "fallback_analysis",
    "has_person_hint",
    "rank_predictions",
    # Features
    "FEATURE_PREDICATES",
    "is_animal_feature",
    "is_clothing_color",
    "is_face_structure",
    "is_hair_texture",
    "is_human_flesh_tone",
    # Models
    "ClassificationResult",
    "ImageAnalysisResult",
    "ImageCharacteristics",
    "ImageType",
]
