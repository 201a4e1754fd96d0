"""Text statistics, word frequency and key-phrase extraction."""

from glimpse.processing.text.models import TextAnalysisReport, TextStatistics, WordFrequency
from glimpse.processing.text.statistics import (
    analyze_text,
    analyze_word_frequency,
    calculate_text_statistics,
    content_words,
    extract_key_phrases,
)

__all__ = [
    "TextAnalysisReport",
    "TextStatistics",
    "WordFrequency",
    "analyze_text",
    "analyze_word_frequency",
    "calculate_text_statistics",
    "content_words",
    "extract_key_phrases",
]
