"""Data models for text statistics and the combined text report."""

from __future__ import annotations

from dataclasses import dataclass, field

from glimpse.processing.sentiment.models import OverallSentiment, SentimentResult


@dataclass(frozen=True, slots=True)
class WordFrequency:
    """Occurrence count of a content word.

    Attributes:
        text: The word, lowercased.
        value: Number of occurrences.
        percentage: Share of all content words, 0 to 100.
    """

    text: str
    value: int
    percentage: float


@dataclass(frozen=True, slots=True)
class TextStatistics:
    """Counts and rates describing a document."""

    characters: int = 0
    words: int = 0
    sentences: int = 0
    paragraphs: int = 0
    avg_words_per_sentence: float = 0.0
    avg_chars_per_word: float = 0.0
    reading_time: int = 0  # minutes
    unique_words: int = 0
    lexical_diversity: float = 0.0


@dataclass(frozen=True, slots=True)
class TextAnalysisReport:
    """Everything the text analyzers produce for one document."""

    statistics: TextStatistics
    word_frequencies: tuple[WordFrequency, ...] = field(default_factory=tuple)
    key_phrases: tuple[str, ...] = field(default_factory=tuple)
    sentences: tuple[SentimentResult, ...] = field(default_factory=tuple)
    overall: OverallSentiment = field(default_factory=OverallSentiment)
