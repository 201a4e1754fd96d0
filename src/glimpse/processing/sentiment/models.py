"""Data models for sentence-level sentiment results."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from glimpse.core.constants import (
    MAX_SENTENCE_CONFIDENCE,
    MIN_SENTENCE_CONFIDENCE,
    NEGATIVE_THRESHOLD,
    POSITIVE_THRESHOLD,
)

SentimentLabel = Literal["positive", "neutral", "negative"]


def label_for(sentiment: float) -> SentimentLabel:
    """Bucket a sentiment score into a polarity label."""
    if sentiment > POSITIVE_THRESHOLD:
        return "positive"
    if sentiment < NEGATIVE_THRESHOLD:
        return "negative"
    return "neutral"


@dataclass(frozen=True, slots=True)
class SentimentResult:
    """Sentiment of a single sentence.

    Attributes:
        sentence: Sentence text for display, cut to 100 characters plus "...".
        sentiment: Score from -1.0 (most negative) to 1.0 (most positive).
        confidence: Confidence from 0.3 to 0.95, driven by lexicon coverage.
        positive_words: Words that pushed the score up, in order of appearance.
        negative_words: Words that pushed the score down, in order of appearance.
    """

    sentence: str
    sentiment: float
    confidence: float
    positive_words: tuple[str, ...] = field(default_factory=tuple)
    negative_words: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        """Validate score ranges."""
        if not -1.0 <= self.sentiment <= 1.0:
            raise ValueError(f"sentiment must be in [-1.0, 1.0], got {self.sentiment}")
        if not MIN_SENTENCE_CONFIDENCE <= self.confidence <= MAX_SENTENCE_CONFIDENCE:
            raise ValueError(
                f"confidence must be in [{MIN_SENTENCE_CONFIDENCE}, {MAX_SENTENCE_CONFIDENCE}], "
                f"got {self.confidence}"
            )

    @property
    def label(self) -> SentimentLabel:
        return label_for(self.sentiment)


@dataclass(frozen=True, slots=True)
class SentimentDistribution:
    """Fraction of sentences in each polarity bucket."""

    positive: float = 0.0
    neutral: float = 0.0
    negative: float = 0.0


@dataclass(frozen=True, slots=True)
class OverallSentiment:
    """Document-level aggregate of sentence results.

    Attributes:
        overall: Confidence-weighted mean of sentence sentiment.
        confidence: Plain mean of sentence confidence.
        distribution: Share of positive, neutral and negative sentences.
    """

    overall: float = 0.0
    confidence: float = 0.0
    distribution: SentimentDistribution = field(default_factory=SentimentDistribution)
