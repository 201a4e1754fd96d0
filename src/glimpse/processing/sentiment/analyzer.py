"""Lexicon-based sentence sentiment analyzer.

Each sentence is scored on its own: lexicon hits count one point towards
their polarity, an intensifier directly in front scales the hit by 1.5, and
a negator within the two preceding words flips the polarity.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from glimpse.core.constants import (
    CONFIDENCE_BOOST,
    INTENSIFIER_MULTIPLIER,
    MAX_SENTENCE_CONFIDENCE,
    MIN_SENTENCE_CONFIDENCE,
    NEGATION_WINDOW,
    SENTENCE_DISPLAY_LENGTH,
)
from glimpse.core.logging import get_logger
from glimpse.processing.sentiment.lexicon import DEFAULT_LEXICON, SentimentLexicon
from glimpse.processing.sentiment.models import (
    OverallSentiment,
    SentimentDistribution,
    SentimentResult,
)

logger = get_logger(__name__)

_SENTENCE_SPLIT = re.compile(r"[.!?]+")
_NON_WORD = re.compile(r"[^\w\s]", re.ASCII)


def split_sentences(text: str) -> list[str]:
    """Split text on runs of terminal punctuation, dropping empty pieces."""
    return [s.strip() for s in _SENTENCE_SPLIT.split(text) if s.strip()]


def tokenize(sentence: str) -> list[str]:
    """Lowercase a sentence and split it into words, punctuation removed."""
    return _NON_WORD.sub(" ", sentence.lower()).split()


class SentimentAnalyzer:
    """Scores text sentence by sentence against a sentiment lexicon."""

    def __init__(self, lexicon: SentimentLexicon | None = None) -> None:
        """Initialize analyzer with lexicon.

        Args:
            lexicon: Custom lexicon or None for defaults.
        """
        self._lexicon = lexicon if lexicon is not None else DEFAULT_LEXICON

    def analyze(self, text: str) -> list[SentimentResult]:
        """Analyze sentiment of every sentence in text.

        Args:
            text: Text to analyze.

        Returns:
            One SentimentResult per non-empty sentence, in order.
        """
        sentences = split_sentences(text)
        results = [self._score_sentence(sentence) for sentence in sentences]
        logger.debug("Sentiment analyzed", sentences=len(results))
        return results

    def _score_sentence(self, sentence: str) -> SentimentResult:
        words = tokenize(sentence)

        positive_score = 0.0
        negative_score = 0.0
        positive_words: list[str] = []
        negative_words: list[str] = []

        for i, word in enumerate(words):
            is_positive = self._lexicon.is_positive(word)
            is_negative = not is_positive and self._lexicon.is_negative(word)
            if not (is_positive or is_negative):
                continue

            multiplier = self._intensity(words, i)
            # A negated negative word counts as positive and vice versa
            if is_positive != self._is_negated(words, i):
                positive_score += multiplier
                positive_words.append(word)
            else:
                negative_score += multiplier
                negative_words.append(word)

        total_score = positive_score + negative_score
        sentiment = 0.0
        confidence = 0.0
        if total_score > 0:
            sentiment = (positive_score - negative_score) / total_score
            confidence = min(total_score / len(words), 1.0)

        confidence = max(
            MIN_SENTENCE_CONFIDENCE,
            min(MAX_SENTENCE_CONFIDENCE, confidence + CONFIDENCE_BOOST),
        )

        return SentimentResult(
            sentence=_truncate(sentence),
            sentiment=sentiment,
            confidence=confidence,
            positive_words=tuple(positive_words),
            negative_words=tuple(negative_words),
        )

    def _intensity(self, words: list[str], index: int) -> float:
        if index > 0 and self._lexicon.is_intensifier(words[index - 1]):
            return INTENSIFIER_MULTIPLIER
        return 1.0

    def _is_negated(self, words: list[str], index: int) -> bool:
        start = max(0, index - NEGATION_WINDOW)
        return any(self._lexicon.is_negator(w) for w in words[start:index])

    @property
    def lexicon(self) -> SentimentLexicon:
        """Get the lexicon used by this analyzer."""
        return self._lexicon


def _truncate(sentence: str) -> str:
    if len(sentence) > SENTENCE_DISPLAY_LENGTH:
        return sentence[:SENTENCE_DISPLAY_LENGTH] + "..."
    return sentence


def get_overall_sentiment(results: Sequence[SentimentResult]) -> OverallSentiment:
    """Aggregate sentence results into a document-level sentiment.

    Args:
        results: Sentence results, typically from ``analyze_sentiment``.

    Returns:
        OverallSentiment; all zeros when ``results`` is empty.
    """
    if not results:
        return OverallSentiment()

    total_weight = sum(r.confidence for r in results)
    weighted_sum = sum(r.sentiment * r.confidence for r in results)
    overall = weighted_sum / total_weight if total_weight > 0 else 0.0

    counts = {"positive": 0, "neutral": 0, "negative": 0}
    for result in results:
        counts[result.label] += 1

    total = len(results)
    return OverallSentiment(
        overall=overall,
        confidence=total_weight / total,
        distribution=SentimentDistribution(
            positive=counts["positive"] / total,
            neutral=counts["neutral"] / total,
            negative=counts["negative"] / total,
        ),
    )


# Convenience function for quick analysis
def analyze_sentiment(text: str) -> list[SentimentResult]:
    """Analyze sentiment of text using the default lexicon.

    Args:
        text: Text to analyze.

    Returns:
        List of SentimentResult, one per sentence.
    """
    return SentimentAnalyzer().analyze(text)
