"""Built-in word lists for lexicon-based sentiment scoring.

All sets are immutable and shared process-wide. Words are stored lowercase;
callers are expected to lowercase tokens before lookup.
"""

from __future__ import annotations

import json
from pathlib import Path

from glimpse.core.exceptions import LexiconError

POSITIVE_WORDS: frozenset[str] = frozenset(
    {
        "good", "great", "excellent", "amazing", "wonderful", "fantastic", "awesome",
        "brilliant", "outstanding", "superb", "magnificent", "marvelous", "terrific",
        "fabulous", "incredible", "love", "like", "enjoy", "happy", "pleased",
        "satisfied", "delighted", "thrilled", "excited", "grateful", "thankful",
        "appreciate", "perfect", "beautiful", "nice", "positive", "success",
        "successful", "win", "winner", "victory", "triumph", "achieve", "accomplished",
        "effective", "efficient", "helpful", "useful", "valuable", "benefit",
        "advantage", "improvement", "better", "best", "superior", "quality", "recommend",
    }
)  # fmt: skip

NEGATIVE_WORDS: frozenset[str] = frozenset(
    {
        "bad", "terrible", "awful", "horrible", "disgusting", "hate", "dislike",
        "despise", "angry", "mad", "furious", "annoyed", "frustrated", "disappointed",
        "sad", "unhappy", "depressed", "worried", "concerned", "afraid", "scared",
        "anxious", "stressed", "problem", "issue", "trouble", "difficulty", "challenge",
        "obstacle", "failure", "fail", "lose", "loss", "defeat", "wrong", "mistake",
        "error", "fault", "blame", "worst", "worse", "inferior", "poor", "low", "weak",
        "useless", "worthless", "waste", "expensive", "costly", "overpriced", "slow",
        "broken", "damaged",
    }
)  # fmt: skip

INTENSIFIERS: frozenset[str] = frozenset(
    {
        "very", "extremely", "incredibly", "absolutely", "completely", "totally",
        "really", "quite", "rather", "pretty", "fairly", "somewhat", "highly",
        "deeply", "truly",
    }
)  # fmt: skip

NEGATORS: frozenset[str] = frozenset(
    {
        "not", "no", "never", "nothing", "nobody", "nowhere", "neither", "nor",
        "hardly", "scarcely", "barely", "seldom", "rarely", "without", "lack", "lacking",
    }
)  # fmt: skip

STOP_WORDS: frozenset[str] = frozenset(
    {
        "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for", "of",
        "with", "by", "from", "up", "about", "into", "through", "during", "before",
        "after", "above", "below", "between", "among", "is", "are", "was", "were",
        "be", "been", "being", "have", "has", "had", "do", "does", "did", "will",
        "would", "could", "should", "may", "might", "must", "can", "shall", "this",
        "that", "these", "those", "i", "you", "he", "she", "it", "we", "they", "me",
        "him", "her", "us", "them", "my", "your", "his", "its", "our", "their",
    }
)  # fmt: skip


class SentimentLexicon:
    """Word sets used by the sentiment and text analyzers."""

    def __init__(
        self,
        positive: frozenset[str] | set[str] | None = None,
        negative: frozenset[str] | set[str] | None = None,
        intensifiers: frozenset[str] | set[str] | None = None,
        negators: frozenset[str] | set[str] | None = None,
        stop_words: frozenset[str] | set[str] | None = None,
    ) -> None:
        """Initialize lexicon with optional custom word sets.

        Args:
            positive: Override default positive words.
            negative: Override default negative words.
            intensifiers: Override default intensifiers.
            negators: Override default negators.
            stop_words: Override default stop words.
        """
        self._positive = _normalize(positive, POSITIVE_WORDS)
        self._negative = _normalize(negative, NEGATIVE_WORDS)
        self._intensifiers = _normalize(intensifiers, INTENSIFIERS)
        self._negators = _normalize(negators, NEGATORS)
        self._stop_words = _normalize(stop_words, STOP_WORDS)

    def is_positive(self, word: str) -> bool:
        return word in self._positive

    def is_negative(self, word: str) -> bool:
        return word in self._negative

    def is_intensifier(self, word: str) -> bool:
        return word in self._intensifiers

    def is_negator(self, word: str) -> bool:
        return word in self._negators

    def is_stop_word(self, word: str) -> bool:
        return word in self._stop_words

    @property
    def size(self) -> int:
        """Number of polarity words (positive plus negative)."""
        return len(self._positive) + len(self._negative)

    @classmethod
    def from_json_file(cls, path: Path | None) -> SentimentLexicon:
        """Load lexicon overrides from a JSON file.

        The file holds an object whose optional keys ``positive``,
        ``negative``, ``intensifiers``, ``negators`` and ``stop_words`` map to
        word lists. Missing keys, or a missing file, keep the built-ins.

        Args:
            path: Path to the JSON file.

        Returns:
            SentimentLexicon instance.

        Raises:
            LexiconError: If the file is not valid JSON or a key does not
                hold a list of strings.
        """
        if path is None or not path.exists():
            return cls()

        try:
            with path.open(encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise LexiconError(f"Lexicon file {path} is not valid JSON: {e}") from e

        if not isinstance(data, dict):
            raise LexiconError(f"Lexicon file {path} must hold a JSON object")

        def words(key: str) -> set[str] | None:
            values = data.get(key)
            if values is None:
                return None
            if not isinstance(values, list) or not all(isinstance(v, str) for v in values):
                raise LexiconError(f"Lexicon key {key!r} in {path} must be a list of strings")
            return set(values)

        return cls(
            positive=words("positive"),
            negative=words("negative"),
            intensifiers=words("intensifiers"),
            negators=words("negators"),
            stop_words=words("stop_words"),
        )


def _normalize(words: frozenset[str] | set[str] | None, default: frozenset[str]) -> frozenset[str]:
    if words is None:
        return default
    return frozenset(w.lower() for w in words)


DEFAULT_LEXICON = SentimentLexicon()
