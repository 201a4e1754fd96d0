"""Text statistics, word frequency and key-phrase extraction."""

from __future__ import annotations

import math
import re
from collections import Counter

from glimpse.core.constants import (
    DEFAULT_KEY_PHRASE_LIMIT,
    DEFAULT_MAX_PHRASES,
    DEFAULT_WORD_FREQUENCY_LIMIT,
    MIN_CONTENT_WORD_LENGTH,
    WORDS_PER_MINUTE,
)
from glimpse.core.logging import get_logger
from glimpse.processing.sentiment.analyzer import (
    SentimentAnalyzer,
    get_overall_sentiment,
    split_sentences,
    tokenize,
)
from glimpse.processing.sentiment.lexicon import DEFAULT_LEXICON, SentimentLexicon
from glimpse.processing.text.models import TextAnalysisReport, TextStatistics, WordFrequency

logger = get_logger(__name__)

_PARAGRAPH_SPLIT = re.compile(r"\n\s*\n")
# ASCII word characters only; accented letters are stripped
_NON_WORD_CHAR = re.compile(r"\W", re.ASCII)


def _round_half_up(value: float, digits: int) -> float:
    scale = 10**digits
    return math.floor(value * scale + 0.5) / scale


def content_words(text: str, lexicon: SentimentLexicon = DEFAULT_LEXICON) -> list[str]:
    """Tokenize text and keep only words that carry content.

    Drops stop words and anything shorter than three characters.
    """
    return [
        word
        for word in tokenize(text)
        if len(word) >= MIN_CONTENT_WORD_LENGTH and not lexicon.is_stop_word(word)
    ]


def calculate_text_statistics(text: str) -> TextStatistics:
    """Compute counts and reading rates for text.

    Args:
        text: Document text.

    Returns:
        TextStatistics; every field is zero for empty text.
    """
    words = text.split()
    sentences = split_sentences(text)
    paragraphs = [p for p in _PARAGRAPH_SPLIT.split(text) if p.strip()]
    unique_words = len({_NON_WORD_CHAR.sub("", w.lower()) for w in words})

    word_count = len(words)
    avg_words_per_sentence = word_count / len(sentences) if sentences else 0.0
    avg_chars_per_word = sum(len(w) for w in words) / word_count if word_count else 0.0
    lexical_diversity = unique_words / word_count if word_count else 0.0

    return TextStatistics(
        characters=len(text),
        words=word_count,
        sentences=len(sentences),
        paragraphs=len(paragraphs),
        avg_words_per_sentence=_round_half_up(avg_words_per_sentence, 1),
        avg_chars_per_word=_round_half_up(avg_chars_per_word, 1),
        reading_time=math.ceil(word_count / WORDS_PER_MINUTE),
        unique_words=unique_words,
        lexical_diversity=_round_half_up(lexical_diversity, 2),
    )


def analyze_word_frequency(
    text: str, lexicon: SentimentLexicon = DEFAULT_LEXICON
) -> list[WordFrequency]:
    """Count content words, most frequent first.

    Ties keep the order in which the words first appear.

    Args:
        text: Document text.
        lexicon: Supplies the stop-word set.

    Returns:
        List of WordFrequency whose percentages sum to 100.
    """
    words = content_words(text, lexicon)
    total = len(words)
    # Counter preserves first-seen order and most_common() sorts stably
    counts = Counter(words)
    return [
        WordFrequency(text=word, value=count, percentage=count / total * 100)
        for word, count in counts.most_common()
    ]


def extract_key_phrases(
    text: str,
    max_phrases: int = DEFAULT_MAX_PHRASES,
    lexicon: SentimentLexicon = DEFAULT_LEXICON,
) -> list[str]:
    """Find bigrams and trigrams of content words that recur in text.

    N-grams are built inside each sentence and never span a sentence break.

    Args:
        text: Document text.
        max_phrases: Maximum number of phrases to return.
        lexicon: Supplies the stop-word set.

    Returns:
        Phrases seen more than once, most frequent first.
    """
    if max_phrases <= 0:
        return []

    phrases: Counter[str] = Counter()
    for sentence in split_sentences(text):
        words = content_words(sentence, lexicon)
        for i in range(len(words) - 1):
            phrases[" ".join(words[i : i + 2])] += 1
            if i < len(words) - 2:
                phrases[" ".join(words[i : i + 3])] += 1

    return [phrase for phrase, count in phrases.most_common() if count > 1][:max_phrases]


def analyze_text(
    text: str,
    *,
    word_limit: int = DEFAULT_WORD_FREQUENCY_LIMIT,
    phrase_limit: int = DEFAULT_KEY_PHRASE_LIMIT,
    lexicon: SentimentLexicon | None = None,
) -> TextAnalysisReport:
    """Run every text analyzer over one document.

    Args:
        text: Document text.
        word_limit: Number of top word frequencies to keep.
        phrase_limit: Number of key phrases to keep.
        lexicon: Custom lexicon or None for defaults.

    Returns:
        TextAnalysisReport combining statistics, frequencies, phrases and sentiment.
    """
    lexicon = lexicon if lexicon is not None else DEFAULT_LEXICON
    sentences = SentimentAnalyzer(lexicon).analyze(text)
    report = TextAnalysisReport(
        statistics=calculate_text_statistics(text),
        word_frequencies=tuple(analyze_word_frequency(text, lexicon)[:word_limit]),
        key_phrases=tuple(extract_key_phrases(text, phrase_limit, lexicon)),
        sentences=tuple(sentences),
        overall=get_overall_sentiment(sentences),
    )
    logger.debug(
        "Text analyzed",
        words=report.statistics.words,
        sentences=report.statistics.sentences,
        key_phrases=len(report.key_phrases),
    )
    return report
