"""Unit tests for text statistics, word frequency and key phrases."""

import pytest

from glimpse.processing.sentiment import SentimentLexicon
from glimpse.processing.text import (
    TextStatistics,
    WordFrequency,
    analyze_text,
    analyze_word_frequency,
    calculate_text_statistics,
    content_words,
    extract_key_phrases,
)

SAMPLE = "Hello world. This is a test!\n\nSecond paragraph here?"


class TestCalculateTextStatistics:
    """Tests for calculate_text_statistics."""

    def test_empty_text(self) -> None:
        stats = calculate_text_statistics("")
        assert stats == TextStatistics()
        assert stats.words == 0
        assert stats.lexical_diversity == 0.0

    def test_whitespace_only(self) -> None:
        stats = calculate_text_statistics("  \n\n\t ")
        assert stats.characters == 6
        assert stats.words == 0
        assert stats.sentences == 0
        assert stats.paragraphs == 0
        assert stats.avg_words_per_sentence == 0.0

    def test_sample_counts(self) -> None:
        stats = calculate_text_statistics(SAMPLE)
        assert stats.characters == len(SAMPLE)
        assert stats.words == 9
        assert stats.sentences == 3
        assert stats.paragraphs == 2
        assert stats.avg_words_per_sentence == 3.0
        assert stats.avg_chars_per_word == 4.8
        assert stats.reading_time == 1
        assert stats.unique_words == 9
        assert stats.lexical_diversity == 1.0

    def test_unique_words_fold_case_and_punctuation(self) -> None:
        stats = calculate_text_statistics("The the THE, the.")
        assert stats.words == 4
        assert stats.unique_words == 1
        assert stats.lexical_diversity == 0.25

    def test_reading_time_rounds_up(self) -> None:
        assert calculate_text_statistics("word " * 200).reading_time == 1
        assert calculate_text_statistics("word " * 401).reading_time == 3

    def test_paragraph_break_with_blank_whitespace_line(self) -> None:
        assert calculate_text_statistics("first\n   \nsecond").paragraphs == 2
        assert calculate_text_statistics("first\nsecond").paragraphs == 1

    def test_pure_function(self) -> None:
        assert calculate_text_statistics(SAMPLE) == calculate_text_statistics(SAMPLE)

    def test_rates_round_half_up(self) -> None:
        # 17 chars / 4 words = 4.25
        assert calculate_text_statistics("abcde abcd abcd abcd").avg_chars_per_word == 4.3
        # 1 unique / 8 words = 0.125
        assert calculate_text_statistics("the " * 8).lexical_diversity == 0.13
        # 5 words / 4 sentences = 1.25
        assert calculate_text_statistics("a. b. c. d e.").avg_words_per_sentence == 1.3

    def test_unique_words_strip_accented_letters(self) -> None:
        assert calculate_text_statistics("café caf").unique_words == 1


class TestAnalyzeWordFrequency:
    """Tests for analyze_word_frequency."""

    def test_counts_and_order(self) -> None:
        freqs = analyze_word_frequency("The cat sat on the mat. The cat ran.")
        pairs = [(f.text, f.value) for f in freqs]
        assert pairs == [("cat", 2), ("sat", 1), ("mat", 1), ("ran", 1)]
        assert [f.percentage for f in freqs] == pytest.approx([40.0, 20.0, 20.0, 20.0])

    def test_excludes_stop_words_and_short_tokens(self) -> None:
        assert analyze_word_frequency("it is an ox, so be it") == []
        words = {f.text for f in analyze_word_frequency("Their dog and your cat are here")}
        assert words == {"dog", "cat", "here"}

    def test_punctuation_splits_words(self) -> None:
        freqs = analyze_word_frequency("data-driven DATA")
        assert [(f.text, f.value) for f in freqs] == [("data", 2), ("driven", 1)]

    def test_percentages_sum_to_100(self) -> None:
        text = "Apples and oranges. Apples, pears, plums and apples again; oranges too."
        freqs = analyze_word_frequency(text)
        assert sum(f.percentage for f in freqs) == pytest.approx(100.0)

    def test_empty_text(self) -> None:
        assert analyze_word_frequency("") == []

    def test_accented_letters_split_words(self) -> None:
        freqs = analyze_word_frequency("café café")
        assert [(f.text, f.value) for f in freqs] == [("caf", 2)]

    def test_custom_stop_words(self) -> None:
        lexicon = SentimentLexicon(stop_words={"cat"})
        freqs = analyze_word_frequency("the cat sat", lexicon)
        assert [f.text for f in freqs] == ["the", "sat"]


class TestExtractKeyPhrases:
    """Tests for extract_key_phrases."""

    TEXT = (
        "Machine learning models work. "
        "Machine learning models fail. "
        "Deep machine learning."
    )

    def test_ranked_by_frequency(self) -> None:
        assert extract_key_phrases(self.TEXT) == [
            "machine learning",
            "machine learning models",
            "learning models",
        ]

    def test_max_phrases(self) -> None:
        assert extract_key_phrases(self.TEXT, 1) == ["machine learning"]
        assert extract_key_phrases(self.TEXT, 0) == []

    def test_single_occurrences_dropped(self) -> None:
        assert extract_key_phrases("Quick brown foxes jump over lazy dogs.") == []

    def test_phrases_do_not_cross_sentences(self) -> None:
        text = "Alpha beta. Gamma delta. Alpha beta. Gamma delta."
        phrases = extract_key_phrases(text)
        assert phrases == ["alpha beta", "gamma delta"]
        assert "beta gamma" not in phrases

    def test_stop_words_removed_before_grouping(self) -> None:
        text = "Cloud of data. Cloud and data."
        assert extract_key_phrases(text) == ["cloud data"]

    def test_empty_text(self) -> None:
        assert extract_key_phrases("") == []


class TestContentWords:
    """Tests for content_words filtering."""

    def test_filters(self) -> None:
        assert content_words("The Quick fox is on it") == ["quick", "fox"]


class TestAnalyzeText:
    """Tests for the combined analyze_text report."""

    def test_report_contents(self) -> None:
        text = "Great coffee tastes great. Great coffee, terrible service."
        report = analyze_text(text)
        assert report.statistics == calculate_text_statistics(text)
        assert report.word_frequencies[0] == WordFrequency(
            text="great", value=3, percentage=pytest.approx(37.5)
        )
        assert report.key_phrases == ("great coffee",)
        assert len(report.sentences) == 2
        assert report.overall.distribution.positive == 0.5

    def test_limits(self) -> None:
        text = "one two three four five six seven eight nine ten eleven twelve"
        report = analyze_text(text, word_limit=3, phrase_limit=1)
        assert [f.text for f in report.word_frequencies] == ["one", "two", "three"]
        assert report.key_phrases == ()

    def test_empty(self) -> None:
        report = analyze_text("")
        assert report.statistics == TextStatistics()
        assert report.word_frequencies == ()
        assert report.sentences == ()
        assert report.overall.confidence == 0.0
