"""Lexicon-based sentence sentiment analysis."""

from glimpse.processing.sentiment.analyzer import (
    SentimentAnalyzer,
    analyze_sentiment,
    get_overall_sentiment,
    split_sentences,
    tokenize,
)
from glimpse.processing.sentiment.lexicon import SentimentLexicon
from glimpse.processing.sentiment.models import (
    OverallSentiment,
    SentimentDistribution,
    SentimentResult,
)

__all__ = [
    # Analyzer
    "SentimentAnalyzer",
    "analyze_sentiment",
    "get_overall_sentiment",
    "split_sentences",
    "tokenize",
    # Lexicon
    "SentimentLexicon",
    # Models
    "OverallSentiment",
    "SentimentDistribution",
    "SentimentResult",
]
