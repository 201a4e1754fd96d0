"""Text analysis endpoints: sentiment, statistics, frequencies, phrases.

Analysis runs in a worker thread so long texts do not stall the event loop.
"""

from __future__ import annotations

import asyncio
from dataclasses import asdict

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from glimpse.config import Settings
from glimpse.core.dependencies import LexiconDep, SettingsDep
from glimpse.core.logging import get_logger
from glimpse.processing.sentiment import (
    SentimentAnalyzer,
    SentimentLexicon,
    get_overall_sentiment,
)
from glimpse.processing.text import (
    analyze_text,
    analyze_word_frequency,
    calculate_text_statistics,
    extract_key_phrases,
)

logger = get_logger(__name__)

router = APIRouter()


class TextRequest(BaseModel):
    text: str = Field(description="Plain text to analyze")


class WordFrequencyRequest(TextRequest):
    limit: int | None = Field(default=None, gt=0, description="Keep only the top N words")


class KeyPhraseRequest(TextRequest):
    max_phrases: int | None = Field(default=None, gt=0, description="Maximum phrases returned")


def ensure_text_size(text: str, settings: Settings) -> None:
    """Reject text longer than MAX_TEXT_CHARS with 413."""
    if len(text) > settings.max_text_chars:
        logger.warning("Text rejected", length=len(text), limit=settings.max_text_chars)
        raise HTTPException(
            status_code=413,
            detail=f"Text of {len(text)} characters exceeds limit of {settings.max_text_chars}",
        )


def _sentiment_payload(text: str, lexicon: SentimentLexicon) -> dict[str, object]:
    results = SentimentAnalyzer(lexicon).analyze(text)
    return {
        "sentences": [asdict(r) for r in results],
        "overall": asdict(get_overall_sentiment(results)),
    }


async def analyze_text_report(
    text: str, settings: Settings, lexicon: SentimentLexicon
) -> dict[str, object]:
    """Run the full text report off the event loop."""
    report = await asyncio.to_thread(
        analyze_text,
        text,
        word_limit=settings.word_frequency_limit,
        phrase_limit=settings.key_phrase_limit,
        lexicon=lexicon,
    )
    return asdict(report)


@router.post("/sentiment")
async def sentiment(
    body: TextRequest, settings: SettingsDep, lexicon: LexiconDep
) -> dict[str, object]:
    ensure_text_size(body.text, settings)
    return await asyncio.to_thread(_sentiment_payload, body.text, lexicon)


@router.post("/statistics")
async def statistics(body: TextRequest, settings: SettingsDep) -> dict[str, object]:
    ensure_text_size(body.text, settings)
    stats = await asyncio.to_thread(calculate_text_statistics, body.text)
    return asdict(stats)


@router.post("/word-frequency")
async def word_frequency(
    body: WordFrequencyRequest, settings: SettingsDep, lexicon: LexiconDep
) -> list[dict[str, object]]:
    ensure_text_size(body.text, settings)
    limit = body.limit or settings.word_frequency_limit
    frequencies = await asyncio.to_thread(analyze_word_frequency, body.text, lexicon)
    return [asdict(f) for f in frequencies[:limit]]


@router.post("/key-phrases")
async def key_phrases(
    body: KeyPhraseRequest, settings: SettingsDep, lexicon: LexiconDep
) -> dict[str, list[str]]:
    ensure_text_size(body.text, settings)
    max_phrases = body.max_phrases or settings.key_phrase_limit
    phrases = await asyncio.to_thread(extract_key_phrases, body.text, max_phrases, lexicon)
    return {"phrases": phrases}


@router.post("/analyze")
async def analyze(
    body: TextRequest, settings: SettingsDep, lexicon: LexiconDep
) -> dict[str, object]:
    ensure_text_size(body.text, settings)
    return await analyze_text_report(body.text, settings, lexicon)
