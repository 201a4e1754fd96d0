"""FastAPI dependencies for dependency injection."""

from __future__ import annotations

import random
from typing import Annotated

from fastapi import Depends, HTTPException

from glimpse.config import Settings, get_settings
from glimpse.core.exceptions import LexiconError
from glimpse.core.logging import get_logger
from glimpse.processing.sentiment.lexicon import SentimentLexicon

logger = get_logger(__name__)

# Type aliases for cleaner dependency injection
SettingsDep = Annotated[Settings, Depends(get_settings)]

# Module-level singleton (initialised lazily on first use)
_lexicon: SentimentLexicon | None = None


def get_lexicon(settings: SettingsDep) -> SentimentLexicon:
    """Get or create the singleton lexicon, honouring LEXICON_PATH."""
    global _lexicon
    if _lexicon is None:
        try:
            _lexicon = SentimentLexicon.from_json_file(settings.lexicon_path)
        except LexiconError as e:
            logger.error("Lexicon load failed", path=str(settings.lexicon_path), error=e.message)
            raise HTTPException(status_code=500, detail=e.message) from e
    return _lexicon


def get_rng(settings: SettingsDep) -> random.Random:
    """Fresh jitter source per request, seeded when RANDOM_SEED is set."""
    return random.Random(settings.random_seed)


# Annotated dependencies for use in route handlers
LexiconDep = Annotated[SentimentLexicon, Depends(get_lexicon)]
RngDep = Annotated[random.Random, Depends(get_rng)]
