"""Application configuration via pydantic-settings."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from glimpse.core.constants import (
    DEFAULT_IMAGE_DECODE_TIMEOUT,
    DEFAULT_KEY_PHRASE_LIMIT,
    DEFAULT_MAX_TEXT_CHARS,
    DEFAULT_MAX_UPLOAD_BYTES,
    DEFAULT_PDF_MAX_PAGES,
    DEFAULT_WORD_FREQUENCY_LIMIT,
    IMAGE_MAX_DIMENSION,
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    # Core
    env: Literal["development", "staging", "production"] = Field(
        default="development", alias="GLIMPSE_ENV"
    )
    debug: bool = Field(
        default=False,
        alias="GLIMPSE_DEBUG",
        description="Log at DEBUG whatever GLIMPSE_LOG_LEVEL says",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", alias="GLIMPSE_LOG_LEVEL"
    )

    # Input ceilings
    max_upload_bytes: int = Field(
        default=DEFAULT_MAX_UPLOAD_BYTES,
        gt=0,
        description="Uploads above this size are rejected before decoding",
    )
    max_text_chars: int = Field(
        default=DEFAULT_MAX_TEXT_CHARS,
        gt=0,
        description="Longest text accepted by the text endpoints",
    )

    # Image classifier
    image_max_dimension: int = Field(
        default=IMAGE_MAX_DIMENSION,
        gt=0,
        description="Images are downsampled so neither side exceeds this",
    )
    image_decode_timeout: float = Field(
        default=DEFAULT_IMAGE_DECODE_TIMEOUT,
        gt=0,
        description="Seconds allowed for decoding and scanning one image",
    )
    random_seed: int | None = Field(
        default=None,
        description="Seed for prediction jitter; unset means nondeterministic",
    )

    # Text analysis
    word_frequency_limit: int = Field(default=DEFAULT_WORD_FREQUENCY_LIMIT, gt=0)
    key_phrase_limit: int = Field(default=DEFAULT_KEY_PHRASE_LIMIT, gt=0)
    lexicon_path: Path | None = Field(
        default=None,
        description="Optional JSON file overriding the built-in sentiment lexicon",
    )

    # Documents
    pdf_max_pages: int = Field(
        default=DEFAULT_PDF_MAX_PAGES,
        gt=0,
        description="Only the first N pages of a PDF are read",
    )

    @field_validator("random_seed", "lexicon_path", mode="before")
    @classmethod
    def empty_string_is_none(cls, v: object) -> object:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @property
    def is_production(self) -> bool:
        return self.env == "production"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
