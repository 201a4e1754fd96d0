"""Core utilities: logging, exceptions, constants."""

from glimpse.core.exceptions import (
    AnalysisError,
    DecodeError,
    EmptyDocumentError,
    GlimpseError,
    InputTooLargeError,
    LexiconError,
    UnsupportedFileError,
)
from glimpse.core.logging import get_logger, setup_logging

__all__ = [
    "AnalysisError",
    "DecodeError",
    "EmptyDocumentError",
    "GlimpseError",
    "InputTooLargeError",
    "LexiconError",
    "UnsupportedFileError",
    "get_logger",
    "setup_logging",
]
