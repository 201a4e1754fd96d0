"""Custom exceptions for Glimpse."""


class GlimpseError(Exception):
    """Base exception for all Glimpse errors."""

    def __init__(self, message: str, *args: object) -> None:
        self.message = message
        super().__init__(message, *args)


# Analysis errors
class AnalysisError(GlimpseError):
    """Base error for the analyzers."""


class DecodeError(AnalysisError):
    """Bytes could not be decoded as a raster image or a PDF."""


class EmptyDocumentError(AnalysisError):
    """Document decoded but holds no extractable text."""


class InputTooLargeError(AnalysisError):
    """Input exceeds the configured size ceiling."""

    def __init__(self, size: int, limit: int) -> None:
        self.size = size
        self.limit = limit
        super().__init__(f"Input of {size} bytes exceeds limit of {limit} bytes")


# Configuration errors
class LexiconError(GlimpseError):
    """Lexicon override file is unreadable or malformed."""


# Dispatch errors
class UnsupportedFileError(GlimpseError):
    """Uploaded file kind has no analyzer."""
