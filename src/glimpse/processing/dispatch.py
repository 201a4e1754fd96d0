"""Route uploaded files to the analyzer that understands them."""

from __future__ import annotations

from enum import Enum
from pathlib import PurePath

IMAGE_SUFFIXES = frozenset({".png", ".jpg", ".jpeg", ".gif", ".bmp", ".webp"})
TEXT_SUFFIXES = frozenset({".txt", ".md"})


class FileKind(str, Enum):
    IMAGE = "image"
    TABULAR = "tabular"
    TEXT = "text"
    PDF = "pdf"
    UNKNOWN = "unknown"


def detect_file_kind(filename: str | None, content_type: str | None) -> FileKind:
    """Classify an upload by MIME type, falling back to its file suffix."""
    mime = (content_type or "").split(";")[0].strip().lower()
    suffix = PurePath(filename).suffix.lower() if filename else ""

    if mime.startswith("image/") or suffix in IMAGE_SUFFIXES:
        return FileKind.IMAGE
    if mime == "text/csv" or suffix == ".csv":
        return FileKind.TABULAR
    if mime == "application/pdf" or suffix == ".pdf":
        return FileKind.PDF
    if mime.startswith("text/") or suffix in TEXT_SUFFIXES:
        return FileKind.TEXT
    return FileKind.UNKNOWN


def decode_text(data: bytes) -> str:
    """Decode uploaded text as UTF-8, dropping a BOM and replacing bad bytes."""
    return data.decode("utf-8-sig", errors="replace")
