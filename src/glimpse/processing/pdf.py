"""Text extraction from PDF uploads."""

from __future__ import annotations

import io
from dataclasses import dataclass

from pypdf import PdfReader
from pypdf.errors import PyPdfError

from glimpse.core.constants import DEFAULT_PDF_MAX_PAGES
from glimpse.core.exceptions import DecodeError, EmptyDocumentError
from glimpse.core.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class PdfText:
    """Text pulled from the leading pages of a PDF.

    Attributes:
        text: Page texts joined by blank lines; pages without text are skipped.
        page_count: Pages in the document.
        pages_read: Pages scanned, at most the page cap.
    """

    text: str
    page_count: int
    pages_read: int

    @property
    def truncated(self) -> bool:
        return self.pages_read < self.page_count


def extract_pdf_text(data: bytes, max_pages: int = DEFAULT_PDF_MAX_PAGES) -> PdfText:
    """Extract the text of the first ``max_pages`` pages of a PDF.

    A page that fails to extract is logged and skipped.

    Args:
        data: Encoded PDF.
        max_pages: Largest number of pages read.

    Returns:
        PdfText.

    Raises:
        DecodeError: If the bytes are not a readable PDF.
        EmptyDocumentError: If the PDF has no pages or no extractable text.
    """
    try:
        reader = PdfReader(io.BytesIO(data))
        page_count = len(reader.pages)
    except (PyPdfError, OSError, ValueError) as exc:
        raise DecodeError(f"Cannot read PDF: {exc}") from exc

    if page_count == 0:
        raise EmptyDocumentError("The PDF file contains no pages")

    pages_read = min(page_count, max_pages)
    texts: list[str] = []
    for number in range(pages_read):
        try:
            page_text = reader.pages[number].extract_text()
        except (PyPdfError, ValueError, KeyError) as exc:
            logger.warning("PDF page skipped", page=number + 1, error=str(exc))
            continue
        if page_text and page_text.strip():
            texts.append(page_text.strip())

    if not texts:
        raise EmptyDocumentError("No text could be extracted from the PDF")

    logger.debug("PDF text extracted", page_count=page_count, pages_read=pages_read)
    return PdfText(text="\n\n".join(texts), page_count=page_count, pages_read=pages_read)
