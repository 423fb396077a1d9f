"""Port for PDF text extraction."""

from __future__ import annotations

from typing import Protocol


class TextExtractorPort(Protocol):
    """Synchronous PDF bytes to text contract.

    Implementations raise subclasses of
    ``pdf_content.infrastructure.pdf.text_extractor.PdfTextExtractionError``.
    """

    def extract_text(self, pdf_bytes: bytes) -> str:
        """Return concatenated text of every page in document order."""
