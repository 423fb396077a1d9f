"""PDF text extraction using pypdf."""

from __future__ import annotations

import io

from pypdf import PdfReader
from pypdf.errors import PdfReadError

_UNREADABLE_MESSAGE_MARKERS = ("could not be read", "invalid pdf", "not a pdf")


class PdfTextExtractionError(RuntimeError):
    """Base error for PDF bytes that cannot be turned into usable text."""


class MalformedPdfError(PdfTextExtractionError):
    """Raised when PDF bytes are not a parseable document."""


class EmptyExtractionError(PdfTextExtractionError):
    """Raised when parsing succeeds but yields no non-whitespace text."""


class PdfExtractionFailure(PdfTextExtractionError):
    """Raised for any other internal extraction error."""


class PypdfTextExtractor:
    """Extract textual content from PDF bytes."""

    def extract_text(self, pdf_bytes: bytes) -> str:
        """Return page texts joined in document order or raise PdfTextExtractionError."""

        try:
            reader = PdfReader(io.BytesIO(pdf_bytes))
            chunks: list[str] = []
            for page in reader.pages:
                text = page.extract_text() or ""
                if text:
                    chunks.append(text)
        except PdfReadError as error:
            raise MalformedPdfError(f"PDF could not be read: {error}") from error
        except Exception as error:  # noqa: BLE001
            if _looks_unreadable(error):
                raise MalformedPdfError(f"PDF could not be read: {error}") from error
            raise PdfExtractionFailure(str(error) or type(error).__name__) from error

        text = "\n".join(chunks)
        if not text.strip():
            raise EmptyExtractionError("PDF extraction produced empty text")
        return text


def _looks_unreadable(error: Exception) -> bool:
    """Fallback classification for errors raised without a pypdf error type."""

    message = str(error).lower()
    return any(marker in message for marker in _UNREADABLE_MESSAGE_MARKERS)
