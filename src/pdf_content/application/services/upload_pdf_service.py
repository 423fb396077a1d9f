"""Service layer for PDF upload: validate, extract, store."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from enum import StrEnum

from pdf_content.application.ports.content_store_port import ContentStorePort
from pdf_content.application.ports.text_extractor_port import TextExtractorPort
from pdf_content.infrastructure.pdf.text_extractor import (
    EmptyExtractionError,
    MalformedPdfError,
)

PDF_MEDIA_TYPE = "application/pdf"
MAX_PDF_UPLOAD_BYTES = 10 * 1024 * 1024

logger = logging.getLogger(__name__)


class UploadPdfOutcome(StrEnum):
    """Supported upload outcomes."""

    STORED = "stored"
    NO_FILE = "no_file"
    UNSUPPORTED_MEDIA_TYPE = "unsupported_media_type"
    PAYLOAD_TOO_LARGE = "payload_too_large"
    MALFORMED_PDF = "malformed_pdf"
    EMPTY_EXTRACTION = "empty_extraction"
    EXTRACTION_FAILED = "extraction_failed"


@dataclass(frozen=True)
class PdfUpload:
    """Uploaded file part as received from the client."""

    filename: str | None
    content_type: str | None
    payload: bytes


@dataclass(frozen=True)
class UploadPdfResult:
    """Upload result model."""

    outcome: UploadPdfOutcome
    content_id: str | None = None
    error: str | None = None


class UploadPdfService:
    """Validate an uploaded PDF, extract its text and store it."""

    def __init__(
        self,
        *,
        text_extractor: TextExtractorPort,
        content_store: ContentStorePort,
        max_upload_bytes: int = MAX_PDF_UPLOAD_BYTES,
    ) -> None:
        self._text_extractor = text_extractor
        self._content_store = content_store
        self._max_upload_bytes = max_upload_bytes

    async def upload(self, upload: PdfUpload | None) -> UploadPdfResult:
        """Run the upload pipeline; the store is written only after extraction succeeds."""

        if upload is None:
            logger.warning("pdf_upload_rejected reason=no_file")
            return UploadPdfResult(outcome=UploadPdfOutcome.NO_FILE)

        if _media_type(upload.content_type) != PDF_MEDIA_TYPE:
            logger.warning(
                "pdf_upload_rejected reason=unsupported_media_type filename=%s content_type=%s",
                upload.filename,
                upload.content_type,
            )
            return UploadPdfResult(outcome=UploadPdfOutcome.UNSUPPORTED_MEDIA_TYPE)

        if len(upload.payload) > self._max_upload_bytes:
            logger.warning(
                "pdf_upload_rejected reason=payload_too_large filename=%s bytes=%s limit=%s",
                upload.filename,
                len(upload.payload),
                self._max_upload_bytes,
            )
            return UploadPdfResult(outcome=UploadPdfOutcome.PAYLOAD_TOO_LARGE)

        logger.info(
            "pdf_upload_received filename=%s bytes=%s",
            upload.filename,
            len(upload.payload),
        )

        try:
            extracted_text = await asyncio.to_thread(
                self._text_extractor.extract_text,
                upload.payload,
            )
            if not extracted_text.strip():
                raise EmptyExtractionError("PDF extraction produced empty text")
        except MalformedPdfError as error:
            logger.warning(
                "pdf_upload_extract_malformed filename=%s error=%s",
                upload.filename,
                error,
            )
            return UploadPdfResult(outcome=UploadPdfOutcome.MALFORMED_PDF, error=str(error))
        except EmptyExtractionError as error:
            logger.warning("pdf_upload_extract_empty filename=%s", upload.filename)
            return UploadPdfResult(outcome=UploadPdfOutcome.EMPTY_EXTRACTION, error=str(error))
        except Exception as error:  # noqa: BLE001
            logger.exception("pdf_upload_extract_failed filename=%s", upload.filename)
            return UploadPdfResult(
                outcome=UploadPdfOutcome.EXTRACTION_FAILED,
                error=str(error) or type(error).__name__,
            )
        logger.info(
            "pdf_upload_extract_ok filename=%s text_chars=%s",
            upload.filename,
            len(extracted_text),
        )

        document = await self._content_store.put(extracted_text)
        logger.info(
            "pdf_upload_stored content_id=%s store_entries=%s",
            document.content_id,
            await self._content_store.count(),
        )
        return UploadPdfResult(outcome=UploadPdfOutcome.STORED, content_id=document.content_id)


def _media_type(content_type: str | None) -> str:
    """Return the lowercased media type without parameters."""

    if not content_type:
        return ""
    return content_type.split(";", 1)[0].strip().lower()
