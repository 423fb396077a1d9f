"""FastAPI router for PDF upload and extracted text retrieval endpoints."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, File, UploadFile

from pdf_content.application.dto.pdf_content_models import (
    PdfContentResponse,
    UploadPdfResponse,
)
from pdf_content.application.services.pdf_content_service import PdfContentService
from pdf_content.application.services.upload_pdf_service import (
    MAX_PDF_UPLOAD_BYTES,
    PdfUpload,
    UploadPdfOutcome,
    UploadPdfResult,
    UploadPdfService,
)
from pdf_content.infrastructure.http.error_handlers import ApiError

UPLOAD_SUCCESS_MESSAGE = "PDF uploaded and processed successfully."

_UPLOAD_CLIENT_ERRORS: dict[UploadPdfOutcome, tuple[int, str]] = {
    UploadPdfOutcome.NO_FILE: (400, "No PDF file uploaded."),
    UploadPdfOutcome.UNSUPPORTED_MEDIA_TYPE: (415, "Only PDF files are allowed!"),
    UploadPdfOutcome.PAYLOAD_TOO_LARGE: (
        413,
        f"File too large. Maximum allowed size is {MAX_PDF_UPLOAD_BYTES // (1024 * 1024)} MiB.",
    ),
    UploadPdfOutcome.MALFORMED_PDF: (400, "Invalid or corrupt PDF file."),
    UploadPdfOutcome.EMPTY_EXTRACTION: (
        400,
        "Could not extract text from the PDF, or the PDF is empty.",
    ),
}


def build_pdf_content_router(
    *,
    upload_service: UploadPdfService,
    content_service: PdfContentService,
) -> APIRouter:
    """Build router exposing PDF upload and content retrieval endpoints."""

    router = APIRouter(prefix="/api", tags=["pdf-content"])

    @router.post("/upload-pdf", response_model=UploadPdfResponse)
    async def upload_pdf(
        pdf: Annotated[UploadFile | None, File()] = None,
    ) -> UploadPdfResponse:
        upload = None
        if pdf is not None:
            try:
                upload = PdfUpload(
                    filename=pdf.filename,
                    content_type=pdf.content_type,
                    payload=await pdf.read(MAX_PDF_UPLOAD_BYTES + 1),
                )
            finally:
                await pdf.close()

        result = await upload_service.upload(upload)
        _raise_api_error_for_upload_result(result)

        assert result.content_id is not None
        return UploadPdfResponse(content_id=result.content_id, message=UPLOAD_SUCCESS_MESSAGE)

    @router.get("/get-pdf-content/{content_id}", response_model=PdfContentResponse)
    async def get_pdf_content(content_id: str) -> PdfContentResponse:
        document = await content_service.get_content(content_id=content_id)
        if document is None:
            raise ApiError(status_code=404, message="PDF content not found for the given ID.")

        return PdfContentResponse(pdf_text=document.text)

    return router


def _raise_api_error_for_upload_result(result: UploadPdfResult) -> None:
    """Map upload service outcomes into HTTP response semantics."""

    if result.outcome is UploadPdfOutcome.STORED:
        return

    if result.outcome is UploadPdfOutcome.EXTRACTION_FAILED:
        raise ApiError(status_code=500, message="Failed to process PDF.", error=result.error)

    status_code, message = _UPLOAD_CLIENT_ERRORS[result.outcome]
    raise ApiError(status_code=status_code, message=message)
