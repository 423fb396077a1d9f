"""Pydantic models for PDF upload and retrieval HTTP contracts."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class StrictModel(BaseModel):
    """Base model with strict unknown-field rejection."""

    model_config = ConfigDict(extra="forbid")


class UploadPdfResponse(StrictModel):
    """HTTP response model for a successful PDF upload."""

    content_id: str = Field(min_length=1, serialization_alias="contentId")
    message: str


class PdfContentResponse(StrictModel):
    """HTTP response model for stored PDF text retrieval."""

    pdf_text: str = Field(serialization_alias="pdfText")


class ErrorResponse(StrictModel):
    """Error body: human-readable message plus diagnostic for server errors."""

    message: str
    error: str | None = None
