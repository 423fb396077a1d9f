from __future__ import annotations

import logging

import pytest

from pdf_content.application.services.pdf_content_service import PdfContentService
from pdf_content.domain.stored_document import new_content_id
from pdf_content.infrastructure.store.in_memory_content_store import InMemoryContentStore


@pytest.mark.asyncio
async def test_get_content_returns_stored_document() -> None:
    store = InMemoryContentStore()
    document = await store.put("Invoice #123\nTotal: $50")
    service = PdfContentService(content_store=store)

    result = await service.get_content(content_id=document.content_id)

    assert result == document


@pytest.mark.asyncio
async def test_get_content_miss_returns_none_and_is_not_logged_as_error(
    caplog: pytest.LogCaptureFixture,
) -> None:
    service = PdfContentService(content_store=InMemoryContentStore())
    missing_id = new_content_id()

    with caplog.at_level(logging.INFO):
        result = await service.get_content(content_id=missing_id)

    assert result is None
    assert any(missing_id in record.getMessage() for record in caplog.records)
    assert all(record.levelno < logging.WARNING for record in caplog.records)
