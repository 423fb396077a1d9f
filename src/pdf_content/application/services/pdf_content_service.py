"""Service layer for retrieving stored PDF text."""

from __future__ import annotations

import logging

from pdf_content.application.ports.content_store_port import ContentStorePort
from pdf_content.domain.stored_document import StoredDocument

logger = logging.getLogger(__name__)


class PdfContentService:
    """Look up previously extracted text by content id."""

    def __init__(self, *, content_store: ContentStorePort) -> None:
        self._content_store = content_store

    async def get_content(self, *, content_id: str) -> StoredDocument | None:
        """Return stored document or None; a miss is an expected outcome."""

        document = await self._content_store.get(content_id)
        if document is None:
            logger.info("pdf_content_not_found content_id=%s", content_id)
            return None

        logger.info(
            "pdf_content_found content_id=%s text_chars=%s",
            content_id,
            len(document.text),
        )
        return document
