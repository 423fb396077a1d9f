"""Port for extracted PDF text storage."""

from __future__ import annotations

from typing import Protocol

from pdf_content.domain.stored_document import StoredDocument


class ContentStorePort(Protocol):
    """Async content store contract."""

    async def put(self, text: str) -> StoredDocument:
        """Store text under a newly generated content id and return the entry."""

    async def get(self, content_id: str) -> StoredDocument | None:
        """Return stored entry for content id, or None when absent."""

    async def count(self) -> int:
        """Return number of stored entries."""
