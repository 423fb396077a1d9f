"""Process-memory content store for extracted PDF text."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable

from pdf_content.domain.stored_document import StoredDocument, new_content_id

logger = logging.getLogger(__name__)

IdFactory = Callable[[], str]


class InMemoryContentStore:
    """Unbounded dict-backed store; contents are lost when the process exits."""

    def __init__(self, *, id_factory: IdFactory = new_content_id) -> None:
        self._id_factory = id_factory
        self._documents: dict[str, StoredDocument] = {}
        self._lock = threading.Lock()

    async def put(self, text: str) -> StoredDocument:
        """Insert text under a fresh id, never replacing an existing entry."""

        with self._lock:
            content_id = self._id_factory()
            while content_id in self._documents:
                logger.warning("content_store_id_collision content_id=%s", content_id)
                content_id = self._id_factory()

            document = StoredDocument(content_id=content_id, text=text)
            self._documents[content_id] = document
        return document

    async def get(self, content_id: str) -> StoredDocument | None:
        with self._lock:
            return self._documents.get(content_id)

    async def count(self) -> int:
        with self._lock:
            return len(self._documents)
