"""Stored document value type and content identifier scheme."""

from __future__ import annotations

from dataclasses import dataclass
from uuid import uuid4


@dataclass(frozen=True)
class StoredDocument:
    """Extracted PDF text kept under a system-generated content id."""

    content_id: str
    text: str


def new_content_id() -> str:
    """Return a random 128-bit identifier in canonical UUID text form."""

    return str(uuid4())
