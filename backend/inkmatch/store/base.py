"""Async document-store contract shared by every backend.

Documents are plain dicts. Reads return a fresh copy that always carries the
document's ``id``; the ``id`` key is never persisted inside the body.
"""

from __future__ import annotations

import abc
import uuid
from typing import Any, Dict, List, Optional

ARTISTS_COLLECTION = "artists"
TATTOOS_COLLECTION = "tattoos"
LIKES_COLLECTION = "likes"

Doc = Dict[str, Any]


class DocumentStore(abc.ABC):
    @abc.abstractmethod
    async def get(self, collection: str, doc_id: str) -> Optional[Doc]:
        """Return the document or ``None`` when absent."""

    @abc.abstractmethod
    async def list(self, collection: str) -> List[Doc]:
        """Return every document in ``collection``."""

    @abc.abstractmethod
    async def query(self, collection: str, field: str, value: Any) -> List[Doc]:
        """Return documents whose top-level ``field`` equals ``value``."""

    @abc.abstractmethod
    async def set(self, collection: str, doc_id: str, fields: Doc, merge: bool = False) -> None:
        """Create or replace a document.

        With ``merge=True`` top-level keys of ``fields`` overwrite those of the
        existing document and every other key is kept.
        """

    @abc.abstractmethod
    async def update(self, collection: str, doc_id: str, fields: Doc) -> None:
        """Merge ``fields`` into an existing document; ``NotFound`` if absent."""

    @abc.abstractmethod
    async def delete(self, collection: str, doc_id: str) -> None:
        """Remove a document. Deleting a missing document is a no-op."""

    def new_id(self, collection: str) -> str:
        return uuid.uuid4().hex

    async def close(self) -> None:
        return None


def with_id(doc_id: str, body: Doc) -> Doc:
    doc = {k: v for k, v in body.items() if k != "id"}
    doc["id"] = doc_id
    return doc


def strip_id(fields: Doc) -> Doc:
    return {k: v for k, v in fields.items() if k != "id"}
