from typing import Optional

from ..core.config import settings
from .base import (
    ARTISTS_COLLECTION,
    LIKES_COLLECTION,
    TATTOOS_COLLECTION,
    DocumentStore,
)
from .memory import MemoryDocumentStore
from .redis_store import RedisDocumentStore
from .sql import SQLDocumentStore

_store: Optional[DocumentStore] = None


def build_store(backend: Optional[str] = None) -> DocumentStore:
    backend = backend or settings.DOCUMENT_STORE
    if backend == "sql":
        return SQLDocumentStore()
    if backend == "redis":
        return RedisDocumentStore.from_url(settings.REDIS_URL, prefix=settings.REDIS_KEY_PREFIX)
    return MemoryDocumentStore()


def get_store() -> DocumentStore:
    """Process-wide store used by the API dependencies."""
    global _store
    if _store is None:
        _store = build_store()
    return _store


async def close_store() -> None:
    global _store
    if _store is not None:
        await _store.close()
        _store = None


__all__ = [
    "ARTISTS_COLLECTION",
    "LIKES_COLLECTION",
    "TATTOOS_COLLECTION",
    "DocumentStore",
    "MemoryDocumentStore",
    "RedisDocumentStore",
    "SQLDocumentStore",
    "build_store",
    "close_store",
    "get_store",
]
