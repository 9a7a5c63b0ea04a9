import asyncio
import copy
from typing import Any, Dict, List, Optional

from ..utils.errors import NotFound
from .base import Doc, DocumentStore, strip_id, with_id


class MemoryDocumentStore(DocumentStore):
    """Process-local store for development and tests.

    Every call yields to the event loop once before touching data, the same
    suspension point a networked store has, so interleavings between
    concurrent coroutines behave like they would against a remote backend.
    """

    def __init__(self) -> None:
        self._collections: Dict[str, Dict[str, Doc]] = {}

    def _bucket(self, collection: str) -> Dict[str, Doc]:
        return self._collections.setdefault(collection, {})

    async def get(self, collection: str, doc_id: str) -> Optional[Doc]:
        await asyncio.sleep(0)
        body = self._bucket(collection).get(doc_id)
        if body is None:
            return None
        return with_id(doc_id, copy.deepcopy(body))

    async def list(self, collection: str) -> List[Doc]:
        await asyncio.sleep(0)
        return [with_id(k, copy.deepcopy(v)) for k, v in self._bucket(collection).items()]

    async def query(self, collection: str, field: str, value: Any) -> List[Doc]:
        await asyncio.sleep(0)
        return [
            with_id(k, copy.deepcopy(v))
            for k, v in self._bucket(collection).items()
            if v.get(field) == value
        ]

    async def set(self, collection: str, doc_id: str, fields: Doc, merge: bool = False) -> None:
        await asyncio.sleep(0)
        bucket = self._bucket(collection)
        body = copy.deepcopy(strip_id(fields))
        if merge and doc_id in bucket:
            bucket[doc_id].update(body)
        else:
            bucket[doc_id] = body

    async def update(self, collection: str, doc_id: str, fields: Doc) -> None:
        await asyncio.sleep(0)
        bucket = self._bucket(collection)
        if doc_id not in bucket:
            raise NotFound(f"{collection}/{doc_id} does not exist", {"id": "not_found"})
        bucket[doc_id].update(copy.deepcopy(strip_id(fields)))

    async def delete(self, collection: str, doc_id: str) -> None:
        await asyncio.sleep(0)
        self._bucket(collection).pop(doc_id, None)
