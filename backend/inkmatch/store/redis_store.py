import json
import logging
from typing import Any, List, Optional

from redis import asyncio as aioredis
from redis.exceptions import RedisError

from ..utils.errors import NotFound, StoreUnavailable
from .base import Doc, DocumentStore, strip_id, with_id

logger = logging.getLogger(__name__)


class RedisDocumentStore(DocumentStore):
    """Documents kept as JSON strings, one key per document.

    Layout::

        <prefix>:<collection>:<id>     JSON body
        <prefix>:<collection>:__ids__  set of ids in the collection

    ``set`` with merge is a GET followed by a SET, so it carries the same
    last-writer-wins semantics as every other backend.
    """

    def __init__(self, client: "aioredis.Redis", prefix: str = "inkmatch") -> None:
        self.client = client
        self.prefix = prefix

    @classmethod
    def from_url(cls, url: str, prefix: str = "inkmatch") -> "RedisDocumentStore":
        client = aioredis.from_url(
            url,
            decode_responses=True,
            socket_connect_timeout=2,
            socket_timeout=5,
            health_check_interval=30,
            retry_on_timeout=True,
        )
        return cls(client, prefix=prefix)

    def _key(self, collection: str, doc_id: str) -> str:
        return f"{self.prefix}:{collection}:{doc_id}"

    def _ids_key(self, collection: str) -> str:
        return f"{self.prefix}:{collection}:__ids__"

    @staticmethod
    def _unavailable(exc: RedisError) -> StoreUnavailable:
        logger.error("Redis document store call failed: %s", exc)
        return StoreUnavailable("Document store is unavailable", {})

    async def _read(self, collection: str, doc_id: str) -> Optional[Doc]:
        raw = await self.client.get(self._key(collection, doc_id))
        if raw is None:
            return None
        return json.loads(raw)

    async def get(self, collection: str, doc_id: str) -> Optional[Doc]:
        try:
            body = await self._read(collection, doc_id)
        except RedisError as exc:
            raise self._unavailable(exc) from exc
        return with_id(doc_id, body) if body is not None else None

    async def list(self, collection: str) -> List[Doc]:
        try:
            ids = sorted(await self.client.smembers(self._ids_key(collection)))
            if not ids:
                return []
            raws = await self.client.mget([self._key(collection, i) for i in ids])
        except RedisError as exc:
            raise self._unavailable(exc) from exc
        # Ids whose body vanished between the two calls are skipped.
        return [with_id(i, json.loads(raw)) for i, raw in zip(ids, raws) if raw is not None]

    async def query(self, collection: str, field: str, value: Any) -> List[Doc]:
        return [doc for doc in await self.list(collection) if doc.get(field) == value]

    async def set(self, collection: str, doc_id: str, fields: Doc, merge: bool = False) -> None:
        body = strip_id(fields)
        try:
            if merge:
                existing = await self._read(collection, doc_id)
                if existing is not None:
                    body = {**existing, **body}
            async with self.client.pipeline(transaction=True) as pipe:
                pipe.set(self._key(collection, doc_id), json.dumps(body))
                pipe.sadd(self._ids_key(collection), doc_id)
                await pipe.execute()
        except RedisError as exc:
            raise self._unavailable(exc) from exc

    async def update(self, collection: str, doc_id: str, fields: Doc) -> None:
        try:
            existing = await self._read(collection, doc_id)
            if existing is None:
                raise NotFound(f"{collection}/{doc_id} does not exist", {"id": "not_found"})
            body = {**existing, **strip_id(fields)}
            await self.client.set(self._key(collection, doc_id), json.dumps(body))
        except RedisError as exc:
            raise self._unavailable(exc) from exc

    async def delete(self, collection: str, doc_id: str) -> None:
        try:
            async with self.client.pipeline(transaction=True) as pipe:
                pipe.delete(self._key(collection, doc_id))
                pipe.srem(self._ids_key(collection), doc_id)
                await pipe.execute()
        except RedisError as exc:
            raise self._unavailable(exc) from exc

    async def close(self) -> None:
        await self.client.aclose()
