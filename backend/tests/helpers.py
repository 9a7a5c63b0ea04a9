"""Shared builders for tests (imported as ``helpers``)."""

import asyncio

import fakeredis
from jose import jwt
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from inkmatch.core.config import settings
from inkmatch.models.base import BaseModel
from inkmatch.store import MemoryDocumentStore
from inkmatch.store.base import ARTISTS_COLLECTION, TATTOOS_COLLECTION
from inkmatch.store.redis_store import RedisDocumentStore
from inkmatch.store.sql import SQLDocumentStore
from inkmatch.utils.errors import StoreUnavailable


def make_sql_store(path=None, create_tables: bool = True) -> SQLDocumentStore:
    """SQLite-backed store; in-memory unless ``path`` names a database file."""
    if path is None:
        engine = create_engine(
            "sqlite:///:memory:",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        # Worker threads each get their own connection to the file.
        engine = create_engine(f"sqlite:///{path}", connect_args={"check_same_thread": False, "timeout": 15})
    if create_tables:
        BaseModel.metadata.create_all(engine)
    Session = sessionmaker(bind=engine, expire_on_commit=False)
    return SQLDocumentStore(session_factory=Session)


def fake_redis_client():
    # A private server per test keeps data from leaking between tests.
    return fakeredis.FakeAsyncRedis(server=fakeredis.FakeServer(), decode_responses=True)


def make_redis_store(prefix: str = "test") -> RedisDocumentStore:
    return RedisDocumentStore(fake_redis_client(), prefix=prefix)


def make_token(user_id: str) -> str:
    return jwt.encode({"sub": user_id}, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def auth_headers(user_id: str) -> dict:
    return {"Authorization": f"Bearer {make_token(user_id)}"}


def seed(store, collection: str, doc_id: str, **fields) -> None:
    asyncio.run(store.set(collection, doc_id, fields))


def seed_artist(store, artist_id: str, user_id: str = None, name: str = None) -> None:
    fields = {"name": name or f"Artist {artist_id}", "location": "Berlin"}
    if user_id:
        fields["userId"] = user_id
    seed(store, ARTISTS_COLLECTION, artist_id, **fields)


def seed_tattoo(store, tattoo_id: str, artist_id: str) -> None:
    seed(
        store,
        TATTOOS_COLLECTION,
        tattoo_id,
        artistId=artist_id,
        imageUrl=f"https://img.example.com/{tattoo_id}.jpg",
        description="Fine line rose",
        price=120.0,
        size="Small",
    )


class FailingStore(MemoryDocumentStore):
    """Memory store whose reads fail like an unreachable backend."""

    async def get(self, collection, doc_id):
        raise StoreUnavailable("Document store is unavailable", {})
