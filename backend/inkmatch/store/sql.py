import logging
from typing import Any, Callable, List, Optional

from fastapi.concurrency import run_in_threadpool
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from ..database import SessionLocal, get_db_session
from ..models.document import Document
from ..utils.errors import NotFound, StoreUnavailable
from .base import Doc, DocumentStore, strip_id, with_id

logger = logging.getLogger(__name__)


class SQLDocumentStore(DocumentStore):
    """Documents persisted as JSON rows in a single ``documents`` table.

    SQLAlchemy sessions are blocking, so each call runs on the threadpool
    with its own short-lived session.
    """

    def __init__(self, session_factory: Optional[sessionmaker] = None) -> None:
        self.session_factory = session_factory or SessionLocal

    async def _run(self, fn: Callable[[Session], Any]) -> Any:
        def _call() -> Any:
            with get_db_session(self.session_factory) as db:
                try:
                    return fn(db)
                except SQLAlchemyError:
                    db.rollback()
                    raise

        try:
            return await run_in_threadpool(_call)
        except SQLAlchemyError as exc:
            logger.error("Document store query failed: %s", exc)
            raise StoreUnavailable("Document store is unavailable", {}) from exc

    @staticmethod
    def _row(db: Session, collection: str, doc_id: str) -> Optional[Document]:
        return db.get(Document, (collection, doc_id))

    async def get(self, collection: str, doc_id: str) -> Optional[Doc]:
        def _get(db: Session) -> Optional[Doc]:
            row = self._row(db, collection, doc_id)
            return with_id(row.doc_id, dict(row.data or {})) if row else None

        return await self._run(_get)

    async def list(self, collection: str) -> List[Doc]:
        def _list(db: Session) -> List[Doc]:
            rows = (
                db.query(Document)
                .filter(Document.collection == collection)
                .order_by(Document.created_at, Document.doc_id)
                .all()
            )
            return [with_id(r.doc_id, dict(r.data or {})) for r in rows]

        return await self._run(_list)

    async def query(self, collection: str, field: str, value: Any) -> List[Doc]:
        def _query(db: Session) -> List[Doc]:
            q = db.query(Document).filter(Document.collection == collection)
            if isinstance(value, str):
                q = q.filter(Document.data[field].as_string() == value)
                rows = q.order_by(Document.created_at, Document.doc_id).all()
                return [with_id(r.doc_id, dict(r.data or {})) for r in rows]
            # Non-string comparisons differ across JSON dialects; filter here.
            rows = q.order_by(Document.created_at, Document.doc_id).all()
            return [
                with_id(r.doc_id, dict(r.data or {}))
                for r in rows
                if (r.data or {}).get(field) == value
            ]

        return await self._run(_query)

    async def set(self, collection: str, doc_id: str, fields: Doc, merge: bool = False) -> None:
        body = strip_id(fields)

        def _set(db: Session) -> None:
            row = self._row(db, collection, doc_id)
            if row is None:
                db.add(Document(collection=collection, doc_id=doc_id, data=body))
                try:
                    db.commit()
                    return
                except IntegrityError:
                    # Another writer created the document first; this write lands on top of it.
                    db.rollback()
                    logger.info("Concurrent create of %s/%s, applying write over it", collection, doc_id)
                    row = self._row(db, collection, doc_id)
                    if row is None:
                        db.add(Document(collection=collection, doc_id=doc_id, data=body))
                        db.commit()
                        return
            if merge:
                row.data = {**(row.data or {}), **body}
            else:
                row.data = body
            db.commit()

        await self._run(_set)

    async def update(self, collection: str, doc_id: str, fields: Doc) -> None:
        body = strip_id(fields)

        def _update(db: Session) -> bool:
            row = self._row(db, collection, doc_id)
            if row is None:
                return False
            row.data = {**(row.data or {}), **body}
            db.commit()
            return True

        if not await self._run(_update):
            raise NotFound(f"{collection}/{doc_id} does not exist", {"id": "not_found"})

    async def delete(self, collection: str, doc_id: str) -> None:
        def _delete(db: Session) -> None:
            row = self._row(db, collection, doc_id)
            if row is not None:
                db.delete(row)
                db.commit()

        await self._run(_delete)
