"""Per-viewer like storage.

Each viewer owns one ``likes/<viewer_id>`` document holding the full list of
likes. Toggling is a plain read-modify-write of that list with no locking
and no transaction: when two toggles for the same viewer overlap, the one
that writes last wins and the other's change is lost. Callers that need a
stronger guarantee must serialize toggles per viewer themselves.
"""

import logging
from typing import List

from ..schemas.like import Like
from ..store.base import LIKES_COLLECTION, DocumentStore
from ..utils.clock import now_ms

logger = logging.getLogger(__name__)


class LikeLedger:
    def __init__(self, store: DocumentStore) -> None:
        self.store = store

    async def get_likes(self, viewer_id: str) -> List[Like]:
        """Return the viewer's likes in the order they were recorded."""
        doc = await self.store.get(LIKES_COLLECTION, viewer_id)
        if not doc:
            return []
        return [Like.model_validate(item) for item in doc.get("likes") or []]

    async def is_liked(self, viewer_id: str, tattoo_id: str) -> bool:
        likes = await self.get_likes(viewer_id)
        return any(like.tattoo_id == tattoo_id for like in likes)

    async def _write(self, viewer_id: str, likes: List[Like]) -> None:
        await self.store.set(
            LIKES_COLLECTION,
            viewer_id,
            {"likes": [like.to_document() for like in likes], "updatedAt": now_ms()},
            merge=True,
        )

    async def toggle_like(self, viewer_id: str, tattoo_id: str) -> bool:
        """Flip ``tattoo_id`` in the viewer's set and return the new state."""
        current = await self.get_likes(viewer_id)
        liked = any(like.tattoo_id == tattoo_id for like in current)

        if liked:
            updated = [like for like in current if like.tattoo_id != tattoo_id]
        else:
            updated = current + [Like(tattoo_id=tattoo_id, timestamp=now_ms())]

        await self._write(viewer_id, updated)
        logger.info(
            "Viewer %s %s tattoo %s (%d likes)",
            viewer_id,
            "unliked" if liked else "liked",
            tattoo_id,
            len(updated),
        )
        return not liked

    async def unlike(self, viewer_id: str, tattoo_id: str) -> bool:
        """Remove ``tattoo_id`` if present. Always returns ``False``."""
        current = await self.get_likes(viewer_id)
        updated = [like for like in current if like.tattoo_id != tattoo_id]
        if len(updated) != len(current):
            await self._write(viewer_id, updated)
            logger.info("Viewer %s unliked tattoo %s", viewer_id, tattoo_id)
        return False
