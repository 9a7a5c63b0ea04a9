"""Ownership checks for artist-side writes.

The check is read-then-compare: a write issued after a successful check is
not protected against a concurrent change of ownership.
"""

import logging
from typing import Optional

from ..crud.crud_artist import artist as crud_artist
from ..schemas.artist import Artist
from ..schemas.tattoo import Tattoo
from ..store.base import TATTOOS_COLLECTION, DocumentStore
from ..utils.errors import NotFound, PermissionDenied

logger = logging.getLogger(__name__)


class OwnershipGuard:
    def __init__(self, store: DocumentStore) -> None:
        self.store = store

    async def assert_ownership(self, acting_user_id: str, resource_artist_id: str) -> Artist:
        """Return the acting user's artist when it owns ``resource_artist_id``."""
        acting: Optional[Artist] = await crud_artist.get_artist_by_user_id(self.store, acting_user_id)
        if acting is None or acting.id != resource_artist_id:
            logger.warning(
                "User %s denied write on resources of artist %s",
                acting_user_id,
                resource_artist_id,
            )
            raise PermissionDenied("You do not have permission to modify this tattoo.", {})
        return acting

    async def assert_tattoo_owner(self, acting_user_id: str, tattoo_id: str) -> Tattoo:
        """Load ``tattoo_id`` and ensure ``acting_user_id`` owns it.

        Raises ``NotFound`` when the tattoo does not exist and
        ``PermissionDenied`` when it belongs to another artist.
        """
        doc = await self.store.get(TATTOOS_COLLECTION, tattoo_id)
        if doc is None:
            raise NotFound("Tattoo not found.", {"tattoo_id": "not_found"})
        tattoo = Tattoo.model_validate(doc)
        await self.assert_ownership(acting_user_id, tattoo.artist_id)
        return tattoo
