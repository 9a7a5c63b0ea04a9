import logging
from typing import List, Optional, Union

from ..schemas.artist import Artist, ArtistUpsert
from ..schemas.base import validate_payload
from ..store.base import ARTISTS_COLLECTION, DocumentStore
from ..utils.clock import now_ms
from ..utils.errors import NotFound

logger = logging.getLogger(__name__)


class CRUDArtist:
    async def list_artists(self, store: DocumentStore) -> List[Artist]:
        docs = await store.list(ARTISTS_COLLECTION)
        return [Artist.model_validate(d) for d in docs]

    async def find_artist(self, store: DocumentStore, artist_id: str) -> Optional[Artist]:
        doc = await store.get(ARTISTS_COLLECTION, artist_id)
        return Artist.model_validate(doc) if doc else None

    async def get_artist(self, store: DocumentStore, artist_id: str) -> Artist:
        artist = await self.find_artist(store, artist_id)
        if artist is None:
            raise NotFound("Artist not found.", {"artist_id": "not_found"})
        return artist

    async def get_artist_by_user_id(self, store: DocumentStore, user_id: str) -> Optional[Artist]:
        docs = await store.query(ARTISTS_COLLECTION, "userId", user_id)
        if not docs:
            return None
        if len(docs) > 1:
            logger.warning("User %s owns %d artist records; using %s", user_id, len(docs), docs[0]["id"])
        return Artist.model_validate(docs[0])

    async def upsert_artist(
        self,
        store: DocumentStore,
        profile_in: Union[ArtistUpsert, dict],
        user_id: str,
    ) -> str:
        """Create the caller's artist profile or update the existing one.

        Lookup-before-create keeps one artist per ``user_id``.
        """
        profile = validate_payload(ArtistUpsert, profile_in)
        fields = profile.to_document()
        fields["userId"] = user_id
        fields["updatedAt"] = now_ms()

        existing = await self.get_artist_by_user_id(store, user_id)
        if existing:
            await store.update(ARTISTS_COLLECTION, existing.id, fields)
            logger.info("Updated artist %s for user %s", existing.id, user_id)
            return existing.id

        artist_id = store.new_id(ARTISTS_COLLECTION)
        fields["createdAt"] = fields["updatedAt"]
        await store.set(ARTISTS_COLLECTION, artist_id, fields)
        logger.info("Created artist %s for user %s", artist_id, user_id)
        return artist_id


artist = CRUDArtist()
