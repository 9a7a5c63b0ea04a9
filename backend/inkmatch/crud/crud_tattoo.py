import logging
from typing import List, Optional, Union

from ..schemas.base import validate_payload
from ..schemas.tattoo import Tattoo, TattooCreate, TattooUpdate
from ..services import ownership
from ..store.base import TATTOOS_COLLECTION, DocumentStore
from ..utils.clock import now_ms
from ..utils.errors import NotFound, PermissionDenied
from .crud_artist import artist as crud_artist

logger = logging.getLogger(__name__)


class CRUDTattoo:
    async def list_tattoos(self, store: DocumentStore) -> List[Tattoo]:
        return [Tattoo.model_validate(d) for d in await store.list(TATTOOS_COLLECTION)]

    async def find_tattoo(self, store: DocumentStore, tattoo_id: str) -> Optional[Tattoo]:
        doc = await store.get(TATTOOS_COLLECTION, tattoo_id)
        return Tattoo.model_validate(doc) if doc else None

    async def get_tattoo(self, store: DocumentStore, tattoo_id: str) -> Tattoo:
        tattoo = await self.find_tattoo(store, tattoo_id)
        if tattoo is None:
            raise NotFound("Tattoo not found.", {"tattoo_id": "not_found"})
        return tattoo

    async def list_tattoos_by_artist(self, store: DocumentStore, artist_id: str) -> List[Tattoo]:
        docs = await store.query(TATTOOS_COLLECTION, "artistId", artist_id)
        return [Tattoo.model_validate(d) for d in docs]

    async def list_my_tattoos(self, store: DocumentStore, user_id: str) -> List[Tattoo]:
        owner = await crud_artist.get_artist_by_user_id(store, user_id)
        if owner is None:
            return []
        return await self.list_tattoos_by_artist(store, owner.id)

    async def upload_tattoo(
        self,
        store: DocumentStore,
        user_id: str,
        tattoo_in: Union[TattooCreate, dict],
    ) -> Tattoo:
        # Validate before touching the store so a bad payload writes nothing.
        payload = validate_payload(TattooCreate, tattoo_in)

        owner = await crud_artist.get_artist_by_user_id(store, user_id)
        if owner is None:
            raise PermissionDenied(
                "Please set up your artist profile first.",
                {"artist": "missing_profile"},
            )

        fields = payload.to_document()
        fields["artistId"] = owner.id
        fields["createdAt"] = fields["updatedAt"] = now_ms()

        tattoo_id = store.new_id(TATTOOS_COLLECTION)
        await store.set(TATTOOS_COLLECTION, tattoo_id, fields)
        logger.info("Artist %s uploaded tattoo %s", owner.id, tattoo_id)
        return Tattoo.model_validate({**fields, "id": tattoo_id})

    async def update_tattoo(
        self,
        store: DocumentStore,
        tattoo_id: str,
        updates: Union[TattooUpdate, dict],
        user_id: str,
    ) -> Tattoo:
        patch = validate_payload(TattooUpdate, updates)
        current = await ownership.OwnershipGuard(store).assert_tattoo_owner(user_id, tattoo_id)

        fields = patch.to_document(exclude_unset=True)
        fields["updatedAt"] = now_ms()
        await store.update(TATTOOS_COLLECTION, tattoo_id, fields)
        logger.info("Tattoo %s updated by user %s: %s", tattoo_id, user_id, sorted(fields))
        return Tattoo.model_validate({**current.to_document(), **fields})

    async def delete_tattoo(self, store: DocumentStore, tattoo_id: str, user_id: str) -> None:
        await ownership.OwnershipGuard(store).assert_tattoo_owner(user_id, tattoo_id)
        await store.delete(TATTOOS_COLLECTION, tattoo_id)
        logger.info("Tattoo %s deleted by user %s", tattoo_id, user_id)


tattoo = CRUDTattoo()
