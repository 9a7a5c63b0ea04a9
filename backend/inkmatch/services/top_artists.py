"""Service for ranking the artists a viewer's likes point to."""

import asyncio
import logging
from typing import Dict, List, Optional

from ..core.config import settings
from ..crud.crud_artist import artist as crud_artist
from ..crud.crud_tattoo import tattoo as crud_tattoo
from ..schemas.like import ArtistScore, TopArtist
from ..store.base import DocumentStore
from ..utils.errors import ValidationFailed
from .like_ledger import LikeLedger
from .scoring import score

logger = logging.getLogger(__name__)


def rank(scores: Dict[str, ArtistScore], limit: int) -> List[ArtistScore]:
    """Highest score first; ties broken by ascending artist id."""
    ordered = sorted(scores.values(), key=lambda s: (-s.score, s.artist_id))
    return ordered[:limit]


class TopArtistsQuery:
    """Provide the artists whose work a viewer liked most.

    Scores are recomputed from the current likes and catalog on every call.
    An empty result means the viewer has no resolvable likes yet; store
    failures propagate as ``StoreUnavailable`` instead.
    """

    def __init__(self, store: DocumentStore, ledger: Optional[LikeLedger] = None) -> None:
        self.store = store
        self.ledger = ledger or LikeLedger(store)

    async def _tattoo_owners(self, tattoo_ids: List[str]) -> Dict[str, str]:
        tattoos = await asyncio.gather(*(crud_tattoo.find_tattoo(self.store, t) for t in tattoo_ids))
        return {t.id: t.artist_id for t in tattoos if t is not None}

    async def get_top_artists(self, viewer_id: str, limit: Optional[int] = None) -> List[TopArtist]:
        if limit is None:
            limit = settings.TOP_ARTISTS_LIMIT
        elif limit < 1:
            raise ValidationFailed("limit must be at least 1", {"limit": "must be at least 1"})
        likes = await self.ledger.get_likes(viewer_id)
        if not likes:
            return []

        owners = await self._tattoo_owners([like.tattoo_id for like in likes])
        ranked = rank(score(likes, owners), limit)

        artists = await asyncio.gather(*(crud_artist.find_artist(self.store, s.artist_id) for s in ranked))
        result: List[TopArtist] = []
        for entry, artist in zip(ranked, artists):
            if artist is None:
                logger.info("Dropping score for missing artist %s", entry.artist_id)
                continue
            result.append(TopArtist(**entry.model_dump(), artist=artist))
        return result
