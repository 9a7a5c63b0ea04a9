from fastapi import APIRouter, Depends, Path, Query
from typing import Any, List, Optional

from ..core.config import settings
from ..crud import artist as crud_artist
from ..crud import tattoo as crud_tattoo
from ..schemas.artist import Artist, ArtistUpsert
from ..schemas.like import TopArtist
from ..schemas.tattoo import Tattoo
from ..services.top_artists import TopArtistsQuery
from ..store import DocumentStore, get_store
from ..utils.errors import NotFound
from .dependencies import get_current_user_id, get_top_artists_query, get_viewer_id

router = APIRouter(tags=["Artists"])


# Static paths are registered before /artists/{artist_id} so they are not
# captured as ids.
@router.get("/artists/top", response_model=List[TopArtist])
async def read_top_artists(
    limit: Optional[int] = Query(None, ge=1, le=settings.TOP_ARTISTS_MAX_LIMIT),
    viewer_id: str = Depends(get_viewer_id),
    query: TopArtistsQuery = Depends(get_top_artists_query),
) -> Any:
    """
    Rank the artists whose tattoos the current viewer liked.
    An empty list means the viewer has not liked anything resolvable yet.
    """
    return await query.get_top_artists(viewer_id, limit=limit)


@router.get("/artists/me", response_model=Artist)
async def read_my_artist_profile(
    store: DocumentStore = Depends(get_store),
    user_id: str = Depends(get_current_user_id),
) -> Any:
    profile = await crud_artist.get_artist_by_user_id(store, user_id)
    if profile is None:
        raise NotFound("Artist profile does not exist. Please create one.", {"artist": "not_found"})
    return profile


@router.put("/artists/me", response_model=Artist)
async def upsert_my_artist_profile(
    *,
    store: DocumentStore = Depends(get_store),
    profile_in: ArtistUpsert,
    user_id: str = Depends(get_current_user_id),
) -> Any:
    """Create the caller's artist profile, or update it if one exists."""
    artist_id = await crud_artist.upsert_artist(store, profile_in, user_id)
    return await crud_artist.get_artist(store, artist_id)


@router.get("/artists", response_model=List[Artist])
async def read_artists(store: DocumentStore = Depends(get_store)) -> Any:
    return await crud_artist.list_artists(store)


@router.get("/artists/{artist_id}", response_model=Artist)
async def read_artist(
    artist_id: str = Path(..., title="The ID of the artist"),
    store: DocumentStore = Depends(get_store),
) -> Any:
    return await crud_artist.get_artist(store, artist_id)


@router.get("/artists/{artist_id}/tattoos", response_model=List[Tattoo])
async def read_artist_tattoos(
    artist_id: str = Path(..., title="The ID of the artist"),
    store: DocumentStore = Depends(get_store),
) -> Any:
    return await crud_tattoo.list_tattoos_by_artist(store, artist_id)
