from typing import List

from pydantic import Field

from .artist import Artist
from .base import DocumentModel


class Like(DocumentModel):
    tattoo_id: str
    timestamp: int = Field(..., description="Epoch milliseconds when the like was recorded")


class LikeSetResponse(DocumentModel):
    viewer_id: str
    likes: List[Like] = Field(default_factory=list)


class LikeState(DocumentModel):
    tattoo_id: str
    liked: bool


class ArtistScore(DocumentModel):
    """Per-viewer ranking metric for one artist. Never persisted."""

    artist_id: str
    score: float = 0
    liked_tattoos: int = 0


class TopArtist(ArtistScore):
    artist: Artist
