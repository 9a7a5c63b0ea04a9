from .base import DocumentModel, validate_payload
from .artist import Artist, ArtistBase, ArtistUpsert
from .tattoo import Tattoo, TattooBase, TattooCreate, TattooUpdate
from .like import ArtistScore, Like, LikeSetResponse, LikeState, TopArtist

__all__ = [
    "Artist",
    "ArtistBase",
    "ArtistScore",
    "ArtistUpsert",
    "DocumentModel",
    "Like",
    "LikeSetResponse",
    "LikeState",
    "Tattoo",
    "TattooBase",
    "TattooCreate",
    "TattooUpdate",
    "TopArtist",
    "validate_payload",
]
