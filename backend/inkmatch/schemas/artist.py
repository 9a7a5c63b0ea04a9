# inkmatch/schemas/artist.py

from pydantic import Field, field_validator
from typing import Optional

from .base import DocumentModel


#
# ─── 1. SHARED FIELDS FOR CREATION/UPDATE ──────────────────────────────────
#
class ArtistBase(DocumentModel):
    name: Optional[str] = None
    location: Optional[str] = None
    bio: Optional[str] = None
    instagram: Optional[str] = None
    website: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None

    @field_validator("*", mode="before")
    def strip_strings(cls, v):
        if isinstance(v, str):
            v = v.strip()
            return v or None
        return v


class ArtistUpsert(ArtistBase):
    # A profile always has a display name and a home location.
    name: str = Field(..., min_length=1, max_length=200)
    location: str = Field(..., min_length=1, max_length=200)


#
# ─── 2. RESPONSE MODEL ─────────────────────────────────────────────────────
#
class Artist(ArtistBase):
    id: str
    name: str
    user_id: Optional[str] = None
    created_at: Optional[int] = None
    updated_at: Optional[int] = None
