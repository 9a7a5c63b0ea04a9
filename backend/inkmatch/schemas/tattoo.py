from pydantic import ConfigDict, Field, field_validator
from typing import List, Optional

from .base import DocumentModel


def _clean_tags(v):
    if v is None:
        return None
    if isinstance(v, str):
        v = v.split(",")
    tags = [str(t).strip() for t in v if str(t).strip()]
    return tags or None


class TattooBase(DocumentModel):
    image_url: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = None
    location: Optional[str] = None
    style: Optional[str] = None
    tags: Optional[List[str]] = None
    body_part: Optional[str] = None
    color: Optional[bool] = None
    size: Optional[str] = None

    @field_validator("image_url", "description", "location", "style", "body_part", "size", mode="before")
    def strip_strings(cls, v):
        if isinstance(v, str):
            return v.strip() or None
        return v

    @field_validator("tags", mode="before")
    def split_tags(cls, v):
        return _clean_tags(v)


class TattooCreate(TattooBase):
    """Upload payload. The owning artist is taken from the caller."""

    model_config = ConfigDict(extra="forbid")

    image_url: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    price: float = Field(..., gt=0)
    size: str = Field(..., min_length=1)
    color: bool = True


class TattooUpdate(TattooBase):
    # id, artistId and timestamps are not writable.
    model_config = ConfigDict(extra="forbid")

    price: Optional[float] = Field(None, gt=0)

    @field_validator("image_url", "description", "size")
    def not_blank(cls, v):
        # strip_strings turns blanks into None; a provided required field may not be cleared.
        if v is None:
            raise ValueError("must not be blank")
        return v


class Tattoo(TattooBase):
    id: str
    artist_id: str
    image_url: str
    created_at: Optional[int] = None
    updated_at: Optional[int] = None
