from fastapi import APIRouter, Depends, Path
from typing import Any

from ..schemas.like import LikeSetResponse, LikeState
from ..services.like_ledger import LikeLedger
from .dependencies import get_like_ledger, get_viewer_id

router = APIRouter(tags=["Likes"])


@router.get("/likes", response_model=LikeSetResponse)
async def read_likes(
    viewer_id: str = Depends(get_viewer_id),
    ledger: LikeLedger = Depends(get_like_ledger),
) -> Any:
    """Return every like recorded for the current viewer."""
    likes = await ledger.get_likes(viewer_id)
    return LikeSetResponse(viewer_id=viewer_id, likes=likes)


@router.get("/likes/{tattoo_id}", response_model=LikeState)
async def read_like_state(
    tattoo_id: str = Path(..., title="The ID of the tattoo"),
    viewer_id: str = Depends(get_viewer_id),
    ledger: LikeLedger = Depends(get_like_ledger),
) -> Any:
    liked = await ledger.is_liked(viewer_id, tattoo_id)
    return LikeState(tattoo_id=tattoo_id, liked=liked)


@router.post("/likes/{tattoo_id}/toggle", response_model=LikeState)
async def toggle_like(
    tattoo_id: str = Path(..., title="The ID of the tattoo to like or unlike"),
    viewer_id: str = Depends(get_viewer_id),
    ledger: LikeLedger = Depends(get_like_ledger),
) -> Any:
    """Flip the like on ``tattoo_id`` and return the resulting state."""
    liked = await ledger.toggle_like(viewer_id, tattoo_id)
    return LikeState(tattoo_id=tattoo_id, liked=liked)


@router.delete("/likes/{tattoo_id}", response_model=LikeState)
async def remove_like(
    tattoo_id: str = Path(..., title="The ID of the tattoo to unlike"),
    viewer_id: str = Depends(get_viewer_id),
    ledger: LikeLedger = Depends(get_like_ledger),
) -> Any:
    liked = await ledger.unlike(viewer_id, tattoo_id)
    return LikeState(tattoo_id=tattoo_id, liked=liked)
