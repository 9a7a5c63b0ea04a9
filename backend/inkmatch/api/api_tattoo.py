from fastapi import APIRouter, Depends, Path, Response, status
from typing import Any, List

from ..crud import tattoo as crud_tattoo
from ..schemas.tattoo import Tattoo, TattooCreate, TattooUpdate
from ..store import DocumentStore, get_store
from .dependencies import get_current_user_id

router = APIRouter(tags=["Tattoos"])


@router.get("/tattoos", response_model=List[Tattoo])
async def read_tattoos(store: DocumentStore = Depends(get_store)) -> Any:
    return await crud_tattoo.list_tattoos(store)


@router.get("/tattoos/mine", response_model=List[Tattoo])
async def read_my_tattoos(
    store: DocumentStore = Depends(get_store),
    user_id: str = Depends(get_current_user_id),
) -> Any:
    """Tattoos of the caller's artist profile; empty if there is no profile."""
    return await crud_tattoo.list_my_tattoos(store, user_id)


@router.get("/tattoos/{tattoo_id}", response_model=Tattoo)
async def read_tattoo(
    tattoo_id: str = Path(..., title="The ID of the tattoo"),
    store: DocumentStore = Depends(get_store),
) -> Any:
    return await crud_tattoo.get_tattoo(store, tattoo_id)


@router.post("/tattoos", response_model=Tattoo, status_code=status.HTTP_201_CREATED)
async def upload_tattoo(
    *,
    store: DocumentStore = Depends(get_store),
    tattoo_in: TattooCreate,
    user_id: str = Depends(get_current_user_id),
) -> Any:
    return await crud_tattoo.upload_tattoo(store, user_id, tattoo_in)


@router.patch("/tattoos/{tattoo_id}", response_model=Tattoo)
async def update_tattoo(
    *,
    tattoo_id: str = Path(..., title="The ID of the tattoo to update"),
    store: DocumentStore = Depends(get_store),
    updates: TattooUpdate,
    user_id: str = Depends(get_current_user_id),
) -> Any:
    """Update a tattoo. Only the owning artist may do this."""
    return await crud_tattoo.update_tattoo(store, tattoo_id, updates, user_id)


@router.delete("/tattoos/{tattoo_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_tattoo(
    *,
    tattoo_id: str = Path(..., title="The ID of the tattoo to delete"),
    store: DocumentStore = Depends(get_store),
    user_id: str = Depends(get_current_user_id),
) -> Response:
    await crud_tattoo.delete_tattoo(store, tattoo_id, user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
