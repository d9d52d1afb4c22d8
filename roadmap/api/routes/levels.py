from fastapi import APIRouter, Depends, status

from roadmap.api.deps import get_store
from roadmap.schemas.level import LevelCreate, LevelResponse, LevelUpdate
from roadmap.services.level_service import (
    create_level,
    delete_level,
    get_level,
    list_levels,
    update_level,
)
from roadmap.store import MemoryStore

router = APIRouter(prefix="/levels", tags=["levels"])


@router.get("", response_model=list[LevelResponse])
async def list_levels_endpoint(store: MemoryStore = Depends(get_store)):
    return list_levels(store)


@router.get("/{level_id}", response_model=LevelResponse)
async def get_level_endpoint(
    level_id: str,
    store: MemoryStore = Depends(get_store),
):
    return get_level(store, level_id)


@router.post("", response_model=LevelResponse, status_code=status.HTTP_201_CREATED)
async def create_level_endpoint(
    data: LevelCreate,
    store: MemoryStore = Depends(get_store),
):
    return create_level(store, data)


@router.patch("/{level_id}", response_model=LevelResponse)
async def update_level_endpoint(
    level_id: str,
    data: LevelUpdate,
    store: MemoryStore = Depends(get_store),
):
    """Edit a level's descriptive fields. Progress is derived from its tasks."""
    return update_level(store, level_id, data)


@router.delete("/{level_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_level_endpoint(
    level_id: str,
    store: MemoryStore = Depends(get_store),
):
    delete_level(store, level_id)
