from fastapi import HTTPException, status

from roadmap.models import Level
from roadmap.schemas.level import LevelCreate, LevelUpdate
from roadmap.store import MemoryStore


def _ensure_level_number_free(
    store: MemoryStore, level_number: int, exclude_id: str | None = None,
) -> None:
    for level in store.levels.list():
        if level.level_number == level_number and level.id != exclude_id:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Level number {level_number} already exists",
            )


def list_levels(store: MemoryStore) -> list[Level]:
    return store.levels.list()


def get_level(store: MemoryStore, level_id: str) -> Level:
    level = store.levels.get(level_id)
    if level is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Level not found",
        )
    return level


def create_level(store: MemoryStore, data: LevelCreate) -> Level:
    _ensure_level_number_free(store, data.level_number)
    # A new level owns no tasks yet.
    return store.levels.create(**data.model_dump(), progress=0, is_completed=False)


def update_level(store: MemoryStore, level_id: str, data: LevelUpdate) -> Level:
    changes = data.changes()
    if "level_number" in changes:
        _ensure_level_number_free(store, changes["level_number"], exclude_id=level_id)
    level = store.levels.update(level_id, changes)
    if level is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Level not found",
        )
    return level


def delete_level(store: MemoryStore, level_id: str) -> None:
    # Tasks, schedules and notes referring to the level are left in place.
    if not store.levels.delete(level_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Level not found",
        )
