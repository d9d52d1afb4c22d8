from fastapi import APIRouter, Depends, status

from roadmap.api.deps import get_store
from roadmap.schemas.learning_note import (
    LearningNoteCreate,
    LearningNoteResponse,
    LearningNoteUpdate,
)
from roadmap.services.learning_note_service import (
    create_learning_note,
    delete_learning_note,
    get_learning_note,
    list_learning_notes,
    update_learning_note,
)
from roadmap.store import MemoryStore

router = APIRouter(prefix="/learning-notes", tags=["learning-notes"])


@router.get("", response_model=list[LearningNoteResponse])
async def list_learning_notes_endpoint(store: MemoryStore = Depends(get_store)):
    """Newest notes first."""
    return list_learning_notes(store)


@router.get("/{note_id}", response_model=LearningNoteResponse)
async def get_learning_note_endpoint(
    note_id: str,
    store: MemoryStore = Depends(get_store),
):
    return get_learning_note(store, note_id)


@router.post("", response_model=LearningNoteResponse, status_code=status.HTTP_201_CREATED)
async def create_learning_note_endpoint(
    data: LearningNoteCreate,
    store: MemoryStore = Depends(get_store),
):
    return create_learning_note(store, data)


@router.patch("/{note_id}", response_model=LearningNoteResponse)
async def update_learning_note_endpoint(
    note_id: str,
    data: LearningNoteUpdate,
    store: MemoryStore = Depends(get_store),
):
    return update_learning_note(store, note_id, data)


@router.delete("/{note_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_learning_note_endpoint(
    note_id: str,
    store: MemoryStore = Depends(get_store),
):
    delete_learning_note(store, note_id)
