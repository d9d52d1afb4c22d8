from fastapi import HTTPException, status

from roadmap.models import LearningNote
from roadmap.schemas.learning_note import LearningNoteCreate, LearningNoteUpdate
from roadmap.store import MemoryStore


def _not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="Learning note not found",
    )


def list_learning_notes(store: MemoryStore) -> list[LearningNote]:
    return store.learning_notes.list()


def get_learning_note(store: MemoryStore, note_id: str) -> LearningNote:
    note = store.learning_notes.get(note_id)
    if note is None:
        raise _not_found()
    return note


def create_learning_note(store: MemoryStore, data: LearningNoteCreate) -> LearningNote:
    return store.learning_notes.create(**data.model_dump())


def update_learning_note(
    store: MemoryStore, note_id: str, data: LearningNoteUpdate,
) -> LearningNote:
    note = store.learning_notes.update(note_id, data.changes())
    if note is None:
        raise _not_found()
    return note


def delete_learning_note(store: MemoryStore, note_id: str) -> None:
    if not store.learning_notes.delete(note_id):
        raise _not_found()
