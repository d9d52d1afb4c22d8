from datetime import datetime
from typing import ClassVar

from pydantic import Field

from roadmap.schemas.common import CamelModel, PatchModel


class LearningNoteCreate(CamelModel):
    title: str | None = Field(default=None, max_length=255)
    content: str = Field(min_length=1)
    level_id: str | None = None
    task_id: str | None = None


class LearningNoteUpdate(PatchModel):
    nullable_fields: ClassVar[frozenset[str]] = frozenset(
        {"title", "level_id", "task_id"}
    )

    title: str | None = Field(default=None, max_length=255)
    content: str | None = Field(default=None, min_length=1)
    level_id: str | None = None
    task_id: str | None = None


class LearningNoteResponse(CamelModel):
    id: str
    title: str | None
    content: str
    level_id: str | None
    task_id: str | None
    created_at: datetime
