from datetime import datetime
from typing import ClassVar

from pydantic import Field

from roadmap.schemas.common import CamelModel, PatchModel


class TaskCreate(CamelModel):
    level_id: str = Field(min_length=1)
    title: str = Field(min_length=1, max_length=255)
    description: str | None = None
    is_completed: bool = False
    order: int = 0


class TaskUpdate(PatchModel):
    nullable_fields: ClassVar[frozenset[str]] = frozenset({"description"})

    level_id: str | None = Field(default=None, min_length=1)
    title: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    is_completed: bool | None = None
    order: int | None = None


class TaskResponse(CamelModel):
    id: str
    level_id: str
    title: str
    description: str | None
    is_completed: bool
    order: int
    created_at: datetime
