from datetime import datetime
from typing import ClassVar

from pydantic import Field

from roadmap.models import LevelColor
from roadmap.schemas.common import CamelModel, PatchModel


class LevelCreate(CamelModel):
    level_number: int = Field(ge=1)
    title: str = Field(min_length=1, max_length=255)
    description: str | None = None
    color: LevelColor = LevelColor.primary


class LevelUpdate(PatchModel):
    nullable_fields: ClassVar[frozenset[str]] = frozenset({"description"})

    level_number: int | None = Field(default=None, ge=1)
    title: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    color: LevelColor | None = None


class LevelResponse(CamelModel):
    id: str
    level_number: int
    title: str
    description: str | None
    color: LevelColor
    progress: int
    is_completed: bool
    created_at: datetime
