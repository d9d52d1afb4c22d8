from datetime import datetime
from typing import ClassVar

from pydantic import Field

from roadmap.models import ScheduleType
from roadmap.schemas.common import CamelModel, PatchModel, UtcDateTime


class ScheduleCreate(CamelModel):
    title: str = Field(min_length=1, max_length=255)
    description: str | None = None
    target_date: UtcDateTime
    level_id: str | None = None
    task_id: str | None = None
    type: ScheduleType
    is_completed: bool = False


class ScheduleUpdate(PatchModel):
    nullable_fields: ClassVar[frozenset[str]] = frozenset(
        {"description", "level_id", "task_id"}
    )

    title: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    target_date: UtcDateTime | None = None
    level_id: str | None = None
    task_id: str | None = None
    type: ScheduleType | None = None
    is_completed: bool | None = None


class ScheduleResponse(CamelModel):
    id: str
    title: str
    description: str | None
    target_date: datetime
    level_id: str | None
    task_id: str | None
    type: ScheduleType
    is_completed: bool
    created_at: datetime
