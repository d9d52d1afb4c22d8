from datetime import datetime
from typing import ClassVar

from pydantic import Field

from roadmap.schemas.common import CamelModel, PatchModel, UtcDateTime


class UserStatsUpdate(PatchModel):
    nullable_fields: ClassVar[frozenset[str]] = frozenset({"last_activity_date"})

    streak_days: int | None = Field(default=None, ge=0)
    last_activity_date: UtcDateTime | None = None
    total_tasks_completed: int | None = Field(default=None, ge=0)
    overall_progress: int | None = Field(default=None, ge=0, le=100)


class UserStatsResponse(CamelModel):
    id: str
    streak_days: int
    last_activity_date: datetime | None
    total_tasks_completed: int
    overall_progress: int
    updated_at: datetime
