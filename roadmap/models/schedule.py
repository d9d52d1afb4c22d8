import enum
from dataclasses import dataclass
from datetime import datetime


class ScheduleType(str, enum.Enum):
    weekly = "weekly"
    monthly = "monthly"
    custom = "custom"


@dataclass(frozen=True, kw_only=True)
class Schedule:
    id: str
    title: str
    description: str | None = None
    target_date: datetime
    level_id: str | None = None
    task_id: str | None = None
    type: ScheduleType
    is_completed: bool = False
    created_at: datetime
