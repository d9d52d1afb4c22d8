from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, kw_only=True)
class UserStats:
    id: str
    streak_days: int = 0
    last_activity_date: datetime | None = None
    total_tasks_completed: int = 0
    overall_progress: int = 0
    updated_at: datetime
