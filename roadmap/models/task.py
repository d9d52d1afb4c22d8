from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, kw_only=True)
class Task:
    id: str
    level_id: str
    title: str
    description: str | None = None
    is_completed: bool = False
    order: int = 0
    created_at: datetime
