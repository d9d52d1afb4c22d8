from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, kw_only=True)
class LearningNote:
    id: str
    title: str | None = None
    content: str
    level_id: str | None = None
    task_id: str | None = None
    created_at: datetime
