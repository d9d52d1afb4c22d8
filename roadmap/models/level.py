import enum
from dataclasses import dataclass
from datetime import datetime


class LevelColor(str, enum.Enum):
    success = "success"
    secondary = "secondary"
    primary = "primary"
    accent = "accent"
    warning = "warning"
    danger = "danger"
    purple = "purple"


@dataclass(frozen=True, kw_only=True)
class Level:
    id: str
    level_number: int
    title: str
    description: str | None = None
    color: LevelColor = LevelColor.primary
    progress: int = 0
    is_completed: bool = False
    created_at: datetime
