from roadmap.models.learning_note import LearningNote
from roadmap.models.level import Level, LevelColor
from roadmap.models.schedule import Schedule, ScheduleType
from roadmap.models.task import Task
from roadmap.models.user_stats import UserStats

__all__ = [
    "Level",
    "LevelColor",
    "Task",
    "Schedule",
    "ScheduleType",
    "LearningNote",
    "UserStats",
]
