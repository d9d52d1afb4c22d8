from roadmap.schemas.common import CamelModel
from roadmap.schemas.level import LevelResponse


class DashboardResponse(CamelModel):
    current_level: LevelResponse | None
    completed_levels: int
    total_levels: int
    completed_tasks: int
    total_tasks: int
    overall_progress: int
    streak_days: int
