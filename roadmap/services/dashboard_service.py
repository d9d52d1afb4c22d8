from roadmap.models import Level
from roadmap.schemas.dashboard import DashboardResponse
from roadmap.schemas.level import LevelResponse
from roadmap.services.progress_service import count_completed, percent
from roadmap.store import MemoryStore


def pick_current_level(levels: list[Level]) -> Level | None:
    """The level the learner is working on.

    First level with partial progress; otherwise the level numbered right
    after the completed ones; otherwise the first level.
    """
    if not levels:
        return None

    for level in levels:
        if 0 < level.progress < 100:
            return level

    completed = sum(1 for level in levels if level.is_completed)
    for level in levels:
        if level.level_number == completed + 1:
            return level
    return levels[0]


def get_dashboard_data(store: MemoryStore) -> DashboardResponse:
    levels = store.levels.list()
    completed_tasks, total_tasks = count_completed(store.tasks.list())
    stats = store.user_stats.get()
    current = pick_current_level(levels)

    return DashboardResponse(
        current_level=LevelResponse.model_validate(current) if current else None,
        completed_levels=sum(1 for level in levels if level.is_completed),
        total_levels=len(levels),
        completed_tasks=completed_tasks,
        total_tasks=total_tasks,
        overall_progress=percent(completed_tasks, total_tasks),
        streak_days=stats.streak_days if stats else 0,
    )
