import logging
from collections.abc import Iterable
from datetime import date, datetime, timedelta, timezone

from roadmap.models import Level, Task
from roadmap.store import MemoryStore, utcnow

logger = logging.getLogger(__name__)


def percent(part: int, whole: int) -> int:
    """Integer percentage of part over whole, rounded half up. 0 when whole is 0."""
    if whole <= 0:
        return 0
    return (200 * part + whole) // (2 * whole)


def calculate_level_progress(tasks: Iterable[Task]) -> tuple[int, bool]:
    """Return (progress, is_completed) for the tasks owned by one level."""
    tasks = list(tasks)
    completed = sum(1 for task in tasks if task.is_completed)
    progress = percent(completed, len(tasks))
    return progress, progress == 100


def recalculate_level(store: MemoryStore, level_id: str) -> Level | None:
    """Re-derive a level's progress from its tasks.

    Does nothing for a level that no longer exists.
    """
    level = store.levels.get(level_id)
    if level is None:
        logger.debug("Skipping progress update for missing level %s", level_id)
        return None

    progress, is_completed = calculate_level_progress(store.tasks.by_level(level_id))
    updated = store.levels.update(
        level_id, {"progress": progress, "is_completed": is_completed},
    )
    if is_completed and not level.is_completed:
        logger.info("Level %d (%s) completed", level.level_number, level.title)
    return updated


def next_streak(streak_days: int, last_activity: datetime | None, today: date) -> int:
    """Streak length after activity on ``today``."""
    if last_activity is not None:
        last_day = last_activity.astimezone(timezone.utc).date()
        if last_day == today:
            return max(streak_days, 1)
        if last_day == today - timedelta(days=1):
            return streak_days + 1
    return 1


def count_completed(tasks: Iterable[Task]) -> tuple[int, int]:
    """Return (completed, total) over the given tasks."""
    completed = total = 0
    for task in tasks:
        total += 1
        if task.is_completed:
            completed += 1
    return completed, total


def refresh_user_stats(
    store: MemoryStore, previous: Task, current: Task | None,
) -> None:
    """Roll task totals into UserStats. ``current`` is None for a deleted task."""
    completed, total = count_completed(store.tasks.list())
    changes = {
        "total_tasks_completed": completed,
        "overall_progress": percent(completed, total),
    }

    if current is not None and current.is_completed and not previous.is_completed:
        now = utcnow()
        stats = store.user_stats.get()
        changes["streak_days"] = next_streak(
            stats.streak_days if stats else 0,
            stats.last_activity_date if stats else None,
            now.date(),
        )
        changes["last_activity_date"] = now

    store.user_stats.update(changes)


def register_progress_listeners(
    store: MemoryStore, *, track_user_stats: bool = True,
) -> None:
    """Hook progress recomputation onto task completion, moves and deletions."""

    def update_levels(previous: Task, current: Task) -> None:
        recalculate_level(store, current.level_id)
        if previous.level_id != current.level_id:
            recalculate_level(store, previous.level_id)

    store.tasks.add_completion_listener(update_levels)
    store.tasks.add_removal_listener(lambda task: recalculate_level(store, task.level_id))

    if track_user_stats:
        store.tasks.add_completion_listener(
            lambda previous, current: refresh_user_stats(store, previous, current)
        )
        store.tasks.add_removal_listener(
            lambda task: refresh_user_stats(store, task, None)
        )
