from datetime import date, datetime, timezone

import pytest

from roadmap.core.bootstrap import build_store
from roadmap.services.progress_service import (
    calculate_level_progress,
    next_streak,
    percent,
    recalculate_level,
)


@pytest.mark.parametrize(
    "part, whole, expected",
    [
        (0, 0, 0),
        (0, 5, 0),
        (1, 3, 33),
        (2, 3, 67),
        (1, 8, 13),
        (1, 2, 50),
        (5, 5, 100),
        (199, 200, 100),
    ],
)
def test_percent_rounds_half_up(part, whole, expected):
    assert percent(part, whole) == expected


def test_level_without_tasks_has_zero_progress():
    assert calculate_level_progress([]) == (0, False)


def test_level_progress_from_tasks(level, make_tasks):
    assert calculate_level_progress(make_tasks(level.id, 3, completed=1)) == (33, False)


def test_all_tasks_complete_marks_level_complete(level, make_tasks):
    assert calculate_level_progress(make_tasks(level.id, 4, completed=4)) == (100, True)


def test_completing_task_updates_owning_level(store, level, make_tasks):
    tasks = make_tasks(level.id, 3)

    store.tasks.update(tasks[0].id, {"is_completed": True})
    assert store.levels.get(level.id).progress == 33

    store.tasks.update(tasks[1].id, {"is_completed": True})
    assert store.levels.get(level.id).progress == 67
    assert store.levels.get(level.id).is_completed is False

    store.tasks.update(tasks[2].id, {"is_completed": True})
    updated = store.levels.get(level.id)
    assert updated.progress == 100
    assert updated.is_completed is True


def test_toggling_completion_twice_restores_progress(store, level, make_tasks):
    tasks = make_tasks(level.id, 5, completed=2)
    recalculate_level(store, level.id)
    original = store.levels.get(level.id).progress

    store.tasks.update(tasks[4].id, {"is_completed": True})
    assert store.levels.get(level.id).progress != original
    store.tasks.update(tasks[4].id, {"is_completed": False})

    assert store.levels.get(level.id).progress == original


def test_uncompleting_task_clears_level_completion(store, level, make_tasks):
    tasks = make_tasks(level.id, 2)
    for task in tasks:
        store.tasks.update(task.id, {"is_completed": True})
    assert store.levels.get(level.id).is_completed is True

    store.tasks.update(tasks[0].id, {"is_completed": False})

    updated = store.levels.get(level.id)
    assert updated.progress == 50
    assert updated.is_completed is False


def test_update_without_completion_flag_leaves_level_alone(store, level, make_tasks):
    tasks = make_tasks(level.id, 2, completed=1)

    store.tasks.update(tasks[0].id, {"title": "Renamed"})

    # Created with a completed task, but no completion change was made.
    assert store.levels.get(level.id).progress == 0


def test_recalculate_missing_level_is_noop(store):
    assert recalculate_level(store, "no-such-level") is None
    assert store.levels.list() == []


def test_orphaned_task_completion_does_not_fail(store):
    task = store.tasks.create(level_id="gone", title="Orphan")

    updated = store.tasks.update(task.id, {"is_completed": True})

    assert updated.is_completed is True
    assert store.levels.list() == []


def test_moving_task_recalculates_both_levels(store, make_tasks):
    first = store.levels.create(level_number=1, title="First")
    second = store.levels.create(level_number=2, title="Second")
    tasks = make_tasks(first.id, 2)
    make_tasks(second.id, 1)

    store.tasks.update(tasks[0].id, {"is_completed": True})
    assert store.levels.get(first.id).progress == 50

    store.tasks.update(tasks[0].id, {"level_id": second.id, "is_completed": True})

    assert store.levels.get(first.id).progress == 0
    assert store.levels.get(second.id).progress == 50


def test_other_level_fields_are_kept(store, level, make_tasks):
    task = make_tasks(level.id, 1)[0]

    store.tasks.update(task.id, {"is_completed": True})

    updated = store.levels.get(level.id)
    assert updated.title == level.title
    assert updated.level_number == level.level_number
    assert updated.color == level.color
    assert updated.created_at == level.created_at


def test_next_streak_same_day_keeps_count():
    last = datetime(2025, 3, 10, 8, 0, tzinfo=timezone.utc)
    assert next_streak(4, last, date(2025, 3, 10)) == 4


def test_next_streak_same_day_starts_at_one():
    last = datetime(2025, 3, 10, 8, 0, tzinfo=timezone.utc)
    assert next_streak(0, last, date(2025, 3, 10)) == 1


def test_next_streak_consecutive_day_increments():
    last = datetime(2025, 3, 9, 23, 59, tzinfo=timezone.utc)
    assert next_streak(4, last, date(2025, 3, 10)) == 5


def test_next_streak_gap_resets():
    last = datetime(2025, 3, 7, tzinfo=timezone.utc)
    assert next_streak(4, last, date(2025, 3, 10)) == 1


def test_next_streak_without_history():
    assert next_streak(0, None, date(2025, 3, 10)) == 1


def test_completion_rolls_into_user_stats(store, level, make_tasks):
    tasks = make_tasks(level.id, 4)

    store.tasks.update(tasks[0].id, {"is_completed": True})

    stats = store.user_stats.get()
    assert stats.total_tasks_completed == 1
    assert stats.overall_progress == 25
    assert stats.streak_days == 1
    assert stats.last_activity_date is not None


def test_user_stats_rollup_can_be_disabled():
    store = build_store(seed=False, track_user_stats=False)
    level = store.levels.create(level_number=1, title="Basics")
    task = store.tasks.create(level_id=level.id, title="Only")

    store.tasks.update(task.id, {"is_completed": True})

    assert store.user_stats.get() is None
    assert store.levels.get(level.id).progress == 100


def test_moving_last_task_out_resets_old_level(store, make_tasks):
    first = store.levels.create(level_number=1, title="First")
    second = store.levels.create(level_number=2, title="Second")
    task = make_tasks(first.id, 1)[0]
    store.tasks.update(task.id, {"is_completed": True})
    assert store.levels.get(first.id).is_completed is True

    store.tasks.update(task.id, {"level_id": second.id})

    emptied = store.levels.get(first.id)
    assert emptied.progress == 0
    assert emptied.is_completed is False
    assert store.levels.get(second.id).progress == 100


def test_deleting_task_recalculates_level(store, level, make_tasks):
    tasks = make_tasks(level.id, 2)
    store.tasks.update(tasks[0].id, {"is_completed": True})
    assert store.levels.get(level.id).progress == 50

    store.tasks.delete(tasks[1].id)
    assert store.levels.get(level.id).progress == 100
    assert store.levels.get(level.id).is_completed is True

    store.tasks.delete(tasks[0].id)
    assert store.levels.get(level.id).progress == 0
    assert store.levels.get(level.id).is_completed is False


def test_deleting_task_refreshes_user_stats_totals(store, level, make_tasks):
    tasks = make_tasks(level.id, 2)
    store.tasks.update(tasks[0].id, {"is_completed": True})

    store.tasks.delete(tasks[0].id)

    stats = store.user_stats.get()
    assert stats.total_tasks_completed == 0
    assert stats.overall_progress == 0
    assert stats.streak_days == 1


def test_deleting_orphaned_task_does_not_fail(store):
    task = store.tasks.create(level_id="gone", title="Orphan")

    assert store.tasks.delete(task.id) is True
