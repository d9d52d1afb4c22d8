from datetime import datetime

from fastapi import HTTPException, status

from roadmap.models import Schedule
from roadmap.schemas.schedule import ScheduleCreate, ScheduleUpdate
from roadmap.store import MemoryStore


def _not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="Schedule not found",
    )


def list_schedules(
    store: MemoryStore,
    start_date: datetime | None = None,
    end_date: datetime | None = None,
) -> list[Schedule]:
    """All schedules, or those due within [start_date, end_date] when both are given."""
    if start_date is not None and end_date is not None:
        return store.schedules.in_range(start_date, end_date)
    return store.schedules.list()


def get_schedule(store: MemoryStore, schedule_id: str) -> Schedule:
    schedule = store.schedules.get(schedule_id)
    if schedule is None:
        raise _not_found()
    return schedule


def create_schedule(store: MemoryStore, data: ScheduleCreate) -> Schedule:
    return store.schedules.create(**data.model_dump())


def update_schedule(
    store: MemoryStore, schedule_id: str, data: ScheduleUpdate,
) -> Schedule:
    schedule = store.schedules.update(schedule_id, data.changes())
    if schedule is None:
        raise _not_found()
    return schedule


def delete_schedule(store: MemoryStore, schedule_id: str) -> None:
    if not store.schedules.delete(schedule_id):
        raise _not_found()
