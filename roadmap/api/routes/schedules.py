from fastapi import APIRouter, Depends, Query, status

from roadmap.api.deps import get_store
from roadmap.schemas.common import UtcDateTime
from roadmap.schemas.schedule import ScheduleCreate, ScheduleResponse, ScheduleUpdate
from roadmap.services.schedule_service import (
    create_schedule,
    delete_schedule,
    get_schedule,
    list_schedules,
    update_schedule,
)
from roadmap.store import MemoryStore

router = APIRouter(prefix="/schedules", tags=["schedules"])


@router.get("", response_model=list[ScheduleResponse])
async def list_schedules_endpoint(
    start_date: UtcDateTime | None = Query(None, alias="startDate"),
    end_date: UtcDateTime | None = Query(None, alias="endDate"),
    store: MemoryStore = Depends(get_store),
):
    """List schedules, filtered to an inclusive date range when both bounds are given."""
    return list_schedules(store, start_date, end_date)


@router.get("/{schedule_id}", response_model=ScheduleResponse)
async def get_schedule_endpoint(
    schedule_id: str,
    store: MemoryStore = Depends(get_store),
):
    return get_schedule(store, schedule_id)


@router.post("", response_model=ScheduleResponse, status_code=status.HTTP_201_CREATED)
async def create_schedule_endpoint(
    data: ScheduleCreate,
    store: MemoryStore = Depends(get_store),
):
    return create_schedule(store, data)


@router.patch("/{schedule_id}", response_model=ScheduleResponse)
async def update_schedule_endpoint(
    schedule_id: str,
    data: ScheduleUpdate,
    store: MemoryStore = Depends(get_store),
):
    return update_schedule(store, schedule_id, data)


@router.delete("/{schedule_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_schedule_endpoint(
    schedule_id: str,
    store: MemoryStore = Depends(get_store),
):
    delete_schedule(store, schedule_id)
