from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Query

from roadmap.api.deps import get_store
from roadmap.schemas.calendar import CalendarMonthResponse
from roadmap.services.calendar_service import get_calendar_month
from roadmap.store import MemoryStore

router = APIRouter(prefix="/calendar", tags=["calendar"])


@router.get("", response_model=CalendarMonthResponse)
async def get_calendar(
    year: int | None = Query(None, ge=1, le=9999),
    month: int | None = Query(None, ge=1, le=12),
    store: MemoryStore = Depends(get_store),
):
    """Month grid of 42 days with the schedules due on each day. Defaults to this month."""
    today = datetime.now(timezone.utc).date()
    return get_calendar_month(store, year or today.year, month or today.month)
