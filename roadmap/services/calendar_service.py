from datetime import date, datetime, time, timedelta, timezone

from fastapi import HTTPException, status

from roadmap.schemas.calendar import CalendarDay, CalendarMonthResponse
from roadmap.store import MemoryStore

GRID_DAYS = 42  # 6 weeks x 7 days


def month_grid(year: int, month: int) -> list[date]:
    """The 42 days shown for a month, weeks starting on Sunday."""
    first = date(year, month, 1)
    # date.weekday() is Monday=0; shift so Sunday starts the week.
    leading = (first.weekday() + 1) % 7
    start = first - timedelta(days=leading)
    return [start + timedelta(days=offset) for offset in range(GRID_DAYS)]


def get_calendar_month(store: MemoryStore, year: int, month: int) -> CalendarMonthResponse:
    try:
        days = month_grid(year, month)
    except (ValueError, OverflowError):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid calendar month",
        )

    start = datetime.combine(days[0], time.min, tzinfo=timezone.utc)
    end = datetime.combine(days[-1], time.max, tzinfo=timezone.utc)

    by_day: dict[date, list[str]] = {}
    for schedule in store.schedules.in_range(start, end):
        target_day = schedule.target_date.astimezone(timezone.utc).date()
        by_day.setdefault(target_day, []).append(schedule.id)

    return CalendarMonthResponse(
        year=year,
        month=month,
        days=[
            CalendarDay(
                date=day,
                in_month=day.month == month,
                schedule_ids=by_day.get(day, []),
            )
            for day in days
        ],
    )
