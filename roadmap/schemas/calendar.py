from datetime import date

from roadmap.schemas.common import CamelModel


class CalendarDay(CamelModel):
    date: date
    in_month: bool
    schedule_ids: list[str] = []


class CalendarMonthResponse(CamelModel):
    year: int
    month: int
    days: list[CalendarDay]
