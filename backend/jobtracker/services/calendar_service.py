"""Month grid for the events calendar (weeks start on Sunday)."""

import calendar
from collections import defaultdict
from datetime import date, datetime, time, timedelta, timezone
from typing import Sequence

from jobtracker.schemas.event import CalendarDay, CalendarEvent, CalendarMonth
from jobtracker.services.analytics import ensure_utc

_calendar = calendar.Calendar(firstweekday=calendar.SUNDAY)


def month_grid(year: int, month: int) -> list[list[date]]:
    """Full weeks covering the month, padded with days from adjacent months."""
    return _calendar.monthdatescalendar(year, month)


def grid_bounds(year: int, month: int) -> tuple[datetime, datetime]:
    """UTC range [start, end) spanned by the month grid."""
    weeks = month_grid(year, month)
    start = datetime.combine(weeks[0][0], time.min, tzinfo=timezone.utc)
    end = datetime.combine(weeks[-1][-1] + timedelta(days=1), time.min, tzinfo=timezone.utc)
    return start, end


def build_month(year: int, month: int, events: Sequence, today: date | None = None) -> CalendarMonth:
    today = today or datetime.now(timezone.utc).date()

    by_day: dict[date, list] = defaultdict(list)
    for event in events:
        by_day[ensure_utc(event.scheduled_date).date()].append(event)

    weeks = [
        [
            CalendarDay(
                day=day,
                in_month=day.month == month,
                is_today=day == today,
                events=[CalendarEvent.model_validate(e) for e in by_day.get(day, [])],
            )
            for day in week
        ]
        for week in month_grid(year, month)
    ]
    return CalendarMonth(year=year, month=month, weeks=weeks)
