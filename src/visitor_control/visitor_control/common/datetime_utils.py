from __future__ import annotations

import calendar
from datetime import date, datetime, time, timedelta
from typing import Tuple

from ..core.enums import Weekday

_WEEKDAYS = tuple(Weekday)


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_hhmm(value: str) -> time:
    """Parse a 24-hour HH:MM string into time."""
    return datetime.strptime(value, "%H:%M").time()


def day_of_week_for(value: date) -> Weekday:
    """Weekday of a calendar date. Entries never store anything else."""
    return _WEEKDAYS[value.weekday()]


def month_bounds(year: int, month: int) -> Tuple[date, date]:
    """First and last calendar day of ``(year, month)``."""
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)


def trailing_window(today: date, days: int) -> Tuple[date, date]:
    """``days`` calendar days ending on ``today``, inclusive on both ends."""
    return today - timedelta(days=days - 1), today


def format_local_timestamp(value: datetime) -> str:
    """Creation timestamps as shown in exports (d/m/yyyy, HH:MM:SS)."""
    return f"{value.day}/{value.month}/{value.year}, {value.strftime('%H:%M:%S')}"


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def today_local() -> date:
    return now_local().date()
