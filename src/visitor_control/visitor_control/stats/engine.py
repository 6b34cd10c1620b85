"""Aggregation engine.

Stateless rollups over a filtered subset of visitor entries. Every public
method validates the filter before any query runs, so an inverted range
never reaches storage.
"""

from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Optional, Sequence

from ..common.datetime_utils import trailing_window
from ..core.constants import TRAILING_WINDOW_DAYS
from ..visitors.model import EntryFilter
from .model import DateRollup, FloorRollup, ScalarRollup, WeekdayRollup
from .repository import StatsRepository

_ALL = EntryFilter()


class AggregationEngine:
    def __init__(self, stats: StatsRepository):
        self._stats = stats

    def scalar(self, flt: EntryFilter = _ALL) -> ScalarRollup:
        return self._stats.scalar(flt.validate())

    def by_floor(self, flt: EntryFilter = _ALL) -> Sequence[FloorRollup]:
        return self._stats.by_floor(flt.validate())

    def by_weekday(self, flt: EntryFilter = _ALL) -> Sequence[WeekdayRollup]:
        """Monday through Sunday; days without entries are omitted."""
        return self._stats.by_weekday(flt.validate())

    def by_date(self, flt: EntryFilter = _ALL) -> Sequence[DateRollup]:
        return self._stats.by_date(flt.validate())

    def trailing_window(self, today: date, flt: EntryFilter = _ALL) -> Sequence[DateRollup]:
        """Group-by-date over the last seven calendar days, today included."""
        start, end = trailing_window(today, TRAILING_WINDOW_DAYS)
        return self.by_date(replace(flt, start=start, end=end))

    def top_floor(self, day: date, flt: EntryFilter = _ALL) -> Optional[FloorRollup]:
        """Busiest floor on ``day``; ties go to the lowest floor id."""
        return self._stats.top_floor(replace(flt, start=day, end=day).validate())
