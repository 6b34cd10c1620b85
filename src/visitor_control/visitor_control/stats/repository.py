from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..visitors.model import EntryFilter
from .model import DateRollup, FloorRollup, ScalarRollup, WeekdayRollup


class StatsRepository(Protocol):
    """Aggregation queries over the entry table.

    Implementations aggregate in the database and never load entry rows.
    """

    def scalar(self, flt: EntryFilter) -> ScalarRollup:
        raise NotImplementedError

    def by_floor(self, flt: EntryFilter) -> Sequence[FloorRollup]:
        raise NotImplementedError

    def by_weekday(self, flt: EntryFilter) -> Sequence[WeekdayRollup]:
        raise NotImplementedError

    def by_date(self, flt: EntryFilter) -> Sequence[DateRollup]:
        raise NotImplementedError

    def top_floor(self, flt: EntryFilter) -> Optional[FloorRollup]:
        raise NotImplementedError
