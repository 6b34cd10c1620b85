from __future__ import annotations

from datetime import date, time
from typing import Optional, Protocol, Sequence

from ..core.enums import Weekday
from .model import EntryFilter, NewVisitorEntry, VisitorEntry, VisitorEntryView


class VisitorEntryRepository(Protocol):
    def get_by_id(self, entry_id: int) -> Optional[VisitorEntry]:
        raise NotImplementedError

    def get_view(self, entry_id: int) -> Optional[VisitorEntryView]:
        raise NotImplementedError

    def create_entry(self, entry: NewVisitorEntry) -> int:
        raise NotImplementedError

    def update_entry(
        self,
        *,
        entry_id: int,
        floor_id: int,
        count: int,
        date: date,
        time: time,
        day_of_week: Weekday,
        notes: Optional[str],
    ) -> bool:
        raise NotImplementedError

    def delete_entry(self, entry_id: int) -> bool:
        raise NotImplementedError

    def list_entries(self, flt: EntryFilter, *, limit: int, offset: int = 0) -> tuple[int, Sequence[VisitorEntryView]]:
        """Matching entries ordered by date then time, newest first, plus the total count."""

        raise NotImplementedError

    def recently_created(self, flt: EntryFilter, *, limit: int) -> Sequence[VisitorEntryView]:
        """Matching entries ordered by creation time, newest first."""

        raise NotImplementedError
