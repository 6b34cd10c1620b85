from __future__ import annotations

from typing import Optional, Sequence

from sqlalchemy import case, func, select

from ..common.datetime_utils import day_of_week_for
from ..core.enums import Weekday
from ..database.connection import DatabaseConnection, session_scope
from ..database.filters import entry_clauses
from ..database.orm import FloorRow, VisitorEntryRow
from ..visitors.model import EntryFilter
from .model import DateRollup, FloorRollup, ScalarRollup, WeekdayRollup
from .repository import StatsRepository

_ENTRIES = func.count(VisitorEntryRow.id).label("registros")
_VISITORS = func.coalesce(func.sum(VisitorEntryRow.count), 0).label("visitantes")
_WEEKDAY_ORDER = case(
    {w.value: w.position for w in Weekday},
    value=VisitorEntryRow.day_of_week,
    else_=len(Weekday) + 1,
)


class SqlStatsRepository(StatsRepository):
    def __init__(self, conn: DatabaseConnection):
        self._conn = conn

    def scalar(self, flt: EntryFilter) -> ScalarRollup:
        stmt = select(
            _ENTRIES,
            _VISITORS,
            func.min(VisitorEntryRow.date),
            func.max(VisitorEntryRow.date),
        ).where(*entry_clauses(flt))
        with session_scope(self._conn) as session:
            entries, visitors, first_date, last_date = session.execute(stmt).one()
            return ScalarRollup(
                entries=int(entries or 0),
                visitors=int(visitors or 0),
                first_date=first_date,
                last_date=last_date,
            )

    def _floor_select(self, flt: EntryFilter):
        return (
            select(VisitorEntryRow.floor_id, FloorRow.name, _ENTRIES, _VISITORS)
            .join(FloorRow, FloorRow.id == VisitorEntryRow.floor_id)
            .where(*entry_clauses(flt))
            .group_by(VisitorEntryRow.floor_id, FloorRow.name)
        )

    @staticmethod
    def _to_floor_rollup(row) -> FloorRollup:
        floor_id, floor_name, entries, visitors = row
        return FloorRollup(
            floor_id=int(floor_id),
            floor_name=floor_name,
            entries=int(entries or 0),
            visitors=int(visitors or 0),
        )

    def by_floor(self, flt: EntryFilter) -> Sequence[FloorRollup]:
        stmt = self._floor_select(flt).order_by(VisitorEntryRow.floor_id.asc())
        with session_scope(self._conn) as session:
            return [self._to_floor_rollup(r) for r in session.execute(stmt)]

    def by_weekday(self, flt: EntryFilter) -> Sequence[WeekdayRollup]:
        stmt = (
            select(VisitorEntryRow.day_of_week, _ENTRIES, _VISITORS)
            .where(*entry_clauses(flt))
            .group_by(VisitorEntryRow.day_of_week)
            .order_by(_WEEKDAY_ORDER)
        )
        with session_scope(self._conn) as session:
            return [
                WeekdayRollup(day_of_week=Weekday(day), entries=int(entries or 0), visitors=int(visitors or 0))
                for day, entries, visitors in session.execute(stmt)
            ]

    def by_date(self, flt: EntryFilter) -> Sequence[DateRollup]:
        stmt = (
            select(VisitorEntryRow.date, _ENTRIES, _VISITORS)
            .where(*entry_clauses(flt))
            .group_by(VisitorEntryRow.date)
            .order_by(VisitorEntryRow.date.asc())
        )
        with session_scope(self._conn) as session:
            return [
                DateRollup(
                    date=day,
                    day_of_week=day_of_week_for(day),
                    entries=int(entries or 0),
                    visitors=int(visitors or 0),
                )
                for day, entries, visitors in session.execute(stmt)
            ]

    def top_floor(self, flt: EntryFilter) -> Optional[FloorRollup]:
        stmt = (
            self._floor_select(flt)
            .order_by(_VISITORS.desc(), VisitorEntryRow.floor_id.asc())
            .limit(1)
        )
        with session_scope(self._conn) as session:
            row = session.execute(stmt).first()
            return self._to_floor_rollup(row) if row else None
