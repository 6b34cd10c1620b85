from __future__ import annotations

from datetime import date, time
from typing import Optional, Sequence

from sqlalchemy import func, select
from sqlalchemy.orm import aliased

from ..core.enums import Weekday
from ..database.connection import DatabaseConnection, session_scope
from ..database.filters import entry_clauses
from ..database.orm import FloorRow, UserRow, VisitorEntryRow
from .model import EntryFilter, NewVisitorEntry, VisitorEntry, VisitorEntryView
from .repository import VisitorEntryRepository


def _to_entry(row: VisitorEntryRow) -> VisitorEntry:
    return VisitorEntry(
        entry_id=int(row.id),
        floor_id=int(row.floor_id),
        count=int(row.count),
        date=row.date,
        time=row.time,
        day_of_week=Weekday(row.day_of_week),
        recorded_by_user_id=int(row.recorded_by_user_id),
        notes=row.notes,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


class SqlVisitorEntryRepository(VisitorEntryRepository):
    def __init__(self, conn: DatabaseConnection):
        self._conn = conn

    @staticmethod
    def _view_select():
        floor = aliased(FloorRow)
        user = aliased(UserRow)
        return (
            select(VisitorEntryRow, floor.name, user.name)
            .outerjoin(floor, floor.id == VisitorEntryRow.floor_id)
            .outerjoin(user, user.id == VisitorEntryRow.recorded_by_user_id)
        )

    @staticmethod
    def _to_views(result) -> list[VisitorEntryView]:
        return [
            VisitorEntryView(entry=_to_entry(row), floor_name=floor_name, recorder_name=user_name)
            for row, floor_name, user_name in result
        ]

    def get_by_id(self, entry_id: int) -> Optional[VisitorEntry]:
        with session_scope(self._conn) as session:
            row = session.get(VisitorEntryRow, int(entry_id))
            return _to_entry(row) if row else None

    def get_view(self, entry_id: int) -> Optional[VisitorEntryView]:
        stmt = self._view_select().where(VisitorEntryRow.id == int(entry_id))
        with session_scope(self._conn) as session:
            views = self._to_views(session.execute(stmt))
            return views[0] if views else None

    def create_entry(self, entry: NewVisitorEntry) -> int:
        with session_scope(self._conn) as session:
            row = VisitorEntryRow(
                floor_id=entry.floor_id,
                count=entry.count,
                date=entry.date,
                time=entry.time,
                day_of_week=entry.day_of_week.value,
                recorded_by_user_id=entry.recorded_by_user_id,
                notes=entry.notes,
            )
            session.add(row)
            session.flush()
            return int(row.id)

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
        with session_scope(self._conn) as session:
            row = session.get(VisitorEntryRow, int(entry_id))
            if not row:
                return False
            row.floor_id = int(floor_id)
            row.count = int(count)
            row.date = date
            row.time = time
            row.day_of_week = day_of_week.value
            row.notes = notes
            return True

    def delete_entry(self, entry_id: int) -> bool:
        with session_scope(self._conn) as session:
            row = session.get(VisitorEntryRow, int(entry_id))
            if not row:
                return False
            session.delete(row)
            return True

    def list_entries(self, flt: EntryFilter, *, limit: int, offset: int = 0) -> tuple[int, Sequence[VisitorEntryView]]:
        clauses = entry_clauses(flt)
        count_stmt = select(func.count(VisitorEntryRow.id)).where(*clauses)
        stmt = (
            self._view_select()
            .where(*clauses)
            .order_by(VisitorEntryRow.date.desc(), VisitorEntryRow.time.desc(), VisitorEntryRow.id.desc())
            .limit(int(limit))
            .offset(int(offset))
        )
        with session_scope(self._conn) as session:
            total = int(session.scalar(count_stmt) or 0)
            return total, self._to_views(session.execute(stmt))

    def recently_created(self, flt: EntryFilter, *, limit: int) -> Sequence[VisitorEntryView]:
        stmt = (
            self._view_select()
            .where(*entry_clauses(flt))
            .order_by(VisitorEntryRow.created_at.desc(), VisitorEntryRow.id.desc())
            .limit(int(limit))
        )
        with session_scope(self._conn) as session:
            return self._to_views(session.execute(stmt))
