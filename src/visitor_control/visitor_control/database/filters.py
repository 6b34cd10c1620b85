from __future__ import annotations

from typing import List

from sqlalchemy.sql.elements import ColumnElement

from ..visitors.model import EntryFilter
from .orm import VisitorEntryRow


def entry_clauses(flt: EntryFilter) -> List[ColumnElement]:
    """WHERE clauses for an entry filter (date bounds inclusive)."""
    clauses: List[ColumnElement] = []
    if flt.start is not None:
        clauses.append(VisitorEntryRow.date >= flt.start)
    if flt.end is not None:
        clauses.append(VisitorEntryRow.date <= flt.end)
    if flt.floor_id is not None:
        clauses.append(VisitorEntryRow.floor_id == int(flt.floor_id))
    if flt.day_of_week is not None:
        clauses.append(VisitorEntryRow.day_of_week == flt.day_of_week.value)
    if flt.recorded_by_user_id is not None:
        clauses.append(VisitorEntryRow.recorded_by_user_id == int(flt.recorded_by_user_id))
    return clauses
