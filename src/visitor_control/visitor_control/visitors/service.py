from __future__ import annotations

import logging
from datetime import date, time
from typing import Optional

from ..common.datetime_utils import day_of_week_for, today_local
from ..common.validators import require_hhmm, require_int_between, require_iso_date, require_positive_int
from ..core.constants import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE, MAX_VISITOR_COUNT, MIN_VISITOR_COUNT
from ..core.enums import Action, Role
from ..core.exceptions import NotFoundError, ValidationError
from ..core.policy import authorize
from ..floors.service import FloorService
from .model import EntryFilter, EntryPage, NewVisitorEntry, VisitorEntry, VisitorEntryView
from .repository import VisitorEntryRepository

logger = logging.getLogger(__name__)

_UNSET = object()


def validate_count(value) -> int:
    return require_int_between(value, "La cantidad", MIN_VISITOR_COUNT, MAX_VISITOR_COUNT)


def validate_not_future(value: date, today: date) -> date:
    if value > today:
        raise ValidationError("No se pueden registrar visitantes para fechas futuras")
    return value


class VisitorEntryService:
    """Use cases: record, browse, correct and remove visitor counts."""

    def __init__(self, entries: VisitorEntryRepository, floors: FloorService):
        self._entries = entries
        self._floors = floors

    def create_entry(
        self,
        *,
        current_role: Role,
        current_user_id: int,
        floor_id: int,
        count,
        entry_date,
        entry_time,
        notes: Optional[str] = None,
        today: Optional[date] = None,
    ) -> VisitorEntryView:
        authorize(current_role, current_user_id, Action.CREATE_ENTRY)
        today = today or today_local()

        count = validate_count(count)
        entry_date = validate_not_future(require_iso_date(entry_date, "La fecha"), today)
        entry_time = require_hhmm(entry_time, "La hora")
        self._floors.require_active_floor(floor_id)

        entry_id = self._entries.create_entry(
            NewVisitorEntry.build(
                floor_id=floor_id,
                count=count,
                date=entry_date,
                time=entry_time,
                recorded_by_user_id=current_user_id,
                notes=_clean_notes(notes),
            )
        )
        logger.info("Entry %s created (floor=%s, count=%s) by user %s", entry_id, floor_id, count, current_user_id)
        return self.get_entry(entry_id)

    def get_entry(self, entry_id: int) -> VisitorEntryView:
        view = self._entries.get_view(int(entry_id))
        if not view:
            raise NotFoundError("Registro de visitante no encontrado")
        return view

    def list_entries(self, flt: EntryFilter, *, page: int = 1, limit: int = DEFAULT_PAGE_SIZE) -> EntryPage:
        flt.validate()
        page = require_positive_int(page, "La página")
        limit = require_int_between(limit, "El límite", 1, MAX_PAGE_SIZE)

        total, rows = self._entries.list_entries(flt, limit=limit, offset=(page - 1) * limit)
        return EntryPage(rows=list(rows), total=total, page=page, limit=limit)

    def update_entry(
        self,
        *,
        current_role: Role,
        current_user_id: int,
        entry_id: int,
        floor_id: Optional[int] = None,
        count=None,
        entry_date=None,
        entry_time=None,
        notes=_UNSET,
        today: Optional[date] = None,
    ) -> VisitorEntryView:
        current = self._require_entry(entry_id)
        authorize(current_role, current_user_id, Action.UPDATE_ENTRY, owner_id=current.recorded_by_user_id)
        today = today or today_local()

        new_floor_id = current.floor_id
        if floor_id is not None and require_positive_int(floor_id, "El piso") != current.floor_id:
            new_floor_id = self._floors.require_active_floor(floor_id).floor_id

        new_count = validate_count(count) if count is not None else current.count

        new_date = current.date
        if entry_date is not None:
            new_date = validate_not_future(require_iso_date(entry_date, "La fecha"), today)

        new_time: time = require_hhmm(entry_time, "La hora") if entry_time is not None else current.time
        new_notes = current.notes if notes is _UNSET else _clean_notes(notes)

        self._entries.update_entry(
            entry_id=current.entry_id,
            floor_id=new_floor_id,
            count=new_count,
            date=new_date,
            time=new_time,
            day_of_week=day_of_week_for(new_date),
            notes=new_notes,
        )
        logger.info("Entry %s updated by user %s", current.entry_id, current_user_id)
        return self.get_entry(current.entry_id)

    def delete_entry(self, *, current_role: Role, current_user_id: int, entry_id: int) -> None:
        current = self._require_entry(entry_id)
        authorize(current_role, current_user_id, Action.DELETE_ENTRY, owner_id=current.recorded_by_user_id)

        if not self._entries.delete_entry(current.entry_id):
            raise NotFoundError("Registro de visitante no encontrado")
        logger.info("Entry %s deleted by user %s", current.entry_id, current_user_id)

    def _require_entry(self, entry_id: int) -> VisitorEntry:
        entry = self._entries.get_by_id(int(entry_id))
        if not entry:
            raise NotFoundError("Registro de visitante no encontrado")
        return entry


def _clean_notes(notes: Optional[str]) -> Optional[str]:
    if notes is None:
        return None
    return notes.strip() or None
