from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, time
from typing import Optional

from ..common.datetime_utils import day_of_week_for, format_local_timestamp
from ..core.enums import Weekday
from ..core.exceptions import InvalidRangeError


@dataclass(frozen=True)
class VisitorEntry:
    """Domain entity: one visitor count for a floor, date and time."""

    entry_id: int
    floor_id: int
    count: int
    date: date
    time: time
    day_of_week: Weekday
    recorded_by_user_id: int
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass(frozen=True)
class NewVisitorEntry:
    """Values written for a new entry; build it with :meth:`build`."""

    floor_id: int
    count: int
    date: date
    time: time
    day_of_week: Weekday
    recorded_by_user_id: int
    notes: Optional[str] = None

    @classmethod
    def build(
        cls,
        *,
        floor_id: int,
        count: int,
        date: date,
        time: time,
        recorded_by_user_id: int,
        notes: Optional[str] = None,
    ) -> "NewVisitorEntry":
        return cls(
            floor_id=int(floor_id),
            count=int(count),
            date=date,
            time=time,
            day_of_week=day_of_week_for(date),
            recorded_by_user_id=int(recorded_by_user_id),
            notes=notes,
        )


@dataclass(frozen=True)
class VisitorEntryView:
    """Read-model: an entry with its floor and recorder names resolved."""

    entry: VisitorEntry
    floor_name: Optional[str]
    recorder_name: Optional[str]

    def to_dict(self) -> dict:
        e = self.entry
        return {
            "id": e.entry_id,
            "piso_id": e.floor_id,
            "cantidad": e.count,
            "fecha": e.date.isoformat(),
            "hora": e.time.strftime("%H:%M"),
            "dia_semana": e.day_of_week.value,
            "usuario_id": e.recorded_by_user_id,
            "observaciones": e.notes,
            "created_at": e.created_at.isoformat() if e.created_at else None,
            "updated_at": e.updated_at.isoformat() if e.updated_at else None,
            "piso": {"id": e.floor_id, "nombre": self.floor_name},
            "usuario": {"id": e.recorded_by_user_id, "nombre": self.recorder_name},
        }

    def to_export_record(self) -> dict:
        e = self.entry
        return {
            "Fecha": e.date.isoformat(),
            "Hora": e.time.strftime("%H:%M"),
            "Día de la Semana": e.day_of_week.value,
            "Piso": self.floor_name or "N/A",
            "Cantidad de Visitantes": e.count,
            "Registrado por": self.recorder_name or "N/A",
            "Observaciones": e.notes or "",
            "Fecha de Registro": format_local_timestamp(e.created_at) if e.created_at else "",
        }


@dataclass(frozen=True)
class EntryFilter:
    """Predicate over entries. Every field is optional; bounds are inclusive."""

    start: Optional[date] = None
    end: Optional[date] = None
    floor_id: Optional[int] = None
    day_of_week: Optional[Weekday] = None
    recorded_by_user_id: Optional[int] = None

    def validate(self) -> "EntryFilter":
        if self.start and self.end and self.start > self.end:
            raise InvalidRangeError("La fecha de inicio debe ser anterior a la fecha de fin")
        return self


@dataclass(frozen=True)
class EntryPage:
    rows: list[VisitorEntryView] = field(default_factory=list)
    total: int = 0
    page: int = 1
    limit: int = 50

    @property
    def total_pages(self) -> int:
        return (self.total + self.limit - 1) // self.limit if self.limit else 0

    def to_dict(self) -> dict:
        return {
            "visitantes": [r.to_dict() for r in self.rows],
            "pagination": {
                "total": self.total,
                "page": self.page,
                "limit": self.limit,
                "totalPages": self.total_pages,
            },
        }
