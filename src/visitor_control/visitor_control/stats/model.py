"""Rollup value objects.

Sums are integers and averages are computed as ``visitors / entries`` over
the whole matching set. Rounding to two decimals happens only in the
``to_dict`` presentation.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import Weekday


def average_of(visitors: int, entries: int) -> float:
    return visitors / entries if entries else 0.0


def format_average(value: float) -> str:
    return f"{value:.2f}"


@dataclass(frozen=True)
class ScalarRollup:
    entries: int = 0
    visitors: int = 0
    first_date: Optional[date] = None
    last_date: Optional[date] = None

    @property
    def average(self) -> float:
        return average_of(self.visitors, self.entries)

    def to_counts_dict(self) -> dict:
        return {"registros": self.entries, "visitantes": self.visitors}

    def to_dict(self) -> dict:
        return {
            "registros": self.entries,
            "visitantes": self.visitors,
            "promedio": format_average(self.average),
            "primera_fecha": self.first_date.isoformat() if self.first_date else None,
            "ultima_fecha": self.last_date.isoformat() if self.last_date else None,
        }


@dataclass(frozen=True)
class FloorRollup:
    floor_id: int
    floor_name: Optional[str]
    entries: int
    visitors: int

    @property
    def average(self) -> float:
        return average_of(self.visitors, self.entries)

    def to_dict(self) -> dict:
        return {
            "piso_id": self.floor_id,
            "piso": {"nombre": self.floor_name},
            "registros": self.entries,
            "visitantes": self.visitors,
            "promedio": format_average(self.average),
        }


@dataclass(frozen=True)
class WeekdayRollup:
    day_of_week: Weekday
    entries: int
    visitors: int

    @property
    def average(self) -> float:
        return average_of(self.visitors, self.entries)

    def to_dict(self) -> dict:
        return {
            "dia_semana": self.day_of_week.value,
            "registros": self.entries,
            "visitantes": self.visitors,
            "promedio": format_average(self.average),
        }


@dataclass(frozen=True)
class DateRollup:
    date: date
    day_of_week: Weekday
    entries: int
    visitors: int

    @property
    def average(self) -> float:
        return average_of(self.visitors, self.entries)

    def to_dict(self) -> dict:
        return {
            "fecha": self.date.isoformat(),
            "dia_semana": self.day_of_week.value,
            "registros": self.entries,
            "visitantes": self.visitors,
            "promedio": format_average(self.average),
        }
