from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional, Sequence

from ..core.enums import ExportMode
from ..floors.model import Floor
from ..stats.model import DateRollup, FloorRollup, ScalarRollup, WeekdayRollup, format_average
from ..visitors.model import VisitorEntryView

FULL_EXPORT_COLUMNS = (
    "Fecha",
    "Hora",
    "Día de la Semana",
    "Piso",
    "Cantidad de Visitantes",
    "Registrado por",
    "Observaciones",
    "Fecha de Registro",
)

SUMMARY_EXPORT_COLUMNS = ("Piso", "Total Registros", "Total Visitantes", "Promedio por Registro")


def _period(start: Optional[date], end: Optional[date]) -> dict:
    return {
        "inicio": start.isoformat() if start else None,
        "fin": end.isoformat() if end else None,
    }


@dataclass(frozen=True)
class GeneralStatistics:
    all_time: ScalarRollup
    today: ScalarRollup
    this_month: ScalarRollup

    def to_dict(self) -> dict:
        return {
            "total": self.all_time.to_counts_dict(),
            "hoy": self.today.to_counts_dict(),
            "mes": self.this_month.to_counts_dict(),
        }


@dataclass(frozen=True)
class Dashboard:
    general: GeneralStatistics
    by_floor: Sequence[FloorRollup]
    by_weekday: Sequence[WeekdayRollup]
    last_days: Sequence[DateRollup]
    top_floor_today: Optional[FloorRollup]
    recent: Sequence[VisitorEntryView]

    def to_dict(self) -> dict:
        return {
            "estadisticas_generales": self.general.to_dict(),
            "por_piso": [r.to_dict() for r in self.by_floor],
            "por_dia_semana": [r.to_dict() for r in self.by_weekday],
            "ultimos_7_dias": [r.to_dict() for r in self.last_days],
            "piso_mas_visitado_hoy": self.top_floor_today.to_dict() if self.top_floor_today else None,
            "registros_recientes": [v.to_dict() for v in self.recent],
        }


@dataclass(frozen=True)
class DateRangeReport:
    start: date
    end: date
    summary: ScalarRollup
    by_floor: Sequence[FloorRollup]
    by_weekday: Sequence[WeekdayRollup]
    by_date: Sequence[DateRollup]
    year: Optional[int] = None
    month: Optional[int] = None

    def to_dict(self) -> dict:
        period = _period(self.start, self.end)
        if self.year is not None:
            period.update({"anio": self.year, "mes": self.month})
        return {
            "periodo": period,
            "resumen": self.summary.to_dict(),
            "por_piso": [r.to_dict() for r in self.by_floor],
            "por_dia_semana": [r.to_dict() for r in self.by_weekday],
            "por_fecha": [r.to_dict() for r in self.by_date],
        }


@dataclass(frozen=True)
class FloorReport:
    floor: Floor
    start: Optional[date]
    end: Optional[date]
    summary: ScalarRollup
    by_weekday: Sequence[WeekdayRollup]
    recent: Sequence[VisitorEntryView] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "piso": self.floor.to_dict(),
            "periodo": _period(self.start, self.end),
            "resumen": self.summary.to_dict(),
            "por_dia_semana": [r.to_dict() for r in self.by_weekday],
            "registros_recientes": [v.to_dict() for v in self.recent],
        }


@dataclass(frozen=True)
class ChartData:
    by_floor: Sequence[FloorRollup]
    by_weekday: Sequence[WeekdayRollup]

    def to_dict(self) -> dict:
        return {
            "por_piso": [r.to_dict() for r in self.by_floor],
            "por_dia_semana": [r.to_dict() for r in self.by_weekday],
        }


def summary_export_record(rollup: FloorRollup) -> dict:
    return {
        "Piso": rollup.floor_name or "N/A",
        "Total Registros": rollup.entries,
        "Total Visitantes": rollup.visitors,
        "Promedio por Registro": format_average(rollup.average),
    }


@dataclass(frozen=True)
class ExportPayload:
    mode: ExportMode
    records: list[dict]
    generated_at: str
    matched: int
    start: Optional[date] = None
    end: Optional[date] = None
    floor_id: Optional[int] = None

    @property
    def columns(self) -> Sequence[str]:
        return FULL_EXPORT_COLUMNS if self.mode is ExportMode.FULL else SUMMARY_EXPORT_COLUMNS

    @property
    def truncated(self) -> bool:
        return self.mode is ExportMode.FULL and self.matched > len(self.records)

    def to_dict(self) -> dict:
        return {
            "modo": self.mode.value,
            "filtros": {**_period(self.start, self.end), "piso_id": self.floor_id},
            "total_registros": len(self.records),
            "registros_coincidentes": self.matched,
            "truncado": self.truncated,
            "generado": self.generated_at,
            "datos": self.records,
        }
