"""Report assembler.

Composes aggregation engine rollups and resolved entry listings into the
named report shapes. Holds no state and never writes.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from ..common.datetime_utils import format_local_timestamp, month_bounds, now_local, today_local
from ..core.constants import (
    DASHBOARD_RECENT_LIMIT,
    DEFAULT_REPORT_MAX_YEAR,
    DEFAULT_REPORT_MIN_YEAR,
    EXPORT_MAX_ROWS,
    FLOOR_REPORT_RECENT_LIMIT,
)
from ..core.enums import ExportMode
from ..core.exceptions import InvalidModeError, InvalidRangeError, ValidationError
from ..floors.service import FloorService
from ..stats.engine import AggregationEngine
from ..visitors.model import EntryFilter
from ..visitors.repository import VisitorEntryRepository
from .model import (
    ChartData,
    Dashboard,
    DateRangeReport,
    ExportPayload,
    FloorReport,
    GeneralStatistics,
    summary_export_record,
)

logger = logging.getLogger(__name__)


def parse_export_mode(mode) -> ExportMode:
    try:
        return ExportMode(mode)
    except ValueError:
        raise InvalidModeError("Formato no válido. Use 'full' o 'summary'")


class ReportService:
    def __init__(
        self,
        engine: AggregationEngine,
        entries: VisitorEntryRepository,
        floors: FloorService,
        *,
        min_year: int = DEFAULT_REPORT_MIN_YEAR,
        max_year: int = DEFAULT_REPORT_MAX_YEAR,
    ):
        self._engine = engine
        self._entries = entries
        self._floors = floors
        self._min_year = int(min_year)
        self._max_year = int(max_year)

    def general_statistics(self, *, today: Optional[date] = None) -> GeneralStatistics:
        today = today or today_local()
        month_start, month_end = month_bounds(today.year, today.month)
        return GeneralStatistics(
            all_time=self._engine.scalar(),
            today=self._engine.scalar(EntryFilter(start=today, end=today)),
            this_month=self._engine.scalar(EntryFilter(start=month_start, end=month_end)),
        )

    def chart_data(self) -> ChartData:
        return ChartData(by_floor=self._engine.by_floor(), by_weekday=self._engine.by_weekday())

    def dashboard(self, *, today: Optional[date] = None) -> Dashboard:
        today = today or today_local()
        return Dashboard(
            general=self.general_statistics(today=today),
            by_floor=self._engine.by_floor(),
            by_weekday=self._engine.by_weekday(),
            last_days=self._engine.trailing_window(today),
            top_floor_today=self._engine.top_floor(today),
            recent=self._entries.recently_created(EntryFilter(), limit=DASHBOARD_RECENT_LIMIT),
        )

    def date_range_report(
        self,
        start: Optional[date],
        end: Optional[date],
        *,
        year: Optional[int] = None,
        month: Optional[int] = None,
    ) -> DateRangeReport:
        if start is None or end is None:
            raise ValidationError("Fechas de inicio y fin son requeridas")
        flt = EntryFilter(start=start, end=end).validate()

        return DateRangeReport(
            start=start,
            end=end,
            summary=self._engine.scalar(flt),
            by_floor=self._engine.by_floor(flt),
            by_weekday=self._engine.by_weekday(flt),
            by_date=self._engine.by_date(flt),
            year=year,
            month=month,
        )

    def monthly_report(self, year, month) -> DateRangeReport:
        try:
            year, month = int(year), int(month)
        except (TypeError, ValueError):
            raise InvalidRangeError("Año y mes deben ser números enteros")
        if not self._min_year <= year <= self._max_year:
            raise InvalidRangeError(f"El año debe estar entre {self._min_year} y {self._max_year}")
        if not 1 <= month <= 12:
            raise InvalidRangeError("El mes debe estar entre 1 y 12")

        start, end = month_bounds(year, month)
        return self.date_range_report(start, end, year=year, month=month)

    def floor_report(
        self,
        floor_id: int,
        *,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> FloorReport:
        """Inactive floors are reported too; only unknown ids fail."""
        flt = EntryFilter(start=start, end=end, floor_id=floor_id).validate()
        floor = self._floors.get_floor(floor_id)

        _, recent = self._entries.list_entries(flt, limit=FLOOR_REPORT_RECENT_LIMIT)
        return FloorReport(
            floor=floor,
            start=start,
            end=end,
            summary=self._engine.scalar(flt),
            by_weekday=self._engine.by_weekday(flt),
            recent=list(recent),
        )

    def floor_statistics(
        self,
        floor_id: int,
        *,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> FloorReport:
        """Floor report without the entry listing."""
        flt = EntryFilter(start=start, end=end, floor_id=floor_id).validate()
        floor = self._floors.get_floor(floor_id)
        return FloorReport(
            floor=floor,
            start=start,
            end=end,
            summary=self._engine.scalar(flt),
            by_weekday=self._engine.by_weekday(flt),
        )

    def export(
        self,
        *,
        start: Optional[date] = None,
        end: Optional[date] = None,
        floor_id: Optional[int] = None,
        mode=ExportMode.FULL,
    ) -> ExportPayload:
        mode = parse_export_mode(mode)
        flt = EntryFilter(start=start, end=end, floor_id=floor_id).validate()

        if mode is ExportMode.FULL:
            matched, views = self._entries.list_entries(flt, limit=EXPORT_MAX_ROWS)
            records = [v.to_export_record() for v in views]
            if matched > len(records):
                logger.warning("Export truncated to %s of %s matching entries", len(records), matched)
        else:
            rollups = self._engine.by_floor(flt)
            records = [summary_export_record(r) for r in rollups]
            matched = sum(r.entries for r in rollups)

        return ExportPayload(
            mode=mode,
            records=records,
            generated_at=format_local_timestamp(now_local()),
            matched=matched,
            start=start,
            end=end,
            floor_id=floor_id,
        )
