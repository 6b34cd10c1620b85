from __future__ import annotations

from datetime import date, time

import pytest

from src.visitor_control.visitor_control.core.enums import Weekday
from src.visitor_control.visitor_control.core.exceptions import InvalidRangeError
from src.visitor_control.visitor_control.stats.engine import AggregationEngine
from src.visitor_control.visitor_control.visitors.model import EntryFilter

JAN = EntryFilter(start=date(2024, 1, 1), end=date(2024, 1, 2))


class RecordingStatsRepo:
    """Stats repository that records calls and returns empty results."""

    def __init__(self):
        self.calls = []

    def _record(self, name, flt):
        self.calls.append((name, flt))

    def scalar(self, flt):
        self._record("scalar", flt)

    def by_floor(self, flt):
        self._record("by_floor", flt)
        return []

    def by_weekday(self, flt):
        self._record("by_weekday", flt)
        return []

    def by_date(self, flt):
        self._record("by_date", flt)
        return []

    def top_floor(self, flt):
        self._record("top_floor", flt)
        return None


@pytest.fixture
def engine(container):
    return container.aggregation_engine


def test_scalar_rollup_for_example_scenario(engine, sample_entries):
    rollup = engine.scalar(JAN)

    assert rollup.entries == 3
    assert rollup.visitors == 15
    assert rollup.average == pytest.approx(5.0)
    assert rollup.first_date == date(2024, 1, 1)
    assert rollup.last_date == date(2024, 1, 2)
    assert rollup.to_dict()["promedio"] == "5.00"


def test_by_floor_for_example_scenario(engine, floors, sample_entries):
    rows = engine.by_floor(JAN)

    assert [(r.floor_id, r.floor_name, r.entries, r.visitors) for r in rows] == [
        (floors["p1"], "Piso 1", 2, 8),
        (floors["p2"], "Piso 2", 1, 7),
    ]
    assert rows[0].to_dict()["promedio"] == "4.00"


def test_rollups_are_consistent_with_scalar(engine, floors, users, add_entry, sample_entries):
    add_entry(floors["p2"], date(2024, 1, 7), 11, user_id=users["op2"])
    add_entry(floors["old"], date(2024, 1, 4), 2, user_id=users["op"])
    flt = EntryFilter(start=date(2024, 1, 1), end=date(2024, 1, 31))

    scalar = engine.scalar(flt)
    for groups in (engine.by_floor(flt), engine.by_weekday(flt), engine.by_date(flt)):
        assert sum(g.visitors for g in groups) == scalar.visitors
        assert sum(g.entries for g in groups) == scalar.entries


def test_average_is_not_average_of_averages(engine, floors, users, add_entry):
    add_entry(floors["p1"], date(2024, 1, 1), 1, user_id=users["op"])
    add_entry(floors["p1"], date(2024, 1, 1), 1, user_id=users["op"])
    add_entry(floors["p2"], date(2024, 1, 1), 10, user_id=users["op"])

    scalar = engine.scalar()
    assert scalar.average == pytest.approx(4.0)
    assert scalar.to_dict()["promedio"] == "4.00"


def test_by_weekday_is_monday_first_without_zero_rows(engine, floors, users, add_entry, sample_entries):
    add_entry(floors["p1"], date(2024, 1, 7), 4, user_id=users["op"])

    rows = engine.by_weekday()

    assert [(r.day_of_week, r.entries, r.visitors) for r in rows] == [
        (Weekday.MONDAY, 2, 12),
        (Weekday.TUESDAY, 1, 3),
        (Weekday.SUNDAY, 1, 4),
    ]


def test_by_date_ascending_with_weekday(engine, sample_entries):
    rows = engine.by_date(JAN)

    assert [(r.date, r.day_of_week, r.visitors) for r in rows] == [
        (date(2024, 1, 1), Weekday.MONDAY, 12),
        (date(2024, 1, 2), Weekday.TUESDAY, 3),
    ]


def test_date_bounds_are_inclusive(engine, sample_entries):
    single_day = engine.scalar(EntryFilter(start=date(2024, 1, 2), end=date(2024, 1, 2)))
    assert (single_day.entries, single_day.visitors) == (1, 3)

    open_start = engine.scalar(EntryFilter(end=date(2024, 1, 1)))
    assert (open_start.entries, open_start.visitors) == (2, 12)


def test_filters_by_floor_weekday_and_user(engine, floors, users, sample_entries):
    assert engine.scalar(EntryFilter(floor_id=floors["p2"])).visitors == 7
    assert engine.scalar(EntryFilter(day_of_week=Weekday.TUESDAY)).visitors == 3
    assert engine.scalar(EntryFilter(recorded_by_user_id=users["op"])).visitors == 8


def test_empty_set_gives_zero_scalars_and_empty_groups(engine, sample_entries):
    flt = EntryFilter(start=date(2023, 1, 1), end=date(2023, 12, 31))

    scalar = engine.scalar(flt)
    assert (scalar.entries, scalar.visitors, scalar.average) == (0, 0, 0.0)
    assert scalar.first_date is None
    assert scalar.to_dict()["promedio"] == "0.00"
    assert engine.by_floor(flt) == []
    assert engine.by_weekday(flt) == []
    assert engine.by_date(flt) == []
    assert engine.top_floor(date(2023, 5, 5)) is None


def test_trailing_window_covers_last_seven_days(engine, sample_entries):
    assert [r.date for r in engine.trailing_window(date(2024, 1, 7))] == [date(2024, 1, 1), date(2024, 1, 2)]
    assert [r.date for r in engine.trailing_window(date(2024, 1, 8))] == [date(2024, 1, 2)]
    assert engine.trailing_window(date(2024, 1, 9)) == []


def test_top_floor_for_a_day(engine, floors, sample_entries):
    top = engine.top_floor(date(2024, 1, 1))
    assert (top.floor_id, top.visitors) == (floors["p2"], 7)


def test_top_floor_tie_goes_to_lowest_floor_id(engine, floors, users, add_entry, sample_entries):
    add_entry(floors["p1"], date(2024, 1, 1), 2, user_id=users["op"], at=time(18, 0))

    top = engine.top_floor(date(2024, 1, 1))
    assert (top.floor_id, top.visitors) == (floors["p1"], 7)


def test_inverted_range_rejected_before_any_query():
    repo = RecordingStatsRepo()
    engine = AggregationEngine(repo)
    bad = EntryFilter(start=date(2024, 2, 1), end=date(2024, 1, 1))

    for method in (engine.scalar, engine.by_floor, engine.by_weekday, engine.by_date):
        with pytest.raises(InvalidRangeError):
            method(bad)

    assert repo.calls == []
