from __future__ import annotations

from datetime import date, datetime, time

import pytest

from src.visitor_control.visitor_control.common.datetime_utils import (
    day_of_week_for,
    format_local_timestamp,
    month_bounds,
    trailing_window,
)
from src.visitor_control.visitor_control.common.validators import (
    require_hhmm,
    require_int_between,
    require_iso_date,
    require_positive_int,
)
from src.visitor_control.visitor_control.core.enums import Weekday
from src.visitor_control.visitor_control.core.exceptions import ValidationError


@pytest.mark.parametrize(
    "day, expected",
    [
        (date(2024, 1, 1), Weekday.MONDAY),
        (date(2024, 1, 3), Weekday.WEDNESDAY),
        (date(2024, 2, 29), Weekday.THURSDAY),
        (date(2024, 1, 6), Weekday.SATURDAY),
        (date(2024, 1, 7), Weekday.SUNDAY),
    ],
)
def test_day_of_week_for(day, expected):
    assert day_of_week_for(day) is expected


def test_weekday_positions_start_on_monday():
    assert [w.position for w in Weekday] == [1, 2, 3, 4, 5, 6, 7]
    assert Weekday.SUNDAY.value == "Domingo"


def test_month_bounds_leap_february():
    assert month_bounds(2024, 2) == (date(2024, 2, 1), date(2024, 2, 29))
    assert month_bounds(2023, 2) == (date(2023, 2, 1), date(2023, 2, 28))
    assert month_bounds(2024, 12) == (date(2024, 12, 1), date(2024, 12, 31))


def test_trailing_window_is_seven_days_inclusive():
    assert trailing_window(date(2024, 3, 1), 7) == (date(2024, 2, 24), date(2024, 3, 1))


def test_format_local_timestamp():
    assert format_local_timestamp(datetime(2024, 1, 5, 9, 3, 7)) == "5/1/2024, 09:03:07"


def test_count_bounds_are_inclusive():
    assert require_int_between(1, "La cantidad", 1, 1000) == 1
    assert require_int_between("1000", "La cantidad", 1, 1000) == 1000
    for bad in (0, 1001, "abc", None, 2.5, True, False):
        with pytest.raises(ValidationError):
            require_int_between(bad, "La cantidad", 1, 1000)


def test_floor_id_rejects_booleans():
    assert require_positive_int("3", "El piso") == 3
    with pytest.raises(ValidationError):
        require_positive_int(True, "El piso")


def test_date_and_time_parsing():
    assert require_iso_date("2024-01-31", "La fecha") == date(2024, 1, 31)
    assert require_hhmm("07:05", "La hora") == time(7, 5)
    with pytest.raises(ValidationError):
        require_iso_date("31/01/2024", "La fecha")
    with pytest.raises(ValidationError):
        require_hhmm("25:00", "La hora")
