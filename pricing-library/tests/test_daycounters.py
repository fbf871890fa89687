"""Tests for day count conventions."""

import datetime

import pytest

from fra.daycounters import (
    Actual360,
    Actual365Fixed,
    ActualActual,
    Thirty360,
    day_counter_from_name,
)


def test_actual_360_and_365() -> None:
    d1, d2 = datetime.date(2024, 4, 16), datetime.date(2024, 7, 15)
    assert Actual360().day_count(d1, d2) == 90
    assert Actual360().year_fraction(d1, d2) == 0.25
    assert abs(Actual365Fixed().year_fraction(d1, d2) - 90 / 365) < 1e-15


def test_thirty_360_month_ends() -> None:
    dc = Thirty360()
    assert dc.day_count(datetime.date(2024, 1, 31), datetime.date(2024, 3, 31)) == 60
    assert dc.year_fraction(datetime.date(2024, 1, 15), datetime.date(2024, 7, 15)) == 0.5


def test_actual_actual_across_leap_year() -> None:
    dc = ActualActual()
    d1, d2 = datetime.date(2023, 7, 1), datetime.date(2024, 7, 1)
    expected = 184 / 365 + 182 / 366
    assert abs(dc.year_fraction(d1, d2) - expected) < 1e-15
    assert dc.year_fraction(d2, d1) == -dc.year_fraction(d1, d2)


def test_day_counters_compare_by_type() -> None:
    assert Actual360() == Actual360()
    assert Actual360() != Actual365Fixed()
    assert len({Actual360(), Actual360()}) == 1


@pytest.mark.parametrize(
    "name, expected",
    [("ACT/360", Actual360()), ("act/365f", Actual365Fixed()), ("30/360", Thirty360())],
)
def test_day_counter_from_name(name, expected) -> None:
    assert day_counter_from_name(name) == expected


def test_day_counter_from_unknown_name() -> None:
    with pytest.raises(ValueError, match="unknown day counter"):
        day_counter_from_name("BUS/252")
