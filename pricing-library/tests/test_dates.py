"""Tests for calendars, periods and business-day adjustment."""

import datetime

import pytest

from fra.dates import (
    BusinessDayConvention,
    HolidayCalendar,
    NullCalendar,
    Period,
    TimeUnit,
    WeekendsOnly,
    add_months,
)

SAT = datetime.date(2024, 8, 31)
FRI = datetime.date(2024, 8, 30)
MON = datetime.date(2024, 9, 2)


@pytest.mark.parametrize(
    "convention, expected",
    [
        (BusinessDayConvention.UNADJUSTED, SAT),
        (BusinessDayConvention.FOLLOWING, MON),
        (BusinessDayConvention.MODIFIED_FOLLOWING, FRI),
        (BusinessDayConvention.PRECEDING, FRI),
    ],
)
def test_adjust_month_end_saturday(convention, expected) -> None:
    assert WeekendsOnly().adjust(SAT, convention) == expected


def test_modified_preceding_stays_in_month() -> None:
    """Sat 1 Jun 2024: preceding would land in May, so roll forward to Mon 3 Jun."""
    d = datetime.date(2024, 6, 1)
    cal = WeekendsOnly()
    assert cal.adjust(d, BusinessDayConvention.PRECEDING) == datetime.date(2024, 5, 31)
    assert cal.adjust(d, BusinessDayConvention.MODIFIED_PRECEDING) == datetime.date(2024, 6, 3)


def test_business_day_is_not_moved() -> None:
    for convention in BusinessDayConvention:
        assert WeekendsOnly().adjust(FRI, convention) == FRI


def test_advance_business_days_skips_weekend() -> None:
    cal = WeekendsOnly()
    assert cal.advance(FRI, 1) == MON
    assert cal.advance(MON, -1) == FRI
    assert cal.advance(MON, -2, TimeUnit.DAYS) == datetime.date(2024, 8, 29)


def test_advance_zero_days_adjusts() -> None:
    assert WeekendsOnly().advance(SAT, 0, TimeUnit.DAYS, BusinessDayConvention.FOLLOWING) == MON


def test_advance_skips_holidays() -> None:
    cal = HolidayCalendar("TEST", [MON])
    assert cal.advance(FRI, 1) == datetime.date(2024, 9, 3)
    assert cal.is_holiday(MON)
    assert cal.holidays == [MON]


def test_holidays_can_be_added_and_removed() -> None:
    cal = HolidayCalendar("TEST", [])
    cal.add_holiday(MON)
    assert not cal.is_business_day(MON)
    cal.remove_holiday(MON)
    assert cal.is_business_day(MON)
    cal.remove_holiday(MON)
    assert cal.holidays == []


def test_advance_months_with_adjustment() -> None:
    cal = WeekendsOnly()
    # 31 May + 3M = 31 Aug (Sat) -> modified following -> Fri 30 Aug
    d = datetime.date(2024, 5, 31)
    assert cal.advance(d, 3, TimeUnit.MONTHS, BusinessDayConvention.MODIFIED_FOLLOWING) == FRI


def test_advance_end_of_month_rule() -> None:
    """Last business day of Feb maps to last business day of the target month."""
    cal = WeekendsOnly()
    feb_end = datetime.date(2024, 2, 29)  # Thursday
    assert cal.advance(feb_end, 1, TimeUnit.MONTHS, end_of_month=True) == datetime.date(2024, 3, 29)
    assert cal.advance(feb_end, 1, TimeUnit.MONTHS) == datetime.date(2024, 3, 29)
    assert cal.advance(datetime.date(2024, 4, 30), 1, TimeUnit.MONTHS, end_of_month=True) == datetime.date(2024, 5, 31)


def test_advance_weeks_and_years() -> None:
    cal = NullCalendar()
    d = datetime.date(2024, 2, 29)
    assert cal.advance(d, 2, TimeUnit.WEEKS) == datetime.date(2024, 3, 14)
    assert cal.advance(d, 1, TimeUnit.YEARS) == datetime.date(2025, 2, 28)


def test_add_months_clamps_to_month_end() -> None:
    assert add_months(datetime.date(2024, 1, 31), 1) == datetime.date(2024, 2, 29)
    assert add_months(datetime.date(2023, 1, 31), 1) == datetime.date(2023, 2, 28)
    assert add_months(datetime.date(2024, 11, 15), 3) == datetime.date(2025, 2, 15)
    assert add_months(datetime.date(2024, 3, 15), -3) == datetime.date(2023, 12, 15)


def test_business_days_between() -> None:
    assert WeekendsOnly().business_days_between(FRI, datetime.date(2024, 9, 6)) == 5


def test_period_parse() -> None:
    assert Period.parse("3M") == Period(3, TimeUnit.MONTHS)
    assert Period.parse(" 1y ") == Period(1, TimeUnit.YEARS)
    assert -Period.parse("2D") == Period(-2, TimeUnit.DAYS)
    assert str(Period(6, TimeUnit.MONTHS)) == "6M"


def test_period_parse_rejects_garbage() -> None:
    with pytest.raises(ValueError, match="invalid period"):
        Period.parse("3 months")
