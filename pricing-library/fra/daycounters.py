"""Day count conventions: how interest accrues between two dates."""

from __future__ import annotations

import datetime


def _is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


class DayCounter:
    """Base class for day counters.

    Day counters carry no state, so two instances of the same class compare
    equal and hash alike.
    """

    name = "DayCounter"

    def day_count(self, d1: datetime.date, d2: datetime.date) -> int:
        return (d2 - d1).days

    def year_fraction(self, d1: datetime.date, d2: datetime.date) -> float:
        raise NotImplementedError

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash(type(self))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    def __str__(self) -> str:
        return self.name


class Actual360(DayCounter):
    """Actual/360, the money-market convention of most IBOR indexes."""

    name = "Actual/360"

    def year_fraction(self, d1: datetime.date, d2: datetime.date) -> float:
        return self.day_count(d1, d2) / 360.0


class Actual365Fixed(DayCounter):
    """Actual/365 (Fixed)."""

    name = "Actual/365 (Fixed)"

    def year_fraction(self, d1: datetime.date, d2: datetime.date) -> float:
        return self.day_count(d1, d2) / 365.0


class Thirty360(DayCounter):
    """30/360 bond basis (US)."""

    name = "30/360 (Bond Basis)"

    def day_count(self, d1: datetime.date, d2: datetime.date) -> int:
        dd1, dd2 = d1.day, d2.day
        if dd1 == 31:
            dd1 = 30
        if dd2 == 31 and dd1 == 30:
            dd2 = 30
        return 360 * (d2.year - d1.year) + 30 * (d2.month - d1.month) + (dd2 - dd1)

    def year_fraction(self, d1: datetime.date, d2: datetime.date) -> float:
        return self.day_count(d1, d2) / 360.0


class ActualActual(DayCounter):
    """Actual/Actual (ISDA): days in each calendar year over that year's length."""

    name = "Actual/Actual (ISDA)"

    def year_fraction(self, d1: datetime.date, d2: datetime.date) -> float:
        if d1 == d2:
            return 0.0
        if d1 > d2:
            return -self.year_fraction(d2, d1)
        if d1.year == d2.year:
            return self.day_count(d1, d2) / (366.0 if _is_leap_year(d1.year) else 365.0)

        first_year_end = datetime.date(d1.year + 1, 1, 1)
        last_year_start = datetime.date(d2.year, 1, 1)
        fraction = (first_year_end - d1).days / (366.0 if _is_leap_year(d1.year) else 365.0)
        fraction += d2.year - d1.year - 1
        fraction += (d2 - last_year_start).days / (366.0 if _is_leap_year(d2.year) else 365.0)
        return fraction


_BY_NAME: dict[str, type[DayCounter]] = {
    "ACT/360": Actual360,
    "ACTUAL/360": Actual360,
    "ACT/365": Actual365Fixed,
    "ACT/365F": Actual365Fixed,
    "ACTUAL/365 (FIXED)": Actual365Fixed,
    "30/360": Thirty360,
    "30/360 (BOND BASIS)": Thirty360,
    "ACT/ACT": ActualActual,
    "ACTUAL/ACTUAL (ISDA)": ActualActual,
}


def day_counter_from_name(name: str) -> DayCounter:
    """Look up a day counter by its market code, e.g. 'ACT/360'."""
    try:
        return _BY_NAME[name.strip().upper()]()
    except KeyError:
        raise ValueError(
            f"unknown day counter '{name}'. Known: {sorted(_BY_NAME)}"
        ) from None
