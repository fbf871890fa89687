"""
Calendars, periods and business-day conventions.

Only what an FRA needs: rolling a date onto a business day, stepping a number
of business days, and adding day/week/month/year periods. Holiday rules are
supplied explicitly (HolidayCalendar); no market calendar is generated here.
"""

from __future__ import annotations

import datetime
import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable


class TimeUnit(Enum):
    DAYS = "D"
    WEEKS = "W"
    MONTHS = "M"
    YEARS = "Y"


class BusinessDayConvention(Enum):
    """Date adjustment conventions for rolling onto business days."""

    UNADJUSTED = "UNADJUSTED"
    FOLLOWING = "FOLLOWING"
    MODIFIED_FOLLOWING = "MODFOLLOWING"  # Following, unless crosses month
    PRECEDING = "PRECEDING"
    MODIFIED_PRECEDING = "MODPRECEDING"  # Preceding, unless crosses month


_PERIOD_RE = re.compile(r"^\s*(-?\d+)\s*([DWMY])\s*$", re.IGNORECASE)


@dataclass(frozen=True)
class Period:
    """A signed length of time such as 3M or -2D."""

    length: int
    unit: TimeUnit

    @classmethod
    def parse(cls, text: str) -> "Period":
        """Parse tenors like '3M', '6m', '1Y', '2D'."""
        match = _PERIOD_RE.match(text)
        if match is None:
            raise ValueError(f"invalid period '{text}'")
        return cls(int(match.group(1)), TimeUnit(match.group(2).upper()))

    def __neg__(self) -> "Period":
        return Period(-self.length, self.unit)

    def __str__(self) -> str:
        return f"{self.length}{self.unit.value}"


def add_months(d: datetime.date, months: int) -> datetime.date:
    """Add a number of months to a date, clamping to the last day of the month."""
    new_month = d.month - 1 + months
    new_year = d.year + new_month // 12
    new_month = new_month % 12 + 1
    day = d.day
    while True:
        try:
            return datetime.date(new_year, new_month, day)
        except ValueError:
            day -= 1


def end_of_month(d: datetime.date) -> datetime.date:
    return add_months(d.replace(day=1), 1) - datetime.timedelta(days=1)


def is_weekend(d: datetime.date) -> bool:
    return d.weekday() >= 5


class Calendar:
    """Base class for business-day calendars.

    Subclasses only decide which days are business days; adjustment and
    advancing are shared.
    """

    name = "Calendar"

    def is_business_day(self, d: datetime.date) -> bool:
        raise NotImplementedError

    def is_holiday(self, d: datetime.date) -> bool:
        return not self.is_business_day(d)

    def end_of_month(self, d: datetime.date) -> datetime.date:
        """Last business day of the month containing `d`."""
        return self.adjust(end_of_month(d), BusinessDayConvention.PRECEDING)

    def is_end_of_month(self, d: datetime.date) -> bool:
        return d == self.end_of_month(d)

    def adjust(
        self,
        d: datetime.date,
        convention: BusinessDayConvention = BusinessDayConvention.FOLLOWING,
    ) -> datetime.date:
        """Adjust a date according to a business day convention."""
        if convention is BusinessDayConvention.UNADJUSTED:
            return d

        if convention in (
            BusinessDayConvention.FOLLOWING,
            BusinessDayConvention.MODIFIED_FOLLOWING,
        ):
            adjusted = self._roll(d, 1)
            if (
                convention is BusinessDayConvention.MODIFIED_FOLLOWING
                and adjusted.month != d.month
            ):
                return self._roll(d, -1)
            return adjusted

        adjusted = self._roll(d, -1)
        if (
            convention is BusinessDayConvention.MODIFIED_PRECEDING
            and adjusted.month != d.month
        ):
            return self._roll(d, 1)
        return adjusted

    def _roll(self, d: datetime.date, step: int) -> datetime.date:
        while not self.is_business_day(d):
            d += datetime.timedelta(days=step)
        return d

    def advance(
        self,
        d: datetime.date,
        n: int,
        unit: TimeUnit = TimeUnit.DAYS,
        convention: BusinessDayConvention = BusinessDayConvention.FOLLOWING,
        end_of_month: bool = False,
    ) -> datetime.date:
        """Advance `d` by `n` units.

        DAYS counts business days (the convention only matters for n == 0);
        WEEKS, MONTHS and YEARS use calendar arithmetic followed by
        adjustment. With `end_of_month`, a start date on the last business day
        of its month lands on the last business day of the target month.
        """
        if n == 0:
            return self.adjust(d, convention)

        if unit is TimeUnit.DAYS:
            step = 1 if n > 0 else -1
            remaining = abs(n)
            current = d
            while remaining > 0:
                current += datetime.timedelta(days=step)
                if self.is_business_day(current):
                    remaining -= 1
            return current

        if unit is TimeUnit.WEEKS:
            return self.adjust(d + datetime.timedelta(weeks=n), convention)

        months = n if unit is TimeUnit.MONTHS else 12 * n
        target = add_months(d, months)
        if end_of_month and self.is_end_of_month(d):
            return self.end_of_month(target)
        return self.adjust(target, convention)

    def advance_period(
        self,
        d: datetime.date,
        period: Period,
        convention: BusinessDayConvention = BusinessDayConvention.FOLLOWING,
        end_of_month: bool = False,
    ) -> datetime.date:
        return self.advance(d, period.length, period.unit, convention, end_of_month)

    def business_days_between(self, d1: datetime.date, d2: datetime.date) -> int:
        """Business days in [d1, d2)."""
        count = 0
        current = d1
        while current < d2:
            if self.is_business_day(current):
                count += 1
            current += datetime.timedelta(days=1)
        return count

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    def __str__(self) -> str:
        return self.name


class NullCalendar(Calendar):
    """Every day is a business day."""

    name = "Null"

    def is_business_day(self, d: datetime.date) -> bool:
        return True


class WeekendsOnly(Calendar):
    """Saturdays and Sundays are the only holidays."""

    name = "Weekends only"

    def is_business_day(self, d: datetime.date) -> bool:
        return not is_weekend(d)


class HolidayCalendar(Calendar):
    """Weekends plus an explicit list of holidays."""

    def __init__(self, name: str, holidays: Iterable[datetime.date] = ()) -> None:
        self.name = name
        self._holidays: set[datetime.date] = set(holidays)

    @property
    def holidays(self) -> list[datetime.date]:
        return sorted(self._holidays)

    def add_holiday(self, d: datetime.date) -> None:
        self._holidays.add(d)

    def remove_holiday(self, d: datetime.date) -> None:
        self._holidays.discard(d)

    def is_business_day(self, d: datetime.date) -> bool:
        return not is_weekend(d) and d not in self._holidays

    def __repr__(self) -> str:
        return f"HolidayCalendar(name={self.name!r}, holidays={len(self._holidays)})"
