"""
Date-based discount curves.

This module keeps curve math minimal and explicit:
- Curves are anchored at a `reference_date`; a date maps to a time (year
  fraction) through the curve's day counter.
- ZeroRateCurve interpolates **linearly in continuously compounded zero
  rates**; DiscountCurve interpolates **log-linearly in discount factors**;
  both extrapolate flat.
- Curves are observable: whoever rebuilds or shocks a curve in place calls
  one of the update methods, and every instrument priced off it goes stale.

No bootstrapping happens here; pillar values are given.
"""

from __future__ import annotations

import datetime
import math
from bisect import bisect_right
from typing import Sequence

from fra.daycounters import Actual365Fixed
from fra.dates import NullCalendar
from fra.interfaces import Calendar, DayCounter
from fra.observable import Observable
from fra.rates import Compounding, Frequency, InterestRate


class YieldTermStructure(Observable):
    """Base class for discount curves.

    Subclasses implement `discount_time(t)`; everything date-based is derived.
    """

    def __init__(
        self,
        reference_date: datetime.date,
        day_counter: DayCounter | None = None,
        calendar: Calendar | None = None,
        name: str = "",
    ) -> None:
        super().__init__()
        self.name = name
        self._reference_date = reference_date
        self._day_counter = day_counter or Actual365Fixed()
        self._calendar = calendar or NullCalendar()

    @property
    def reference_date(self) -> datetime.date:
        return self._reference_date

    @property
    def day_counter(self) -> DayCounter:
        return self._day_counter

    @property
    def calendar(self) -> Calendar:
        return self._calendar

    def time_from_reference(self, d: datetime.date) -> float:
        return self._day_counter.year_fraction(self._reference_date, d)

    def discount_time(self, t: float) -> float:
        raise NotImplementedError

    def discount(self, d: datetime.date) -> float:
        """Discount factor to date d. Dates before the reference date raise."""
        if d < self._reference_date:
            raise ValueError(
                f"date {d.isoformat()} is before curve reference date "
                f"{self._reference_date.isoformat()}"
            )
        return self.discount_time(self.time_from_reference(d))

    def zero_rate(
        self,
        d: datetime.date,
        compounding: Compounding = Compounding.CONTINUOUS,
        frequency: Frequency = Frequency.ANNUAL,
    ) -> InterestRate:
        t = self.time_from_reference(d)
        if t == 0.0:
            # Use a short step so the rate at the reference date is defined.
            t = 1.0 / 365.0
        return InterestRate.implied_rate(
            1.0 / self.discount_time(t), self._day_counter, compounding, frequency, t
        )

    def forward_rate(
        self,
        d1: datetime.date,
        d2: datetime.date,
        day_counter: DayCounter | None = None,
        compounding: Compounding = Compounding.SIMPLE,
        frequency: Frequency = Frequency.ONCE,
    ) -> InterestRate:
        """Forward rate between d1 and d2 implied by this curve's discount factors."""
        if d2 <= d1:
            raise ValueError("d2 must be after d1")
        dc = day_counter or self._day_counter
        compound = self.discount(d1) / self.discount(d2)
        return InterestRate.implied_rate(
            compound, dc, compounding, frequency, dc.year_fraction(d1, d2)
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, reference_date={self._reference_date})"


class FlatForward(YieldTermStructure):
    """Single-rate curve. `set_rate` shocks it in place."""

    def __init__(
        self,
        reference_date: datetime.date,
        rate: float,
        day_counter: DayCounter | None = None,
        calendar: Calendar | None = None,
        compounding: Compounding = Compounding.CONTINUOUS,
        frequency: Frequency = Frequency.ANNUAL,
        name: str = "",
    ) -> None:
        super().__init__(reference_date, day_counter, calendar, name)
        self._compounding = compounding
        self._frequency = frequency
        self._rate = InterestRate(rate, self.day_counter, compounding, frequency)

    @property
    def rate(self) -> InterestRate:
        return self._rate

    def set_rate(self, rate: float) -> None:
        self._rate = InterestRate(rate, self.day_counter, self._compounding, self._frequency)
        self.notify_observers()

    def discount_time(self, t: float) -> float:
        return self._rate.discount_factor(t)


def _pillar_times(curve: YieldTermStructure, dates: Sequence[datetime.date]) -> list[float]:
    times = [curve.time_from_reference(d) for d in dates]
    if times and times[0] < 0:
        raise ValueError("pillar dates must not precede the reference date")
    for i in range(1, len(times)):
        if times[i] <= times[i - 1]:
            raise ValueError("pillar dates must be strictly increasing")
    return times


class ZeroRateCurve(YieldTermStructure):
    """
    Zero rate curve (continuously compounded) with linear interpolation.

    - `dates[i]` are increasing pillar dates; `zero_rates[i]` is the CC zero
      rate at that pillar.
    - Rates between pillars are interpolated linearly in time; beyond the end
      pillars they are flat.
    """

    def __init__(
        self,
        reference_date: datetime.date,
        dates: Sequence[datetime.date],
        zero_rates: Sequence[float],
        day_counter: DayCounter | None = None,
        calendar: Calendar | None = None,
        name: str = "",
    ) -> None:
        super().__init__(reference_date, day_counter, calendar, name)
        if len(dates) != len(zero_rates):
            raise ValueError("dates and zero_rates must have the same length")
        if not dates:
            raise ValueError("curve has no pillars")
        self._dates = list(dates)
        self._times = _pillar_times(self, self._dates)
        self._rates = [float(r) for r in zero_rates]

    @property
    def dates(self) -> list[datetime.date]:
        return list(self._dates)

    @property
    def zero_rates(self) -> list[float]:
        return list(self._rates)

    def update_rates(self, zero_rates: Sequence[float]) -> None:
        """Replace pillar rates in place and notify observers."""
        if len(zero_rates) != len(self._rates):
            raise ValueError("dates and zero_rates must have the same length")
        self._rates = [float(r) for r in zero_rates]
        self.notify_observers()

    def zero_rate_cc(self, t: float) -> float:
        """Continuously compounded zero rate at time t (year-fraction), t >= 0."""
        if t < 0:
            raise ValueError("t must be >= 0")
        times, rates = self._times, self._rates
        if t <= times[0]:
            return rates[0]
        if t >= times[-1]:
            return rates[-1]
        i = bisect_right(times, t) - 1
        t0, t1 = times[i], times[i + 1]
        r0, r1 = rates[i], rates[i + 1]
        return r0 + (r1 - r0) * (t - t0) / (t1 - t0)

    def discount_time(self, t: float) -> float:
        r"""DF(t) = exp(-r(t)*t)."""
        return math.exp(-self.zero_rate_cc(t) * t)

    def bumped(self, bump: float) -> "ZeroRateCurve":
        """New curve with a parallel additive shift (1bp = 0.0001) to all zero rates."""
        return ZeroRateCurve(
            self.reference_date,
            self._dates,
            [r + bump for r in self._rates],
            self.day_counter,
            self.calendar,
            self.name,
        )


class DiscountCurve(YieldTermStructure):
    """
    Curve given by discount factors at pillar dates, log-linear in between.

    The reference date has DF = 1 implicitly unless it is a pillar itself.
    Beyond the last pillar the last instantaneous forward is kept flat.
    """

    def __init__(
        self,
        reference_date: datetime.date,
        dates: Sequence[datetime.date],
        discounts: Sequence[float],
        day_counter: DayCounter | None = None,
        calendar: Calendar | None = None,
        name: str = "",
    ) -> None:
        super().__init__(reference_date, day_counter, calendar, name)
        if len(dates) != len(discounts):
            raise ValueError("dates and discounts must have the same length")
        if not dates:
            raise ValueError("curve has no pillars")
        self._dates = list(dates)
        self._times = _pillar_times(self, self._dates)
        self._set_discounts(discounts)

    def _set_discounts(self, discounts: Sequence[float]) -> None:
        if any(df <= 0 for df in discounts):
            raise ValueError("discount factors must be positive")
        times = list(self._times)
        logs = [math.log(df) for df in discounts]
        if times[0] > 0:
            times.insert(0, 0.0)
            logs.insert(0, 0.0)
        self._node_times = times
        self._node_logs = logs
        self._discounts = [float(df) for df in discounts]

    @property
    def dates(self) -> list[datetime.date]:
        return list(self._dates)

    @property
    def discounts(self) -> list[float]:
        return list(self._discounts)

    def update_discounts(self, discounts: Sequence[float]) -> None:
        """Replace pillar discount factors in place and notify observers."""
        if len(discounts) != len(self._dates):
            raise ValueError("dates and discounts must have the same length")
        self._set_discounts(discounts)
        self.notify_observers()

    def discount_time(self, t: float) -> float:
        if t < 0:
            raise ValueError("t must be >= 0")
        times, logs = self._node_times, self._node_logs
        if len(times) == 1:
            return math.exp(logs[0])
        if t <= times[0]:
            return math.exp(logs[0])
        if t >= times[-1]:
            i = len(times) - 2
        else:
            i = bisect_right(times, t) - 1
        t0, t1 = times[i], times[i + 1]
        l0, l1 = logs[i], logs[i + 1]
        return math.exp(l0 + (l1 - l0) * (t - t0) / (t1 - t0))
