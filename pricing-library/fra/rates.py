"""
Interest rate values.

An `InterestRate` bundles a rate with the conventions needed to turn it into
compounding or discount factors. Rates are immutable: every computed forward
rate is a new value.
"""

from __future__ import annotations

import datetime
import math
from dataclasses import dataclass
from enum import Enum

from fra.interfaces import DayCounter


class Compounding(Enum):
    SIMPLE = "simple"
    COMPOUNDED = "compounded"
    CONTINUOUS = "continuous"


class Frequency(Enum):
    """Compounding periods per year; ONCE means a single period."""

    ONCE = 0
    ANNUAL = 1
    SEMIANNUAL = 2
    QUARTERLY = 4
    MONTHLY = 12


@dataclass(frozen=True)
class InterestRate:
    """Rate together with day counter, compounding and frequency."""

    rate: float
    day_counter: DayCounter
    compounding: Compounding = Compounding.SIMPLE
    frequency: Frequency = Frequency.ONCE

    def __post_init__(self) -> None:
        if self.compounding is Compounding.COMPOUNDED and self.frequency is Frequency.ONCE:
            raise ValueError("compounded rates need a frequency other than ONCE")

    def compound_factor(self, t: float) -> float:
        """
        Growth of one unit over time t (year fraction).

        simple: 1 + r*t
        compounded: (1 + r/f)^(f*t)
        continuous: exp(r*t)
        """
        if t < 0:
            raise ValueError("t must be >= 0")
        if self.compounding is Compounding.SIMPLE:
            return 1.0 + self.rate * t
        if self.compounding is Compounding.CONTINUOUS:
            return math.exp(self.rate * t)
        f = self.frequency.value
        return (1.0 + self.rate / f) ** (f * t)

    def discount_factor(self, t: float) -> float:
        return 1.0 / self.compound_factor(t)

    def compound_factor_between(self, d1: datetime.date, d2: datetime.date) -> float:
        return self.compound_factor(self.day_counter.year_fraction(d1, d2))

    def discount_factor_between(self, d1: datetime.date, d2: datetime.date) -> float:
        return 1.0 / self.compound_factor_between(d1, d2)

    @classmethod
    def implied_rate(
        cls,
        compound: float,
        day_counter: DayCounter,
        compounding: Compounding,
        frequency: Frequency,
        t: float,
    ) -> "InterestRate":
        """Rate that grows one unit into `compound` over time t."""
        if compound <= 0:
            raise ValueError("compound factor must be positive")
        if t <= 0:
            raise ValueError("t must be > 0")
        if compounding is Compounding.SIMPLE:
            r = (compound - 1.0) / t
        elif compounding is Compounding.CONTINUOUS:
            r = math.log(compound) / t
        else:
            f = frequency.value
            if f == 0:
                raise ValueError("compounded rates need a frequency other than ONCE")
            r = (compound ** (1.0 / (f * t)) - 1.0) * f
        return cls(r, day_counter, compounding, frequency)

    def __float__(self) -> float:
        return self.rate

    def __str__(self) -> str:
        if self.compounding is Compounding.COMPOUNDED:
            style = f"{self.frequency.name.lower()} compounding"
        else:
            style = f"{self.compounding.value} compounding"
        return f"{self.rate * 100:.6f} % {self.day_counter.name} {style}"
