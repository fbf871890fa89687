"""
Forward-rate strategies for FRA valuation.

Which market object implies the FRA forward rate is decided once, when the
contract is built, by `select_forward_rate_strategy`:

- RealizedFixing: the index's fixing on the FRA fixing date.
- IndexApproximation: par-coupon approximation on the index forwarding curve.
- CurveImplied: the same formula on an explicitly supplied discount curve.

Each strategy is a small immutable object, so the three formulas can be
exercised on their own without building an FRA.
"""

from __future__ import annotations

import datetime
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from fra.errors import MissingMarketDataError
from fra.interfaces import DayCounter, FloatingRateIndex, TermStructure
from fra.rates import Compounding, Frequency, InterestRate


def curve_implied_rate(
    curve: TermStructure,
    day_counter: DayCounter,
    value_date: datetime.date,
    maturity_date: datetime.date,
) -> InterestRate:
    """
    Simple forward rate between value and maturity dates:

        F = (P(value) / P(maturity) - 1) / tau
    """
    tau = day_counter.year_fraction(value_date, maturity_date)
    rate = (curve.discount(value_date) / curve.discount(maturity_date) - 1.0) / tau
    return InterestRate(rate, day_counter, Compounding.SIMPLE, Frequency.ONCE)


class ForwardRateStrategy(ABC):
    """How an FRA obtains its forward rate."""

    kind: str = ""

    @abstractmethod
    def forward_rate(
        self,
        value_date: datetime.date,
        maturity_date: datetime.date,
        fixing_date: datetime.date,
    ) -> InterestRate:
        """Forward rate for the accrual period [value_date, maturity_date]."""
        ...


@dataclass(frozen=True)
class RealizedFixing(ForwardRateStrategy):
    """The index fixing at the FRA fixing date, in the index's day count."""

    index: FloatingRateIndex
    kind = "RealizedFixing"

    def forward_rate(self, value_date, maturity_date, fixing_date) -> InterestRate:
        return InterestRate(
            self.index.fixing(fixing_date),
            self.index.day_counter,
            Compounding.SIMPLE,
            Frequency.ONCE,
        )


@dataclass(frozen=True)
class IndexApproximation(ForwardRateStrategy):
    """Par-coupon approximation on the index's own forwarding curve."""

    index: FloatingRateIndex
    kind = "IndexApproximation"

    def forward_rate(self, value_date, maturity_date, fixing_date) -> InterestRate:
        curve = self.index.forwarding_curve
        if curve is None:
            raise MissingMarketDataError(
                f"{self.index.name} has no forwarding curve; "
                "cannot compute the par-coupon approximation"
            )
        return curve_implied_rate(curve, self.index.day_counter, value_date, maturity_date)


@dataclass(frozen=True)
class CurveImplied(ForwardRateStrategy):
    """Forward rate implied by the discount curve, in the curve's day count."""

    curve: TermStructure
    kind = "CurveImplied"

    def forward_rate(self, value_date, maturity_date, fixing_date) -> InterestRate:
        return curve_implied_rate(self.curve, self.curve.day_counter, value_date, maturity_date)


def select_forward_rate_strategy(
    index: Optional[FloatingRateIndex],
    discount_curve: Optional[TermStructure],
    use_indexed_coupon: bool,
) -> ForwardRateStrategy:
    if index is not None:
        if use_indexed_coupon:
            return RealizedFixing(index)
        return IndexApproximation(index)
    if discount_curve is None:
        raise MissingMarketDataError("either an index or a discount curve is required")
    return CurveImplied(discount_curve)
