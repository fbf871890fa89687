"""
Forward Rate Agreement.

A FRA settles, at the start of its accrual period (the value date), the
difference between a forward rate and the strike over [value date, maturity
date], discounted back to the value date at the forward rate itself:

    amount = N * sign * (F - K) * T / (1 + F * T)

The settlement amount is then discounted to today on the discounting curve.
The forward rate comes from one of three strategies (see fra.strategies),
chosen from the market objects supplied at construction.
"""

from __future__ import annotations

import datetime
import logging
from enum import Enum
from typing import Optional

from fra.dates import BusinessDayConvention, TimeUnit
from fra.errors import InstrumentValidationError
from fra.instrument import Instrument
from fra.interfaces import Calendar, DayCounter, FloatingRateIndex, TermStructure
from fra.observable import register_with
from fra.rates import Compounding, Frequency, InterestRate
from fra.settings import Settings
from fra.settings import settings as default_settings
from fra.strategies import ForwardRateStrategy, select_forward_rate_strategy

logger = logging.getLogger(__name__)


class Position(Enum):
    """Long receives (F - K), short pays it."""

    LONG = 1
    SHORT = -1


class ForwardRateAgreement(Instrument):
    """
    FRA on a floating-rate index or on a discount curve.

    With an `index`, conventions (day counter, fixing calendar, business-day
    convention) are the index's; `use_indexed_coupon` chooses between the
    realized fixing and the par-coupon approximation on the index forwarding
    curve. Without an index, `discount_curve` supplies conventions and the
    forward rate, and `fixing_days` / `business_day_convention` define the
    fixing date and the maturity adjustment.

    NPV is discounted on `discount_curve` when given, else on the index
    forwarding curve.
    """

    def __init__(
        self,
        value_date: datetime.date,
        maturity_date: datetime.date,
        position: Position,
        strike_forward_rate: float,
        notional_amount: float,
        index: Optional[FloatingRateIndex] = None,
        discount_curve: Optional[TermStructure] = None,
        use_indexed_coupon: bool = True,
        fixing_days: int = 2,
        business_day_convention: BusinessDayConvention = BusinessDayConvention.MODIFIED_FOLLOWING,
        settings: Optional[Settings] = None,
    ) -> None:
        super().__init__()
        if not isinstance(position, Position):
            raise InstrumentValidationError(f"position must be a Position, got {position!r}")

        day_counter: DayCounter
        calendar: Calendar
        if index is not None:
            day_counter = index.day_counter
            calendar = index.fixing_calendar
            business_day_convention = index.business_day_convention
        elif discount_curve is not None:
            day_counter = discount_curve.day_counter
            calendar = discount_curve.calendar
            use_indexed_coupon = False
        else:
            raise InstrumentValidationError("either an index or a discount curve must be supplied")

        if notional_amount <= 0.0:
            raise InstrumentValidationError("notional_amount must be positive")
        adjusted_maturity = calendar.adjust(maturity_date, business_day_convention)
        if not value_date < adjusted_maturity:
            raise InstrumentValidationError(
                f"value_date must be earlier than maturity_date "
                f"({value_date.isoformat()} vs adjusted {adjusted_maturity.isoformat()})"
            )
        if discount_curve is None and index.forwarding_curve is None:
            raise InstrumentValidationError(
                f"no discounting curve: supply a discount curve or give {index.name} "
                "a forwarding curve"
            )

        self._position = position
        self._notional_amount = float(notional_amount)
        self._index = index
        self._discount_curve = discount_curve
        self._use_indexed_coupon = use_indexed_coupon
        self._day_counter = day_counter
        self._calendar = calendar
        self._business_day_convention = business_day_convention
        self._value_date = value_date
        self._maturity_date = adjusted_maturity
        self._fixing_days = fixing_days
        self._strike_forward_rate = InterestRate(
            strike_forward_rate, day_counter, Compounding.SIMPLE, Frequency.ONCE
        )
        self._strategy = select_forward_rate_strategy(index, discount_curve, use_indexed_coupon)
        self._settings = settings or default_settings

        self._forward_rate: Optional[InterestRate] = None
        self._amount: Optional[float] = None

        register_with(self, self._settings)
        register_with(self, discount_curve)
        register_with(self, index)
        logger.debug(
            f"FRA {position.name} {self._notional_amount:,.2f} "
            f"{value_date.isoformat()}->{adjusted_maturity.isoformat()} "
            f"strike {strike_forward_rate} using {self._strategy.kind}"
        )

    @classmethod
    def from_index(
        cls,
        value_date: datetime.date,
        position: Position,
        strike_forward_rate: float,
        notional_amount: float,
        index: FloatingRateIndex,
        discount_curve: Optional[TermStructure] = None,
        use_indexed_coupon: bool = True,
        settings: Optional[Settings] = None,
    ) -> "ForwardRateAgreement":
        """FRA whose accrual period is one index tenor starting at `value_date`."""
        return cls(
            value_date,
            index.maturity_date(value_date),
            position,
            strike_forward_rate,
            notional_amount,
            index=index,
            discount_curve=discount_curve,
            use_indexed_coupon=use_indexed_coupon,
            settings=settings,
        )

    # --- contract terms ---

    @property
    def position(self) -> Position:
        return self._position

    @property
    def notional_amount(self) -> float:
        return self._notional_amount

    @property
    def strike_forward_rate(self) -> InterestRate:
        return self._strike_forward_rate

    @property
    def value_date(self) -> datetime.date:
        return self._value_date

    @property
    def maturity_date(self) -> datetime.date:
        return self._maturity_date

    @property
    def index(self) -> Optional[FloatingRateIndex]:
        return self._index

    @property
    def discount_curve(self) -> Optional[TermStructure]:
        return self._discount_curve

    @property
    def use_indexed_coupon(self) -> bool:
        return self._use_indexed_coupon

    @property
    def fixing_days(self) -> int:
        return self._fixing_days

    @property
    def day_counter(self) -> DayCounter:
        return self._day_counter

    @property
    def calendar(self) -> Calendar:
        return self._calendar

    @property
    def business_day_convention(self) -> BusinessDayConvention:
        return self._business_day_convention

    @property
    def strategy(self) -> ForwardRateStrategy:
        return self._strategy

    @property
    def discounting_curve(self) -> TermStructure:
        """Explicit discount curve, else the index forwarding curve."""
        if self._discount_curve is not None:
            return self._discount_curve
        return self._index.forwarding_curve

    # --- dates ---

    def fixing_date(self) -> datetime.date:
        if self._index is not None:
            return self._index.fixing_date(self._value_date)
        return self._calendar.advance(
            self._value_date, -self._fixing_days, TimeUnit.DAYS, self._business_day_convention
        )

    def is_expired(self) -> bool:
        return self._settings.has_occurred(self._value_date)

    # --- results ---

    def amount(self) -> float:
        self.calculate()
        return self._amount

    def forward_rate(self) -> InterestRate:
        self.calculate()
        return self._forward_rate

    # --- calculation ---

    def _compute_forward_rate(self) -> InterestRate:
        return self._strategy.forward_rate(self._value_date, self._maturity_date, self.fixing_date())

    def _settlement_amount(self, forward: InterestRate) -> float:
        sign = self._position.value
        F = forward.rate
        K = self._strike_forward_rate.rate
        T = forward.day_counter.year_fraction(self._value_date, self._maturity_date)
        return self._notional_amount * sign * (F - K) * T / (1.0 + F * T)

    def perform_calculations(self) -> None:
        forward = self._compute_forward_rate()
        amount = self._settlement_amount(forward)
        npv = amount * self.discounting_curve.discount(self._value_date)

        self._forward_rate = forward
        self._amount = amount
        self._npv = npv
        self._error_estimate = None

    def setup_expired(self) -> None:
        # The rate stays visible for reporting; only the monetary values are zeroed.
        forward = self._compute_forward_rate()
        self._forward_rate = forward
        self._amount = 0.0
        super().setup_expired()

    def __repr__(self) -> str:
        return (
            f"ForwardRateAgreement({self._position.name}, notional={self._notional_amount}, "
            f"value_date={self._value_date}, maturity_date={self._maturity_date}, "
            f"strike={self._strike_forward_rate.rate}, strategy={self._strategy.kind})"
        )
