"""GraphQL types for the FRA pricing API."""

from __future__ import annotations

import datetime
from enum import Enum
from typing import Optional

import strawberry


@strawberry.enum
class PositionType(Enum):
    LONG = "LONG"
    SHORT = "SHORT"


# --- Input types (request payloads) ---


@strawberry.input
class CurveInput:
    """
    Discount curve anchored at reference_date. Give exactly one of:
    flat_rate (continuously compounded), zero_rates_cc at dates, or
    discount_factors at dates.
    """

    name: str
    reference_date: datetime.date
    flat_rate: Optional[float] = None
    dates: Optional[list[datetime.date]] = None
    zero_rates_cc: Optional[list[float]] = None
    discount_factors: Optional[list[float]] = None
    day_counter: str = "ACT/365F"
    calendar: str = "WEEKENDS"
    holidays: Optional[list[datetime.date]] = None


@strawberry.input
class FixingInput:
    """Realized index fixing."""

    fixing_date: datetime.date
    rate: float


@strawberry.input
class IndexInput:
    """IBOR-style index; forwarding_curve names a curve in the same market."""

    name: str
    family_name: str
    tenor: str
    fixing_days: int = 2
    day_counter: str = "ACT/360"
    business_day_convention: str = "MODIFIED_FOLLOWING"
    end_of_month: bool = False
    forwarding_curve: Optional[str] = None
    calendar: str = "WEEKENDS"
    holidays: Optional[list[datetime.date]] = None
    fixings: Optional[list[FixingInput]] = None


@strawberry.input
class MarketInput:
    """Market snapshot: curves and indexes."""

    curves: list[CurveInput]
    indexes: Optional[list[IndexInput]] = None


@strawberry.input
class FraInput:
    """
    Forward rate agreement. Reference an index, a discount curve or both.
    Without maturity_date the accrual period is one index tenor.
    """

    value_date: datetime.date
    position: PositionType
    strike: float
    notional: float
    maturity_date: Optional[datetime.date] = None
    index: Optional[str] = None
    discount_curve: Optional[str] = None
    use_indexed_coupon: bool = True
    fixing_days: int = 2
    business_day_convention: str = "MODIFIED_FOLLOWING"


# --- Output types (response payloads) ---


@strawberry.type
class FraResult:
    """Forward rate, settlement amount and NPV of an FRA."""

    forward_rate: float
    forward_rate_day_counter: str
    strike: float
    amount: float
    npv: float
    fixing_date: datetime.date
    maturity_date: datetime.date
    evaluation_date: datetime.date
    expired: bool
    strategy: str
