"""FRA valuation library: dates, curves, indexes, lazy instruments and the FRA engine."""

import logging

from fra.curves import DiscountCurve, FlatForward, YieldTermStructure, ZeroRateCurve
from fra.dates import (
    BusinessDayConvention,
    Calendar,
    HolidayCalendar,
    NullCalendar,
    Period,
    TimeUnit,
    WeekendsOnly,
)
from fra.daycounters import (
    Actual360,
    Actual365Fixed,
    ActualActual,
    DayCounter,
    Thirty360,
    day_counter_from_name,
)
from fra.errors import InstrumentValidationError, MissingFixingError, MissingMarketDataError
from fra.indexes import IborIndex
from fra.instrument import Instrument
from fra.interfaces import FloatingRateIndex, Notifier, Observer, TermStructure
from fra.lazy import LazyCache
from fra.market import Market
from fra.observable import Observable
from fra.products.forward_rate_agreement import ForwardRateAgreement, Position
from fra.rates import Compounding, Frequency, InterestRate
from fra.settings import Settings
from fra.strategies import (
    CurveImplied,
    ForwardRateStrategy,
    IndexApproximation,
    RealizedFixing,
    select_forward_rate_strategy,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Actual360",
    "Actual365Fixed",
    "ActualActual",
    "BusinessDayConvention",
    "Calendar",
    "Compounding",
    "CurveImplied",
    "DayCounter",
    "DiscountCurve",
    "FlatForward",
    "FloatingRateIndex",
    "ForwardRateAgreement",
    "ForwardRateStrategy",
    "Frequency",
    "HolidayCalendar",
    "IborIndex",
    "IndexApproximation",
    "Instrument",
    "InstrumentValidationError",
    "InterestRate",
    "LazyCache",
    "Market",
    "MissingFixingError",
    "MissingMarketDataError",
    "Notifier",
    "NullCalendar",
    "Observable",
    "Observer",
    "Period",
    "Position",
    "RealizedFixing",
    "Settings",
    "TermStructure",
    "Thirty360",
    "TimeUnit",
    "WeekendsOnly",
    "YieldTermStructure",
    "ZeroRateCurve",
    "day_counter_from_name",
    "select_forward_rate_strategy",
]
