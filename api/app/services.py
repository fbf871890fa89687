"""Service layer: convert GraphQL inputs to fra library objects and run the valuation."""

from __future__ import annotations

import datetime
import logging
from typing import Optional

from fra.curves import DiscountCurve, FlatForward, YieldTermStructure, ZeroRateCurve
from fra.dates import BusinessDayConvention, Calendar, HolidayCalendar, NullCalendar, WeekendsOnly
from fra.daycounters import day_counter_from_name
from fra.indexes import IborIndex
from fra.market import Market
from fra.products.forward_rate_agreement import ForwardRateAgreement, Position
from fra.settings import settings

from app.types import CurveInput, FraInput, FraResult, IndexInput, MarketInput

logger = logging.getLogger(__name__)


def _calendar_from_input(name: str, holidays: Optional[list[datetime.date]]) -> Calendar:
    key = name.strip().upper()
    if key == "NULL":
        if holidays:
            raise ValueError("a NULL calendar cannot have holidays")
        return NullCalendar()
    if key != "WEEKENDS":
        raise ValueError(f"unknown calendar '{name}'. Known: ['NULL', 'WEEKENDS']")
    if holidays:
        return HolidayCalendar("Weekends + holidays", holidays)
    return WeekendsOnly()


def _convention_from_input(name: str) -> BusinessDayConvention:
    key = name.strip().upper()
    for convention in BusinessDayConvention:
        if key in (convention.name, convention.value):
            return convention
    raise ValueError(
        f"unknown business day convention '{name}'. "
        f"Known: {[c.name for c in BusinessDayConvention]}"
    )


def _curve_from_input(c: CurveInput) -> YieldTermStructure:
    """Build a flat, zero-rate or discount-factor curve from GraphQL CurveInput."""
    day_counter = day_counter_from_name(c.day_counter)
    calendar = _calendar_from_input(c.calendar, c.holidays)
    given = [x is not None for x in (c.flat_rate, c.zero_rates_cc, c.discount_factors)]
    if sum(given) != 1:
        raise ValueError(
            f"curve '{c.name}': give exactly one of flatRate, zeroRatesCc, discountFactors"
        )
    if c.flat_rate is not None:
        return FlatForward(c.reference_date, c.flat_rate, day_counter, calendar, name=c.name)
    if not c.dates:
        raise ValueError(f"curve '{c.name}': dates must not be empty")
    if c.zero_rates_cc is not None:
        return ZeroRateCurve(
            c.reference_date, list(c.dates), list(c.zero_rates_cc), day_counter, calendar, c.name
        )
    return DiscountCurve(
        c.reference_date, list(c.dates), list(c.discount_factors), day_counter, calendar, c.name
    )


def _index_from_input(i: IndexInput, curves: dict[str, YieldTermStructure]) -> IborIndex:
    forwarding_curve = None
    if i.forwarding_curve is not None:
        _validate_name(curves, i.forwarding_curve, f"index '{i.name}' forwarding curve", "curves")
        forwarding_curve = curves[i.forwarding_curve]
    index = IborIndex(
        i.family_name,
        i.tenor,
        i.fixing_days,
        _calendar_from_input(i.calendar, i.holidays),
        _convention_from_input(i.business_day_convention),
        day_counter_from_name(i.day_counter),
        end_of_month=i.end_of_month,
        forwarding_curve=forwarding_curve,
    )
    if i.fixings:
        index.add_fixings([(f.fixing_date, f.rate) for f in i.fixings])
    return index


def market_from_input(m: MarketInput) -> Market:
    """Build Market from GraphQL MarketInput."""
    if not m.curves:
        raise ValueError("market.curves must not be empty")
    curves: dict[str, YieldTermStructure] = {}
    for c in m.curves:
        curves[c.name] = _curve_from_input(c)
    indexes: dict[str, IborIndex] = {}
    if m.indexes:
        for i in m.indexes:
            indexes[i.name] = _index_from_input(i, curves)
    return Market(curves=curves, indexes=indexes)


def _validate_name(available: dict, name: str, context: str, kind: str) -> None:
    if name not in available:
        raise ValueError(
            f"{context}: '{name}' not found in market. "
            f"Available {kind}: {list(available.keys())}"
        )


def price_fra(
    fra: FraInput,
    market: MarketInput,
    evaluation_date: Optional[datetime.date] = None,
) -> FraResult:
    """Value an FRA as of evaluation_date (default: the service's evaluation date)."""
    if fra.index is None and fra.discount_curve is None:
        raise ValueError("FRA: reference an index or a discount curve")
    m = market_from_input(market)
    index = None
    discount_curve = None
    if fra.index is not None:
        _validate_name(m.indexes, fra.index, "FRA index", "indexes")
        index = m.index(fra.index)
    if fra.discount_curve is not None:
        _validate_name(m.curves, fra.discount_curve, "FRA discount curve", "curves")
        discount_curve = m.curve(fra.discount_curve)
    maturity_date = fra.maturity_date
    if maturity_date is None:
        if index is None:
            raise ValueError("FRA: maturityDate is required without an index")
        maturity_date = index.maturity_date(fra.value_date)

    with settings.at(evaluation_date or settings.evaluation_date) as context:
        instrument = ForwardRateAgreement(
            fra.value_date,
            maturity_date,
            Position[fra.position.value],
            fra.strike,
            fra.notional,
            index=index,
            discount_curve=discount_curve,
            use_indexed_coupon=fra.use_indexed_coupon,
            fixing_days=fra.fixing_days,
            business_day_convention=_convention_from_input(fra.business_day_convention),
            settings=context,
        )
        forward = instrument.forward_rate()
        result = FraResult(
            forward_rate=forward.rate,
            forward_rate_day_counter=forward.day_counter.name,
            strike=instrument.strike_forward_rate.rate,
            amount=instrument.amount(),
            npv=instrument.npv(),
            fixing_date=instrument.fixing_date(),
            maturity_date=instrument.maturity_date,
            evaluation_date=context.evaluation_date,
            expired=instrument.is_expired(),
            strategy=instrument.strategy.kind,
        )
    logger.debug(f"Priced {instrument!r}: npv={result.npv:,.2f}")
    return result
