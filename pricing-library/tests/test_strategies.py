"""Tests for forward-rate strategy selection and the three formulas in isolation."""

import datetime

import pytest

from fra.daycounters import Actual360
from fra.errors import MissingMarketDataError
from fra.strategies import (
    CurveImplied,
    IndexApproximation,
    RealizedFixing,
    curve_implied_rate,
    select_forward_rate_strategy,
)

from market_doubles import make_discount_curve

V = datetime.date(2024, 4, 17)
M = datetime.date(2024, 10, 14)
F = datetime.date(2024, 4, 15)


def test_selection(euribor, flat_curve) -> None:
    assert isinstance(select_forward_rate_strategy(euribor, None, True), RealizedFixing)
    assert isinstance(select_forward_rate_strategy(euribor, flat_curve, False), IndexApproximation)
    assert isinstance(select_forward_rate_strategy(None, flat_curve, True), CurveImplied)
    with pytest.raises(MissingMarketDataError):
        select_forward_rate_strategy(None, None, False)


def test_curve_implied_formula() -> None:
    curve = make_discount_curve(V, M, 0.99, 0.97)
    rate = curve_implied_rate(curve, Actual360(), V, M)
    assert abs(rate.rate - 0.041237113402) < 1e-10
    assert CurveImplied(curve).forward_rate(V, M, F) == rate


def test_realized_fixing_reads_index(euribor) -> None:
    euribor.add_fixing(F, 0.042)
    rate = RealizedFixing(euribor).forward_rate(V, M, F)
    assert rate.rate == 0.042
    assert rate.day_counter == Actual360()


def test_index_approximation_uses_forwarding_curve(euribor, flat_curve) -> None:
    rate = IndexApproximation(euribor).forward_rate(V, M, F)
    tau = Actual360().year_fraction(V, M)
    expected = (flat_curve.discount(V) / flat_curve.discount(M) - 1.0) / tau
    assert abs(rate.rate - expected) < 1e-14


def test_strategies_are_immutable(euribor) -> None:
    strategy = RealizedFixing(euribor)
    with pytest.raises(AttributeError):
        strategy.index = None
    assert strategy.kind == "RealizedFixing"
