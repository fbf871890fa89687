"""Tests for InterestRate."""

import math

import pytest

from fra.daycounters import Actual360, Actual365Fixed
from fra.rates import Compounding, Frequency, InterestRate


def test_simple_compound_factor() -> None:
    r = InterestRate(0.05, Actual360())
    assert abs(r.compound_factor(0.25) - 1.0125) < 1e-15
    assert abs(r.discount_factor(0.25) - 1 / 1.0125) < 1e-15


def test_continuous_and_compounded_factors() -> None:
    cc = InterestRate(0.04, Actual365Fixed(), Compounding.CONTINUOUS, Frequency.ANNUAL)
    assert abs(cc.compound_factor(2.0) - math.exp(0.08)) < 1e-15
    semi = InterestRate(0.04, Actual365Fixed(), Compounding.COMPOUNDED, Frequency.SEMIANNUAL)
    assert abs(semi.compound_factor(1.0) - 1.02**2) < 1e-15


def test_implied_rate_inverts_compound_factor() -> None:
    for compounding, frequency in [
        (Compounding.SIMPLE, Frequency.ONCE),
        (Compounding.CONTINUOUS, Frequency.ANNUAL),
        (Compounding.COMPOUNDED, Frequency.QUARTERLY),
    ]:
        r = InterestRate(0.035, Actual360(), compounding, frequency)
        implied = InterestRate.implied_rate(r.compound_factor(0.75), Actual360(), compounding, frequency, 0.75)
        assert abs(implied.rate - 0.035) < 1e-12


def test_rates_are_values() -> None:
    assert InterestRate(0.05, Actual360()) == InterestRate(0.05, Actual360())
    assert float(InterestRate(0.05, Actual360())) == 0.05


def test_compounded_needs_frequency() -> None:
    with pytest.raises(ValueError, match="frequency"):
        InterestRate(0.05, Actual360(), Compounding.COMPOUNDED, Frequency.ONCE)


def test_negative_time_rejected() -> None:
    with pytest.raises(ValueError, match="t must be >= 0"):
        InterestRate(0.05, Actual360()).compound_factor(-0.1)


def test_str() -> None:
    assert str(InterestRate(0.05, Actual360())) == "5.000000 % Actual/360 simple compounding"
