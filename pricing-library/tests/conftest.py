"""Shared fixtures: a private evaluation-date context and counting market objects."""

import pytest

from fra.dates import BusinessDayConvention, WeekendsOnly
from fra.daycounters import Actual360, Actual365Fixed
from fra.settings import Settings

from market_doubles import TODAY, CountingFlatForward, CountingIborIndex


@pytest.fixture
def settings() -> Settings:
    return Settings(evaluation_date=TODAY)


@pytest.fixture
def calendar() -> WeekendsOnly:
    return WeekendsOnly()


@pytest.fixture
def flat_curve(calendar) -> CountingFlatForward:
    return CountingFlatForward(TODAY, 0.04, Actual365Fixed(), calendar, name="FLAT")


@pytest.fixture
def euribor(calendar, flat_curve) -> CountingIborIndex:
    return CountingIborIndex(
        "Euribor",
        "3M",
        fixing_days=2,
        fixing_calendar=calendar,
        business_day_convention=BusinessDayConvention.MODIFIED_FOLLOWING,
        day_counter=Actual360(),
        forwarding_curve=flat_curve,
    )
