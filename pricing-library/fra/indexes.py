"""
IBOR-style floating-rate index.

The index owns its conventions (fixing calendar, fixing days, tenor,
business-day convention, day counter), a history of realized fixings and an
optional forwarding curve. It observes the forwarding curve and passes its
notifications on, so an instrument registered with the index hears about both
new fixings and curve moves.
"""

from __future__ import annotations

import datetime
import logging
from typing import Iterable, Mapping

from fra.dates import BusinessDayConvention, Period, TimeUnit
from fra.errors import MissingFixingError, MissingMarketDataError
from fra.interfaces import Calendar, DayCounter, TermStructure
from fra.observable import Observable, register_with

logger = logging.getLogger(__name__)


class IborIndex(Observable):
    """Term rate index such as Euribor 3M or USD Libor 6M."""

    def __init__(
        self,
        family_name: str,
        tenor: Period | str,
        fixing_days: int,
        fixing_calendar: Calendar,
        business_day_convention: BusinessDayConvention,
        day_counter: DayCounter,
        end_of_month: bool = False,
        forwarding_curve: TermStructure | None = None,
    ) -> None:
        super().__init__()
        if isinstance(tenor, str):
            tenor = Period.parse(tenor)
        if tenor.length <= 0:
            raise ValueError(f"index tenor must be positive, got {tenor}")
        if fixing_days < 0:
            raise ValueError("fixing_days must be >= 0")
        self.family_name = family_name
        self.tenor = tenor
        self.fixing_days = fixing_days
        self._fixing_calendar = fixing_calendar
        self._business_day_convention = business_day_convention
        self._day_counter = day_counter
        self.end_of_month = end_of_month
        self._forwarding_curve = forwarding_curve
        self._fixings: dict[datetime.date, float] = {}
        register_with(self, forwarding_curve)

    @property
    def name(self) -> str:
        return f"{self.family_name}{self.tenor} {self._day_counter.name}"

    @property
    def day_counter(self) -> DayCounter:
        return self._day_counter

    @property
    def fixing_calendar(self) -> Calendar:
        return self._fixing_calendar

    @property
    def business_day_convention(self) -> BusinessDayConvention:
        return self._business_day_convention

    @property
    def forwarding_curve(self) -> TermStructure | None:
        return self._forwarding_curve

    def update(self) -> None:
        """Forwarding-curve notification: pass it on."""
        self.notify_observers()

    # --- dates ---

    def is_valid_fixing_date(self, d: datetime.date) -> bool:
        return self._fixing_calendar.is_business_day(d)

    def fixing_date(self, value_date: datetime.date) -> datetime.date:
        return self._fixing_calendar.advance(
            value_date, -self.fixing_days, TimeUnit.DAYS, BusinessDayConvention.PRECEDING
        )

    def value_date(self, fixing_date: datetime.date) -> datetime.date:
        if not self.is_valid_fixing_date(fixing_date):
            raise ValueError(f"Fixing date {fixing_date.isoformat()} is not valid for {self.name}")
        return self._fixing_calendar.advance(
            fixing_date, self.fixing_days, TimeUnit.DAYS, BusinessDayConvention.FOLLOWING
        )

    def maturity_date(self, value_date: datetime.date) -> datetime.date:
        return self._fixing_calendar.advance_period(
            value_date, self.tenor, self._business_day_convention, self.end_of_month
        )

    # --- fixings ---

    def add_fixing(self, fixing_date: datetime.date, rate: float, force_overwrite: bool = False) -> None:
        self.add_fixings({fixing_date: rate}, force_overwrite)

    def add_fixings(
        self,
        fixings: Mapping[datetime.date, float] | Iterable[tuple[datetime.date, float]],
        force_overwrite: bool = False,
    ) -> None:
        """Store realized fixings and notify observers.

        A different value for an already stored date is rejected unless
        `force_overwrite` is set. Nothing is stored if any entry is rejected.
        """
        items = list(fixings.items()) if isinstance(fixings, Mapping) else list(fixings)
        for fixing_date, rate in items:
            if not self.is_valid_fixing_date(fixing_date):
                raise ValueError(
                    f"Fixing date {fixing_date.isoformat()} is not valid for {self.name}"
                )
            stored = self._fixings.get(fixing_date)
            if stored is not None and stored != rate and not force_overwrite:
                raise ValueError(
                    f"At least one duplicated fixing provided: {fixing_date.isoformat()}, "
                    f"{rate} while {stored} value is already present"
                )
        for fixing_date, rate in items:
            self._fixings[fixing_date] = float(rate)
        logger.debug(f"{self.name}: stored {len(items)} fixing(s)")
        self.notify_observers()

    def clear_fixings(self) -> None:
        self._fixings.clear()
        self.notify_observers()

    def has_fixing(self, fixing_date: datetime.date) -> bool:
        return fixing_date in self._fixings

    @property
    def fixings(self) -> dict[datetime.date, float]:
        return dict(self._fixings)

    def fixing(self, fixing_date: datetime.date) -> float:
        """Realized fixing for `fixing_date`.

        Raises ValueError for a non business day and MissingFixingError when
        the rate has not been fixed yet.
        """
        if not self.is_valid_fixing_date(fixing_date):
            raise ValueError(f"Fixing date {fixing_date.isoformat()} is not valid for {self.name}")
        try:
            return self._fixings[fixing_date]
        except KeyError:
            raise MissingFixingError(self.name, fixing_date) from None

    def forecast_fixing(self, fixing_date: datetime.date) -> float:
        """Simple rate over the index period implied by the forwarding curve."""
        if self._forwarding_curve is None:
            raise MissingMarketDataError(f"null term structure set to this instance of {self.name}")
        start = self.value_date(fixing_date)
        end = self.maturity_date(start)
        tau = self._day_counter.year_fraction(start, end)
        curve = self._forwarding_curve
        return (curve.discount(start) / curve.discount(end) - 1.0) / tau

    def __repr__(self) -> str:
        return f"IborIndex(name={self.name!r})"
