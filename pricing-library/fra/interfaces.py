"""
Protocol-based interfaces for the collaborators an FRA is priced against.

Using typing.Protocol enables structural subtyping: any curve, index or
calendar implementing the required methods can be plugged into
ForwardRateAgreement without inheriting from the classes shipped here.
"""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from fra.dates import BusinessDayConvention, TimeUnit


@runtime_checkable
class Observer(Protocol):
    """Anything that wants to hear about changes in its dependencies."""

    def update(self) -> None:
        """Called by an observable after it changed."""
        ...


@runtime_checkable
class Notifier(Protocol):
    """Narrow publisher contract: subscribe and notify."""

    def register_observer(self, observer: Observer) -> None:
        ...

    def unregister_observer(self, observer: Observer) -> None:
        ...

    def notify_observers(self) -> None:
        ...


class DayCounter(Protocol):
    """Day-count convention: converts a date span into a year fraction."""

    name: str

    def day_count(self, d1: date, d2: date) -> int:
        ...

    def year_fraction(self, d1: date, d2: date) -> float:
        ...


class Calendar(Protocol):
    """Business-day calendar."""

    name: str

    def is_business_day(self, d: date) -> bool:
        ...

    def adjust(self, d: date, convention: BusinessDayConvention) -> date:
        """Roll `d` onto a business day."""
        ...

    def advance(
        self,
        d: date,
        n: int,
        unit: TimeUnit,
        convention: BusinessDayConvention,
        end_of_month: bool = False,
    ) -> date:
        """Move `d` by `n` units and roll onto a business day."""
        ...


@runtime_checkable
class TermStructure(Notifier, Protocol):
    """Discount curve protocol.

    Implementations notify their observers whenever the discount factors they
    return may have changed.
    """

    @property
    def day_counter(self) -> DayCounter:
        ...

    @property
    def calendar(self) -> Calendar:
        ...

    def discount(self, d: date) -> float:
        """Discount factor from the curve reference date to `d`."""
        ...


@runtime_checkable
class FloatingRateIndex(Notifier, Protocol):
    """Floating-rate index: fixings, projection curve and its own conventions."""

    @property
    def name(self) -> str:
        ...

    @property
    def day_counter(self) -> DayCounter:
        ...

    @property
    def fixing_calendar(self) -> Calendar:
        ...

    @property
    def business_day_convention(self) -> BusinessDayConvention:
        ...

    @property
    def forwarding_curve(self) -> TermStructure | None:
        ...

    def fixing_date(self, value_date: date) -> date:
        ...

    def maturity_date(self, value_date: date) -> date:
        ...

    def fixing(self, fixing_date: date) -> float:
        """Realized fixing; raises MissingFixingError when not yet fixed."""
        ...
