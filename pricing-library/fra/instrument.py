"""
Lazily valued instrument base class.

An instrument observes its market data. Notifications invalidate its cache
and are passed on to the instrument's own observers (portfolios, reports)
when a valid result was discarded. Results are recomputed only when read.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Optional

from fra.lazy import LazyCache
from fra.observable import Observable

logger = logging.getLogger(__name__)


class Instrument(Observable, ABC):
    """Base class for instruments priced under the lazy-cache discipline.

    Subclasses implement `is_expired()` and `perform_calculations()`; the
    latter must set `_npv` (and optionally `_error_estimate`) only after all
    of its inputs have been obtained.
    """

    def __init__(self) -> None:
        super().__init__()
        self._npv: Optional[float] = None
        self._error_estimate: Optional[float] = None
        self._cache = LazyCache(self._calculate, name=type(self).__name__)

    # --- observer side ---

    def update(self) -> None:
        if self._cache.invalidate():
            self.notify_observers()

    # --- lazy-cache controls ---

    def calculate(self) -> None:
        self._cache.ensure_fresh()

    def recalculate(self) -> None:
        self._cache.recalculate()
        self.notify_observers()

    def freeze(self) -> None:
        self._cache.freeze()

    def unfreeze(self) -> None:
        self._cache.unfreeze()
        self.notify_observers()

    @property
    def is_calculated(self) -> bool:
        return self._cache.is_fresh

    def _calculate(self) -> None:
        if self.is_expired():
            self.setup_expired()
        else:
            self.perform_calculations()

    # --- results ---

    def npv(self) -> float:
        self.calculate()
        if self._npv is None:
            raise ValueError("NPV not provided")
        return self._npv

    def error_estimate(self) -> Optional[float]:
        """Error estimate of the last valuation, None when the engine gives none."""
        self.calculate()
        return self._error_estimate

    @abstractmethod
    def is_expired(self) -> bool:
        ...

    @abstractmethod
    def perform_calculations(self) -> None:
        ...

    def setup_expired(self) -> None:
        """Valuation of an instrument whose life is over: zero value, zero error."""
        logger.debug(f"{type(self).__name__} is expired; NPV set to zero")
        self._npv = 0.0
        self._error_estimate = 0.0
