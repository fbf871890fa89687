"""
Memoised value with explicit invalidation.

`LazyCache` wraps a calculation closure and a "calculated" flag. Dependencies
call `invalidate()` (directly or through `update()`, which makes the cache an
observer); readers call `ensure_fresh()` before touching cached outputs. No
work happens on invalidation: recomputation is pulled by the next reader.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable

logger = logging.getLogger(__name__)


class LazyCache:
    """Dirty/clean state machine around a calculation routine.

    The calculation is expected to publish its results only once it has fully
    succeeded. If it raises, the cache stays dirty and the next
    `ensure_fresh()` runs it again. An invalidation that arrives while the
    calculation is running leaves the cache dirty, so the next read recomputes.
    Reading the cache from inside its own calculation raises `RuntimeError`.
    """

    def __init__(self, calculate: Callable[[], None], name: str = "") -> None:
        self._calculate = calculate
        self._name = name or getattr(calculate, "__qualname__", "calculation")
        self._calculated = False
        self._frozen = False
        self._calculating = False
        # bumped by every invalidation
        self._generation = 0
        self._lock = threading.RLock()

    @property
    def is_fresh(self) -> bool:
        return self._calculated

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    def invalidate(self) -> bool:
        """Mark stale. Returns True if a valid result was discarded.

        Ignored while frozen.
        """
        with self._lock:
            if self._frozen:
                return False
            was_fresh = self._calculated
            self._calculated = False
            self._generation += 1
            if was_fresh:
                logger.debug(f"{self._name}: invalidated")
            return was_fresh

    def update(self) -> None:
        self.invalidate()

    def ensure_fresh(self) -> None:
        """Run the calculation if the cached state is stale."""
        with self._lock:
            if self._calculated:
                return
            if self._calculating:
                raise RuntimeError(f"{self._name}: results read during their own calculation")
            self._calculating = True
            generation = self._generation
            try:
                logger.debug(f"{self._name}: recalculating")
                self._calculate()
                if self._generation == generation:
                    self._calculated = True
                else:
                    logger.debug(f"{self._name}: inputs changed during calculation; not cached")
            finally:
                self._calculating = False

    def recalculate(self) -> None:
        """Force a calculation even if frozen or already fresh."""
        with self._lock:
            was_frozen = self._frozen
            self._calculated = False
            self._frozen = False
            try:
                self.ensure_fresh()
            finally:
                self._frozen = was_frozen

    def freeze(self) -> None:
        """Keep the current results regardless of notifications."""
        with self._lock:
            self._frozen = True

    def unfreeze(self) -> None:
        """Resume reacting to notifications; the next read recalculates."""
        with self._lock:
            if self._frozen:
                self._frozen = False
                self._calculated = False
