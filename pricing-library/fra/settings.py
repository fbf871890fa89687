"""
Evaluation-date context.

`settings.evaluation_date` is "today" for every instrument in the process.
Instruments observe `settings` and go stale when the date moves.

Initial values come from the environment:
- FRA_EVALUATION_DATE: ISO date, defaults to the system date.
- FRA_INCLUDE_REFERENCE_DATE_EVENTS: "1"/"true"/"yes" to treat events on the
  evaluation date itself as not yet occurred.
"""

from __future__ import annotations

import datetime
import logging
import os
import threading
from contextlib import contextmanager
from typing import Iterator, Optional

from fra.observable import Observable

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _date_from_env() -> Optional[datetime.date]:
    raw = os.environ.get("FRA_EVALUATION_DATE")
    if not raw:
        return None
    try:
        return datetime.date.fromisoformat(raw.strip())
    except ValueError:
        raise ValueError(f"FRA_EVALUATION_DATE must be an ISO date, got '{raw}'") from None


def _flag_from_env(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in _TRUE_VALUES


class Settings(Observable):
    """Observable holder of the evaluation date.

    Left unset, the evaluation date follows the system date. Midnight rollover
    sends no notification: a long-lived instrument keeps its cached results
    until something else invalidates it. Pin the date (`FRA_EVALUATION_DATE`,
    the setter or `at()`) when valuations must move with the calendar.
    """

    def __init__(
        self,
        evaluation_date: Optional[datetime.date] = None,
        include_reference_date_events: bool = False,
    ) -> None:
        super().__init__()
        # None means "follow the system date"
        self._evaluation_date = evaluation_date
        self.include_reference_date_events = include_reference_date_events
        self._lock = threading.RLock()

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            evaluation_date=_date_from_env(),
            include_reference_date_events=_flag_from_env("FRA_INCLUDE_REFERENCE_DATE_EVENTS"),
        )

    @property
    def evaluation_date(self) -> datetime.date:
        return self._evaluation_date or datetime.date.today()

    @evaluation_date.setter
    def evaluation_date(self, d: Optional[datetime.date]) -> None:
        if d == self._evaluation_date:
            return
        logger.debug(f"Evaluation date moved from {self._evaluation_date} to {d}")
        self._evaluation_date = d
        self.notify_observers()

    @contextmanager
    def at(self, d: datetime.date) -> Iterator["Settings"]:
        """Price as of `d` for the duration of the block.

        Blocks from different threads are serialised; the previous evaluation
        date is restored on exit.
        """
        with self._lock:
            previous = self._evaluation_date
            self.evaluation_date = d
            try:
                yield self
            finally:
                self.evaluation_date = previous

    def has_occurred(
        self,
        event_date: datetime.date,
        include_reference_date: Optional[bool] = None,
    ) -> bool:
        """Whether `event_date` is in the past relative to the evaluation date.

        By default an event falling on the evaluation date has occurred; with
        reference-date events included it is still considered pending.
        """
        if include_reference_date is None:
            include_reference_date = self.include_reference_date_events
        today = self.evaluation_date
        if include_reference_date:
            return event_date < today
        return event_date <= today


settings = Settings.from_env()
