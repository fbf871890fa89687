"""
Change-notification graph between market data and the objects priced off it.

An `Observable` keeps a set of observers and calls `update()` on each of them
when it changes. Observers are held through weak references: dropping the last
strong reference to an instrument is enough to detach it from every curve and
index it was listening to.
"""

from __future__ import annotations

import logging
import weakref

from fra.interfaces import Observer

logger = logging.getLogger(__name__)


class Observable:
    """Publisher side of the notification graph."""

    def __init__(self) -> None:
        self._observers: weakref.WeakSet[Observer] = weakref.WeakSet()

    def register_observer(self, observer: Observer) -> None:
        self._observers.add(observer)

    def unregister_observer(self, observer: Observer) -> None:
        self._observers.discard(observer)

    @property
    def observer_count(self) -> int:
        return len(self._observers)

    def notify_observers(self) -> None:
        """Call `update()` on every registered observer.

        The set is snapshotted first: observers may register or unregister while
        being notified.
        """
        observers = list(self._observers)
        logger.debug(f"{type(self).__name__} notifying {len(observers)} observer(s)")
        for observer in observers:
            observer.update()


def register_with(observer: Observer, observable: Observable | None) -> None:
    """Subscribe `observer` to `observable`; absent dependencies are ignored."""
    if observable is not None:
        observable.register_observer(observer)
