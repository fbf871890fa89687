"""Tests for the observer/notification graph."""

import gc

from fra.observable import Observable, register_with

from market_doubles import Recorder


def test_notify_reaches_every_observer() -> None:
    subject = Observable()
    a, b = Recorder(), Recorder()
    subject.register_observer(a)
    subject.register_observer(b)
    subject.notify_observers()
    assert (a.count, b.count) == (1, 1)


def test_registration_is_idempotent() -> None:
    subject = Observable()
    a = Recorder()
    subject.register_observer(a)
    subject.register_observer(a)
    subject.notify_observers()
    assert a.count == 1


def test_unregister_stops_notifications() -> None:
    subject = Observable()
    a = Recorder()
    subject.register_observer(a)
    subject.unregister_observer(a)
    subject.notify_observers()
    assert a.count == 0


def test_observers_are_held_weakly() -> None:
    """Dropping the last reference to an observer detaches it."""
    subject = Observable()
    a = Recorder()
    subject.register_observer(a)
    assert subject.observer_count == 1
    del a
    gc.collect()
    assert subject.observer_count == 0


def test_register_with_ignores_missing_dependency() -> None:
    a = Recorder()
    register_with(a, None)
    subject = Observable()
    register_with(a, subject)
    subject.notify_observers()
    assert a.count == 1


def test_observer_may_unregister_while_notified() -> None:
    subject = Observable()

    class OneShot(Recorder):
        def update(self) -> None:
            super().update()
            subject.unregister_observer(self)

    a = OneShot()
    subject.register_observer(a)
    subject.notify_observers()
    subject.notify_observers()
    assert a.count == 1
