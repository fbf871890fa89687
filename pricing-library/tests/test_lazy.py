"""Tests for LazyCache: pull-based recomputation with explicit invalidation."""

import pytest

from fra.lazy import LazyCache


class Counter:
    def __init__(self) -> None:
        self.runs = 0
        self.fail = False

    def __call__(self) -> None:
        if self.fail:
            raise RuntimeError("boom")
        self.runs += 1


def test_calculates_once_until_invalidated() -> None:
    """Repeated ensure_fresh() calls run the calculation only once."""
    calc = Counter()
    cache = LazyCache(calc)
    assert not cache.is_fresh
    cache.ensure_fresh()
    cache.ensure_fresh()
    assert calc.runs == 1
    assert cache.is_fresh


def test_invalidate_is_lazy() -> None:
    """invalidate() does no work; the next read recomputes."""
    calc = Counter()
    cache = LazyCache(calc)
    cache.ensure_fresh()
    assert cache.invalidate() is True
    assert calc.runs == 1
    cache.ensure_fresh()
    assert calc.runs == 2


def test_invalidate_reports_whether_result_was_discarded() -> None:
    cache = LazyCache(Counter())
    assert cache.invalidate() is False
    cache.ensure_fresh()
    assert cache.invalidate() is True
    assert cache.invalidate() is False


def test_update_acts_as_observer_callback() -> None:
    calc = Counter()
    cache = LazyCache(calc)
    cache.ensure_fresh()
    cache.update()
    assert not cache.is_fresh


def test_failed_calculation_leaves_cache_dirty() -> None:
    """A raising calculation is retried on the next read."""
    calc = Counter()
    calc.fail = True
    cache = LazyCache(calc)
    with pytest.raises(RuntimeError, match="boom"):
        cache.ensure_fresh()
    assert not cache.is_fresh
    calc.fail = False
    cache.ensure_fresh()
    assert cache.is_fresh
    assert calc.runs == 1


def test_reentrant_read_during_calculation_raises() -> None:
    runs = []

    def calc() -> None:
        runs.append(1)
        cache.ensure_fresh()

    cache = LazyCache(calc, name="reentrant")
    with pytest.raises(RuntimeError, match="reentrant: results read during their own calculation"):
        cache.ensure_fresh()
    assert len(runs) == 1
    assert not cache.is_fresh


def test_invalidation_during_calculation_is_seen_by_next_read() -> None:
    """A dependency changing mid-calculation leaves the cache dirty."""
    runs = []

    def calc() -> None:
        runs.append(1)
        if len(runs) == 1:
            cache.invalidate()

    cache = LazyCache(calc)
    cache.ensure_fresh()
    assert not cache.is_fresh
    cache.ensure_fresh()
    assert cache.is_fresh
    assert len(runs) == 2
    cache.ensure_fresh()
    assert len(runs) == 2


def test_freeze_ignores_invalidation() -> None:
    calc = Counter()
    cache = LazyCache(calc)
    cache.ensure_fresh()
    cache.freeze()
    assert cache.invalidate() is False
    cache.ensure_fresh()
    assert calc.runs == 1


def test_unfreeze_forces_recalculation() -> None:
    calc = Counter()
    cache = LazyCache(calc)
    cache.ensure_fresh()
    cache.freeze()
    cache.unfreeze()
    cache.ensure_fresh()
    assert calc.runs == 2


def test_recalculate_runs_even_when_fresh_or_frozen() -> None:
    calc = Counter()
    cache = LazyCache(calc)
    cache.ensure_fresh()
    cache.freeze()
    cache.recalculate()
    assert calc.runs == 2
    assert cache.is_frozen
