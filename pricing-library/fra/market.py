"""
Market snapshot container.

`Market` is a named collection of the live market objects an FRA can be priced
against:
- discount/forwarding curves, keyed by a name (e.g. "EUR_ESTR")
- floating-rate indexes, keyed by a name (e.g. "EURIBOR3M")

Unlike a copied snapshot, the objects are shared: updating a curve held by the
market invalidates every instrument built on it.
"""

from __future__ import annotations

from fra.interfaces import FloatingRateIndex, TermStructure


class Market:
    """Curves (by name) and indexes (by name)."""

    def __init__(
        self,
        curves: dict[str, TermStructure] | None = None,
        indexes: dict[str, FloatingRateIndex] | None = None,
    ) -> None:
        self.curves: dict[str, TermStructure] = curves.copy() if curves else {}
        self.indexes: dict[str, FloatingRateIndex] = indexes.copy() if indexes else {}

    def curve(self, name: str) -> TermStructure:
        """Return curve by name. Raises KeyError listing available curves."""
        try:
            return self.curves[name]
        except KeyError:
            raise KeyError(
                f"curve '{name}' not found in market. Available curves: {list(self.curves)}"
            ) from None

    def index(self, name: str) -> FloatingRateIndex:
        """Return index by name. Raises KeyError listing available indexes."""
        try:
            return self.indexes[name]
        except KeyError:
            raise KeyError(
                f"index '{name}' not found in market. Available indexes: {list(self.indexes)}"
            ) from None

    def add_curve(self, name: str, curve: TermStructure) -> None:
        self.curves[name] = curve

    def add_index(self, name: str, index: FloatingRateIndex) -> None:
        self.indexes[name] = index
