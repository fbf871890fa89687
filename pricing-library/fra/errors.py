"""Exceptions raised by FRA construction and valuation."""

from __future__ import annotations


class InstrumentValidationError(ValueError):
    """Contract terms violate a construction precondition."""


class MissingMarketDataError(LookupError):
    """Market data required by the selected valuation branch is not available."""


class MissingFixingError(MissingMarketDataError):
    """An index fixing was requested for a date with no realized fixing."""

    def __init__(self, index_name: str, fixing_date) -> None:
        self.index_name = index_name
        self.fixing_date = fixing_date
        super().__init__(f"Missing {index_name} fixing for {fixing_date.isoformat()}")
