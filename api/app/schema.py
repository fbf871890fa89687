"""GraphQL schema: FRA valuation queries."""

import datetime
from typing import Optional

import strawberry

from app.services import price_fra
from app.types import FraInput, FraResult, MarketInput


@strawberry.type
class Query:
    @strawberry.field
    def hello(self, name: str = "World") -> str:
        return f"Hello {name} from FRA Pricing API!"

    @strawberry.field
    def version(self) -> str:
        return "0.1.0"

    @strawberry.field
    def price_fra(
        self,
        fra: FraInput,
        market: MarketInput,
        evaluation_date: Optional[datetime.date] = None,
    ) -> FraResult:
        """Value an FRA: forward rate, settlement amount and NPV."""
        return price_fra(fra=fra, market=market, evaluation_date=evaluation_date)


schema = strawberry.Schema(query=Query)
