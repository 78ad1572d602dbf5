"""Stock domain model.

Pure domain object — no ORM or persistence concerns.  Persistence goes
through StockRepository, which hands Stock instances to a Database as
opaque pydantic records.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class StockField(str, Enum):
    """Typed selector for Stock fields referenced by the storage layer.

    Values are the serialized field names, so members can be passed anywhere
    a field-name string is expected.
    """

    NAME = "name"
    PRICE = "price"
    POPULARITY = "popularity"


class Stock(BaseModel):
    """A tradable stock in the game.

    name is the natural key within the "stocks" collection and cannot be
    reassigned.  price and popularity are mutated only through
    update_price() / set_popularity(); assignments are validated.
    """

    model_config = ConfigDict(validate_assignment=True)

    name: str = Field(min_length=1, frozen=True)
    price: float = Field(ge=0)
    popularity: int = 0

    @classmethod
    def create(cls, name: str, price: float) -> Stock:
        """Named constructor — popularity starts at the baseline."""
        return cls(name=name, price=price)

    def update_price(self, price: float) -> None:
        self.price = price

    def set_popularity(self, popularity: int) -> None:
        self.popularity = popularity
