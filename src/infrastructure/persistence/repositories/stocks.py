"""Database-backed implementation of StockRepository."""

from __future__ import annotations

import logging

from src.domain.database import Database
from src.domain.models.stock import Stock, StockField
from src.domain.repositories.stocks import DEFAULT_POPULAR_LIMIT, StockRepository

logger = logging.getLogger(__name__)

COLLECTION_NAME = "stocks"


class DatabaseStockRepository(StockRepository):
    """Stores stocks in the "stocks" collection keyed by Stock.name.

    Every method is a single Database call; results and exceptions pass
    through untouched.
    """

    def __init__(self, database: Database) -> None:
        self._database = database

    async def add(self, entity: Stock) -> bool:
        logger.debug("Adding stock %r", entity.name)
        return await self._database.insert(COLLECTION_NAME, entity.name, entity)

    async def get(self, key: str) -> Stock | None:
        return await self._database.get_by_id(COLLECTION_NAME, key, Stock)

    async def list(self) -> list[Stock]:
        return list(await self._database.find_all(COLLECTION_NAME, Stock))

    async def update(self, entity: Stock) -> bool:
        logger.debug("Updating stock %r", entity.name)
        return await self._database.update(COLLECTION_NAME, entity.name, entity)

    async def delete(self, key: str) -> bool:
        logger.debug("Deleting stock %r", key)
        return await self._database.delete(COLLECTION_NAME, key)

    async def get_popular_stocks(self, limit: int = DEFAULT_POPULAR_LIMIT) -> list[Stock]:
        stocks = await self._database.get_top_by_field(
            COLLECTION_NAME, StockField.POPULARITY.value, limit, True, Stock
        )
        # Guarantee the ranking contract even for stores that return extra or unordered rows.
        ranked = sorted(stocks, key=lambda stock: stock.popularity, reverse=True)
        return ranked[:limit]
