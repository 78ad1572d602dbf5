"""Stock repository interface."""

from __future__ import annotations

from abc import abstractmethod

from src.domain.models.stock import Stock

from .base import Repository

DEFAULT_POPULAR_LIMIT = 10


class StockRepository(Repository[Stock]):
    """Read/write interface for Stock entities, keyed by Stock.name.

    get() returns None when no stock has the given name.
    get_popular_stocks() ranks by popularity, highest first.
    """

    @abstractmethod
    async def get_popular_stocks(self, limit: int = DEFAULT_POPULAR_LIMIT) -> list[Stock]:
        """Return at most limit stocks ordered by popularity descending."""
