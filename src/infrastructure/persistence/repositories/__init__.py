"""Concrete repository implementations.

Exports DatabaseStockRepository and the get_repositories() factory function
for wiring at the application boundary.
"""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.database import Database
from src.infrastructure.storage.sql import SqlDatabase

from .stocks import COLLECTION_NAME, DatabaseStockRepository


@dataclass
class Repositories:
    """All repository instances bound to a single Database."""

    stocks: DatabaseStockRepository


def get_repositories(session: AsyncSession) -> Repositories:
    """Construct all repositories backed by a SqlDatabase on the given session.

    Intended for use as a dependency:

        async def handler(session: AsyncSession = Depends(get_session)) -> ...:
            repos = get_repositories(session)
            stock = await repos.stocks.get("ACME")
    """
    return get_repositories_for(SqlDatabase(session))


def get_repositories_for(database: Database) -> Repositories:
    """Construct all repositories over an arbitrary Database implementation."""
    return Repositories(stocks=DatabaseStockRepository(database))


__all__ = [
    "COLLECTION_NAME",
    "DatabaseStockRepository",
    "Repositories",
    "get_repositories",
    "get_repositories_for",
]
