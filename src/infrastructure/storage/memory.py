"""In-process implementation of Database.

Records are kept in their serialized form and rehydrated on every read, so
callers never share mutable objects with the store.  A single asyncio.Lock
serializes operations, which makes each one atomic for concurrent
coroutines on the same event loop.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from pydantic import BaseModel

from src.domain.database import Database, TModel
from src.domain.exceptions import DuplicateKeyError, RecordNotFoundError, StorageError

logger = logging.getLogger(__name__)


class InMemoryDatabase(Database):
    def __init__(self) -> None:
        self._collections: dict[str, dict[str, dict[str, Any]]] = {}
        self._lock = asyncio.Lock()

    @staticmethod
    def _dump(record: BaseModel) -> dict[str, Any]:
        return record.model_dump(mode="json")

    async def insert(self, collection: str, key: str, record: BaseModel) -> bool:
        async with self._lock:
            records = self._collections.setdefault(collection, {})
            if key in records:
                logger.warning("Rejected duplicate key %r in collection %r", key, collection)
                raise DuplicateKeyError(collection, key)
            records[key] = self._dump(record)
        logger.debug("Inserted %r into %r", key, collection)
        return True

    async def get_by_id(
        self, collection: str, key: str, model: type[TModel]
    ) -> TModel | None:
        async with self._lock:
            data = self._collections.get(collection, {}).get(key)
        return model.model_validate(data) if data is not None else None

    async def update(self, collection: str, key: str, record: BaseModel) -> bool:
        async with self._lock:
            records = self._collections.get(collection, {})
            if key not in records:
                raise RecordNotFoundError(collection, key)
            records[key] = self._dump(record)
        logger.debug("Updated %r in %r", key, collection)
        return True

    async def delete(self, collection: str, key: str) -> bool:
        async with self._lock:
            records = self._collections.get(collection, {})
            if key not in records:
                raise RecordNotFoundError(collection, key)
            del records[key]
        logger.debug("Deleted %r from %r", key, collection)
        return True

    async def find_all(self, collection: str, model: type[TModel]) -> list[TModel]:
        async with self._lock:
            rows = list(self._collections.get(collection, {}).values())
        return [model.model_validate(row) for row in rows]

    async def get_top_by_field(
        self,
        collection: str,
        field: str,
        limit: int,
        descending: bool,
        model: type[TModel],
    ) -> list[TModel]:
        if limit < 0:
            raise ValueError(f"limit must be non-negative, got {limit}")
        async with self._lock:
            rows = list(self._collections.get(collection, {}).values())
        if any(field not in row for row in rows):
            raise StorageError(f"Field {field!r} missing from records in {collection!r}")
        # sorted() is stable, so ties keep insertion order in both directions.
        ranked = sorted(rows, key=lambda row: row[field], reverse=descending)
        return [model.model_validate(row) for row in ranked[:limit]]

    async def clear(self) -> None:
        """Drop every collection."""
        async with self._lock:
            self._collections.clear()
