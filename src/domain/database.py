"""Storage boundary interface.

Database is the generic document-store abstraction the repositories are
written against.  Records are pydantic models addressed by
(collection, key); read methods take the model class so the store can
rehydrate typed records.

Design notes:
  - All methods are async to accommodate async drivers (asyncpg / SQLAlchemy async).
  - Each method is atomic with respect to its single record or query.
  - Not found on get_by_id is a None result; on update / delete it is a
    RecordNotFoundError.  Duplicate insertion raises DuplicateKeyError.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TypeVar

from pydantic import BaseModel

TModel = TypeVar("TModel", bound=BaseModel)


class Database(ABC):
    """Async key/document store partitioned into named collections."""

    @abstractmethod
    async def insert(self, collection: str, key: str, record: BaseModel) -> bool:
        """Store a new record.  Raises DuplicateKeyError if key already exists."""

    @abstractmethod
    async def get_by_id(
        self, collection: str, key: str, model: type[TModel]
    ) -> TModel | None:
        """Return the record stored under key, or None."""

    @abstractmethod
    async def update(self, collection: str, key: str, record: BaseModel) -> bool:
        """Overwrite an existing record.  Raises RecordNotFoundError if key is absent."""

    @abstractmethod
    async def delete(self, collection: str, key: str) -> bool:
        """Remove a record.  Raises RecordNotFoundError if key is absent."""

    @abstractmethod
    async def find_all(self, collection: str, model: type[TModel]) -> list[TModel]:
        """Return every record in the collection (possibly empty)."""

    @abstractmethod
    async def get_top_by_field(
        self,
        collection: str,
        field: str,
        limit: int,
        descending: bool,
        model: type[TModel],
    ) -> list[TModel]:
        """Return at most limit records ordered by field.

        Raises ValueError if limit is negative.
        """
