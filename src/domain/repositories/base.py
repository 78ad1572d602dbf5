"""Generic repository base interface.

Repository[T] is the root abstraction for data-access interfaces in the
domain layer.  Concrete implementations live in
src/infrastructure/persistence/ and are wired at the application boundary
via dependency injection.

Design notes:
  - All methods are async; implementations await a Database.
  - T is the domain model type; entities are keyed by a natural string key.
  - Failures raised by the underlying store propagate unchanged.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")


class Repository(ABC, Generic[T]):
    """Abstract CRUD interface for a domain entity."""

    @abstractmethod
    async def get(self, key: str) -> T | None:
        """Return the entity with the given key, or None if not found."""

    @abstractmethod
    async def list(self) -> list[T]:
        """Return every entity; order is defined by the store."""

    @abstractmethod
    async def add(self, entity: T) -> bool:
        """Persist a new entity.  Raises DuplicateKeyError if the key exists."""

    @abstractmethod
    async def update(self, entity: T) -> bool:
        """Overwrite the stored entity that has the same key."""

    @abstractmethod
    async def delete(self, key: str) -> bool:
        """Remove the entity with the given key."""
