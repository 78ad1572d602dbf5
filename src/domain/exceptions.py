"""Storage failure taxonomy.

Every exception here is raised by a Database implementation.  Repositories
never catch or translate them; callers see exactly what the store raised.
"""

from __future__ import annotations


class StorageError(Exception):
    """Base class for failures reported by the storage boundary."""


class DuplicateKeyError(StorageError):
    """Raised by Database.insert when the key already exists in the collection."""

    def __init__(self, collection: str, key: str) -> None:
        self.collection = collection
        self.key = key
        super().__init__(f"Key {key!r} already exists in collection {collection!r}")


class RecordNotFoundError(StorageError):
    """Raised by Database.update / Database.delete when the key does not exist."""

    def __init__(self, collection: str, key: str) -> None:
        self.collection = collection
        self.key = key
        super().__init__(f"Key {key!r} not found in collection {collection!r}")
