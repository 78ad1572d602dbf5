"""Database implementations: in-process memory store and SQLAlchemy store."""

from .memory import InMemoryDatabase
from .sql import SqlDatabase

__all__ = ["InMemoryDatabase", "SqlDatabase"]
