"""Tests for src/domain/database.py."""

import pytest

from src.domain.database import Database


def test_database_cannot_be_instantiated_directly():
    with pytest.raises(TypeError):
        Database()  # type: ignore[abstract]


def test_database_concrete_subclass_must_implement_all_methods():
    class _Partial(Database):
        async def insert(self, collection, key, record): return True
        async def get_by_id(self, collection, key, model): return None
        # missing update, delete, find_all, get_top_by_field

    with pytest.raises(TypeError):
        _Partial()  # type: ignore[abstract]


def test_database_full_concrete_subclass_instantiates():
    class _Full(Database):
        async def insert(self, collection, key, record): return True
        async def get_by_id(self, collection, key, model): return None
        async def update(self, collection, key, record): return True
        async def delete(self, collection, key): return True
        async def find_all(self, collection, model): return []
        async def get_top_by_field(self, collection, field, limit, descending, model): return []

    assert _Full() is not None
