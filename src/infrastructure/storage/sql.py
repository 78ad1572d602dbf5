"""SQLAlchemy implementation of Database.

Every collection lives in the single documents table; a record is one row
keyed by (collection, key) with its JSON form in data.  The session owner
(get_session) controls the transaction; this class only flushes.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.database import Database, TModel
from src.domain.exceptions import DuplicateKeyError, RecordNotFoundError
from src.infrastructure.persistence.models.documents import Document

logger = logging.getLogger(__name__)


class SqlDatabase(Database):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def _get_row(self, collection: str, key: str) -> Document | None:
        return await self._session.get(Document, (collection, key))

    async def insert(self, collection: str, key: str, record: BaseModel) -> bool:
        if await self._get_row(collection, key) is not None:
            logger.warning("Rejected duplicate key %r in collection %r", key, collection)
            raise DuplicateKeyError(collection, key)
        self._session.add(
            Document(collection=collection, key=key, data=record.model_dump(mode="json"))
        )
        try:
            await self._session.flush()
        except IntegrityError as exc:
            # Concurrent insert of the same key won the race.
            logger.warning("Rejected duplicate key %r in collection %r", key, collection)
            raise DuplicateKeyError(collection, key) from exc
        logger.debug("Inserted %r into %r", key, collection)
        return True

    async def get_by_id(
        self, collection: str, key: str, model: type[TModel]
    ) -> TModel | None:
        row = await self._get_row(collection, key)
        return model.model_validate(row.data) if row else None

    async def update(self, collection: str, key: str, record: BaseModel) -> bool:
        row = await self._get_row(collection, key)
        if row is None:
            raise RecordNotFoundError(collection, key)
        row.data = record.model_dump(mode="json")
        await self._session.flush()
        logger.debug("Updated %r in %r", key, collection)
        return True

    async def delete(self, collection: str, key: str) -> bool:
        row = await self._get_row(collection, key)
        if row is None:
            raise RecordNotFoundError(collection, key)
        await self._session.delete(row)
        await self._session.flush()
        logger.debug("Deleted %r from %r", key, collection)
        return True

    async def find_all(self, collection: str, model: type[TModel]) -> list[TModel]:
        stmt = select(Document).where(Document.collection == collection).order_by(Document.key)
        result = await self._session.execute(stmt)
        return [model.model_validate(row.data) for row in result.scalars()]

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
        ordering = Document.data[field].as_float()
        stmt = (
            select(Document)
            .where(Document.collection == collection)
            .order_by(ordering.desc() if descending else ordering.asc())
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        return [model.model_validate(row.data) for row in result.scalars()]
