"""Document store ORM model: one row per (collection, key) record."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from sqlalchemy import JSON, DateTime, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.database import Base


class Document(Base):
    """Serialized record inside a named collection.

    data holds the record's JSON form (pydantic model_dump(mode="json")).
    (collection, key) is the primary key, so duplicate inserts fail at the
    database as well as in SqlDatabase's pre-check.
    """

    __tablename__ = "documents"

    collection: Mapped[str] = mapped_column(Text, primary_key=True)
    key: Mapped[str] = mapped_column(Text, primary_key=True)
    data: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )
