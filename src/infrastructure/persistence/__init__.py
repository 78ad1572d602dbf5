"""Persistence package.

Importing this package registers every ORM mapper with Base.metadata
(required for Alembic autogenerate).  Repository implementations and the
DI factories live in src.infrastructure.persistence.repositories.
"""

from src.infrastructure.persistence.models import *  # noqa: F401, F403
from src.infrastructure.persistence.models import __all__ as _orm_all

__all__ = list(_orm_all)
