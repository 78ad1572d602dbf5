"""ORM model package.

Importing this package registers every mapper with Base.metadata, which
Alembic autogenerate relies on.
"""

from .documents import Document

__all__ = ["Document"]
