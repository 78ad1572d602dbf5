"""Domain model package.

Domain objects are Pydantic models with no ORM or infrastructure
dependencies.
"""

from .stock import Stock, StockField

__all__ = ["Stock", "StockField"]
