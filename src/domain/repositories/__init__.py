"""Domain repository interfaces.

All abstractions are defined here with abc.ABC and @abstractmethod.
Concrete implementations live in src/infrastructure/persistence/ and are
wired at the application boundary via dependency injection.
"""

from .base import Repository
from .stocks import DEFAULT_POPULAR_LIMIT, StockRepository

__all__ = [
    "Repository",
    "StockRepository",
    "DEFAULT_POPULAR_LIMIT",
]
