"""Domain repository interfaces.

The abstraction is defined here with abc.ABC and @abstractmethod.  The
SQLAlchemy implementation lives in simple_repository/infrastructure/persistence/
and is bound to a session at the application boundary.
"""

from .base import DEFAULT_ORDER, Columns, OrderBy, Repository

__all__ = [
    "Repository",
    "Columns",
    "OrderBy",
    "DEFAULT_ORDER",
]
