"""Generic async repositories over SQLAlchemy models.

Import from this package rather than individual modules:

    from simple_repository import SqlRepository, EntityNotFoundError
"""

from simple_repository.domain.exceptions import (
    EntityNotFoundError,
    ModelNotFoundError,
    RepositoryError,
)
from simple_repository.domain.models import Page
from simple_repository.domain.repositories import Repository
from simple_repository.infrastructure.database import (
    Base,
    Settings,
    get_engine,
    get_session,
    get_sessionmaker,
)
from simple_repository.infrastructure.persistence import SqlRepository

__all__ = [
    "Repository",
    "SqlRepository",
    "Page",
    "RepositoryError",
    "ModelNotFoundError",
    "EntityNotFoundError",
    "Base",
    "Settings",
    "get_engine",
    "get_sessionmaker",
    "get_session",
]
