"""Persistence package.

Exports the SQLAlchemy repository implementation.  Models are owned by the
application and registered on simple_repository.infrastructure.database.Base.
"""

from simple_repository.infrastructure.persistence.repositories import (
    SqlRepository,
    conventional_model_name,
    resolve_model,
)

__all__ = [
    "SqlRepository",
    "conventional_model_name",
    "resolve_model",
]
