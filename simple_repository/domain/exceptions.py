"""Repository exceptions.

Only two conditions are specific to this package: a repository whose model
cannot be resolved, and a lookup in the *_or_fail family that finds nothing.
Everything else propagates unchanged from SQLAlchemy.
"""

from __future__ import annotations

from typing import Any


class RepositoryError(RuntimeError):
    """Base class for errors raised by repositories."""


class ModelNotFoundError(RepositoryError):
    """Raised at construction when a repository's model cannot be resolved."""

    def __init__(self, model_name: str) -> None:
        self.model_name = model_name
        super().__init__(f"Model [{model_name}] does not exist.")


class EntityNotFoundError(RepositoryError, LookupError):
    """Raised when a find_or_fail style lookup yields no record.

    `key` is the primary key or the (column, value) pair that was looked up,
    so API layers can turn it into a 404 without parsing the message.
    """

    def __init__(self, model: type | None = None, key: Any = None) -> None:
        self.model = model
        self.key = key
        if isinstance(key, tuple):
            column, value = key
            message = f"Entity with {column}={value!r} does not exist."
        elif key is not None:
            message = f"Entity [{key}] does not exist."
        else:
            message = "Entity does not exist."
        super().__init__(message)
