"""Generic repository interface.

Repository[T] is the abstraction application code depends on.  The SQLAlchemy
implementation lives in simple_repository/infrastructure/persistence/ and is
bound to a session at the application boundary.

Design notes:
  - All query methods are async to accommodate async drivers (asyncpg / SQLAlchemy async).
  - T is the mapped model type the repository serves.
  - columns=None (or ["*"]) means every column; order_by is a (column, direction) pair.
  - update() and delete() raise EntityNotFoundError for unknown ids rather
    than returning False.
  - with_() returns a new repository; it never mutates the receiver.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from typing import Any, Generic, TypeVar

from simple_repository.domain.models.pagination import Page

T = TypeVar("T")

Columns = Sequence[str] | None
OrderBy = tuple[str, str]

DEFAULT_ORDER: OrderBy = ("id", "asc")


class Repository(ABC, Generic[T]):
    """Abstract CRUD and query interface for a single model type."""

    @abstractmethod
    async def find(self, id: Any, columns: Columns = None) -> T | None:
        """Return the entity with the given primary key, or None if not found."""

    @abstractmethod
    async def find_or_fail(self, id: Any, columns: Columns = None) -> T:
        """Return the entity with the given primary key.  Raises EntityNotFoundError."""

    @abstractmethod
    async def find_by(self, column: str, value: Any, columns: Columns = None) -> T | None:
        """Return the first entity whose column equals value, or None."""

    @abstractmethod
    async def find_or_fail_by(self, column: str, value: Any, columns: Columns = None) -> T:
        """Return the first entity whose column equals value.  Raises EntityNotFoundError."""

    @abstractmethod
    async def find_all(self, order_by: OrderBy = DEFAULT_ORDER, columns: Columns = None) -> list[T]:
        """Return every entity, sorted by order_by."""

    @abstractmethod
    async def find_all_by(
        self,
        column: str,
        value: Any,
        order_by: OrderBy = DEFAULT_ORDER,
        columns: Columns = None,
    ) -> list[T]:
        """Return every entity whose column equals value, sorted by order_by."""

    @abstractmethod
    async def find_all_paginated(
        self,
        per_page: int = 20,
        order_by: OrderBy = DEFAULT_ORDER,
        columns: Columns = None,
        page: int = 1,
    ) -> Page[T]:
        """Return one page of entities together with the total count."""

    @abstractmethod
    async def create(self, data: Mapping[str, Any]) -> T:
        """Persist a new entity built from data and return it."""

    @abstractmethod
    async def update(self, id: Any, data: Mapping[str, Any]) -> bool:
        """Apply a partial update to an existing entity.  Raises EntityNotFoundError."""

    @abstractmethod
    async def delete(self, id: Any) -> bool:
        """Remove an existing entity.  Raises EntityNotFoundError."""

    @abstractmethod
    async def find_by_attributes(
        self, attributes: Mapping[str, Any], columns: Columns = None
    ) -> T | None:
        """Return the first entity matching every attribute == value pair, or None."""

    @abstractmethod
    async def find_all_by_attributes(
        self, attributes: Mapping[str, Any], columns: Columns = None
    ) -> list[T]:
        """Return every entity matching every attribute == value pair."""

    @abstractmethod
    async def first_or_create(
        self, attributes: Mapping[str, Any], values: Mapping[str, Any] | None = None
    ) -> T:
        """Return the first match, or persist and return a new entity."""

    @abstractmethod
    async def first_or_new(
        self, attributes: Mapping[str, Any], values: Mapping[str, Any] | None = None
    ) -> T:
        """Return the first match, or an unsaved entity pre-filled with the attributes."""

    @abstractmethod
    def with_(self, *relations: str | Sequence[str]) -> Repository[T]:
        """Return a repository that eager-loads the given relations on every query."""
