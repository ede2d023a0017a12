"""SQLAlchemy implementation of the generic Repository interface.

Subclass once per model and bind to a session:

    class UserRepository(SqlRepository[User]):
        model_package = "models"

    users = UserRepository(session)
    user = await users.with_("posts").find_or_fail(user_id)
    admin = await users.find_by_email("admin@example.com")

The model is resolved at construction (see resolution.py).  Every query is a
plain select() on that model; the session's transaction is never committed
here, only flushed.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Mapping, Sequence
from typing import Any, TypeVar

from sqlalchemy import Select, func, inspect, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import load_only

from simple_repository.domain.exceptions import EntityNotFoundError
from simple_repository.domain.models.pagination import Page
from simple_repository.domain.repositories.base import (
    DEFAULT_ORDER,
    Columns,
    OrderBy,
    Repository,
)

from .eager import loader_options, normalize_relations
from .resolution import resolve_model

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")

_DIRECTIONS = ("asc", "desc")

# Longest prefix first so find_or_fail_by_x never matches find_by_.
_DYNAMIC_FINDERS = (
    ("find_or_fail_by_", "find_or_fail_by"),
    ("find_all_by_", "find_all_by"),
    ("find_by_", "find_by"),
)


class SqlRepository(Repository[ModelT]):
    """Generic repository over a single mapped class.

    Class attributes a subclass may set:
      model          explicit mapped class; skips name resolution
      model_name     explicit dotted path to the mapped class
      model_package  sub-package inserted between the root package and the
                     class name when resolving by convention
    """

    model: type[ModelT] | None = None
    model_name: str = ""
    model_package: str = ""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session
        self.model = resolve_model(type(self))
        self._relations: tuple[str, ...] = ()

    @property
    def session(self) -> AsyncSession:
        return self._session

    @property
    def relations(self) -> tuple[str, ...]:
        """Relation paths eager-loaded by every query this repository issues."""
        return self._relations

    # --- statement building ---

    def _column(self, name: str) -> Any:
        if name not in inspect(self.model).column_attrs:
            raise AttributeError(f"{self.model.__name__} has no column {name!r}")
        return getattr(self.model, name)

    def _primary_key(self) -> Any:
        return inspect(self.model).primary_key[0]

    def _select(self, columns: Columns = None) -> Select:
        stmt = select(self.model)
        if isinstance(columns, str):
            columns = [columns]
        if columns and list(columns) != ["*"]:
            stmt = stmt.options(load_only(*(self._column(name) for name in columns)))
        if self._relations:
            logger.debug("Eager loading %s on %s", self._relations, self.model.__name__)
            stmt = stmt.options(*loader_options(self.model, self._relations))
        return stmt

    def _order(self, stmt: Select, order_by: OrderBy) -> Select:
        column_name, direction = order_by
        direction = direction.lower()
        if direction not in _DIRECTIONS:
            raise ValueError(f"Order direction must be 'asc' or 'desc', got {direction!r}")
        column = self._column(column_name)
        return stmt.order_by(column.desc() if direction == "desc" else column.asc())

    def _where_attributes(self, stmt: Select, attributes: Mapping[str, Any]) -> Select:
        for name, value in attributes.items():
            stmt = stmt.where(self._column(name) == value)
        return stmt

    def _new(self, data: Mapping[str, Any]) -> ModelT:
        return self.model(**data)

    async def _first(self, stmt: Select) -> ModelT | None:
        result = await self._session.execute(stmt.limit(1))
        return result.scalars().first()

    async def _all(self, stmt: Select) -> list[ModelT]:
        result = await self._session.execute(stmt)
        return list(result.scalars().all())

    # --- lookups ---

    async def find(self, id: Any, columns: Columns = None) -> ModelT | None:
        stmt = self._select(columns).where(self._primary_key() == id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def find_or_fail(self, id: Any, columns: Columns = None) -> ModelT:
        entity = await self.find(id, columns)
        if entity is None:
            logger.warning("%s [%s] not found", self.model.__name__, id)
            raise EntityNotFoundError(self.model, id)
        return entity

    async def find_by(self, column: str, value: Any, columns: Columns = None) -> ModelT | None:
        return await self._first(self._select(columns).where(self._column(column) == value))

    async def find_or_fail_by(self, column: str, value: Any, columns: Columns = None) -> ModelT:
        entity = await self.find_by(column, value, columns)
        if entity is None:
            logger.warning("%s with %s=%r not found", self.model.__name__, column, value)
            raise EntityNotFoundError(self.model, (column, value))
        return entity

    async def find_all(
        self, order_by: OrderBy = DEFAULT_ORDER, columns: Columns = None
    ) -> list[ModelT]:
        return await self._all(self._order(self._select(columns), order_by))

    async def find_all_by(
        self,
        column: str,
        value: Any,
        order_by: OrderBy = DEFAULT_ORDER,
        columns: Columns = None,
    ) -> list[ModelT]:
        stmt = self._select(columns).where(self._column(column) == value)
        return await self._all(self._order(stmt, order_by))

    async def find_all_paginated(
        self,
        per_page: int = 20,
        order_by: OrderBy = DEFAULT_ORDER,
        columns: Columns = None,
        page: int = 1,
    ) -> Page[ModelT]:
        if per_page < 1:
            raise ValueError(f"per_page must be at least 1, got {per_page}")
        if page < 1:
            raise ValueError(f"page must be at least 1, got {page}")

        count_stmt = select(func.count()).select_from(self.model)
        total = (await self._session.execute(count_stmt)).scalar() or 0

        stmt = self._order(self._select(columns), order_by)
        items = await self._all(stmt.offset((page - 1) * per_page).limit(per_page))
        return Page(items=items, total=total, per_page=per_page, current_page=page)

    async def find_by_attributes(
        self, attributes: Mapping[str, Any], columns: Columns = None
    ) -> ModelT | None:
        return await self._first(self._where_attributes(self._select(columns), attributes))

    async def find_all_by_attributes(
        self, attributes: Mapping[str, Any], columns: Columns = None
    ) -> list[ModelT]:
        return await self._all(self._where_attributes(self._select(columns), attributes))

    # --- mutations ---

    async def create(self, data: Mapping[str, Any]) -> ModelT:
        entity = self._new(data)
        self._session.add(entity)
        await self._session.flush()
        await self._session.refresh(entity)
        return entity

    async def update(self, id: Any, data: Mapping[str, Any]) -> bool:
        entity = await self.find_or_fail(id)
        mapper = inspect(self.model)
        unknown = [name for name in data if name not in mapper.attrs]
        if unknown:
            raise TypeError(f"{unknown[0]!r} is not an attribute of {self.model.__name__}")
        for name, value in data.items():
            setattr(entity, name, value)
        await self._session.flush()
        return True

    async def delete(self, id: Any) -> bool:
        entity = await self.find_or_fail(id)
        await self._session.delete(entity)
        await self._session.flush()
        return True

    async def first_or_create(
        self, attributes: Mapping[str, Any], values: Mapping[str, Any] | None = None
    ) -> ModelT:
        entity = await self.find_by_attributes(attributes)
        if entity is not None:
            return entity
        return await self.create({**attributes, **(values or {})})

    async def first_or_new(
        self, attributes: Mapping[str, Any], values: Mapping[str, Any] | None = None
    ) -> ModelT:
        entity = await self.find_by_attributes(attributes)
        if entity is not None:
            return entity
        return self._new({**attributes, **(values or {})})

    # --- eager loading ---

    def with_(self, *relations: str | Sequence[str]) -> SqlRepository[ModelT]:
        added = [path for path in normalize_relations(relations) if path not in self._relations]
        clone = object.__new__(type(self))
        clone.__dict__.update(self.__dict__)
        clone._relations = self._relations + tuple(dict.fromkeys(added))
        return clone

    # --- dynamic finders ---

    def __getattr__(self, name: str) -> Callable[..., Awaitable[Any]]:
        # Only reached for attributes not found normally.
        for prefix, target in _DYNAMIC_FINDERS:
            if name.startswith(prefix) and len(name) > len(prefix):
                column = name[len(prefix):]
                method = getattr(self, target)

                async def finder(value: Any, *args: Any, **kwargs: Any) -> Any:
                    return await method(column, value, *args, **kwargs)

                finder.__name__ = name
                return finder
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")
