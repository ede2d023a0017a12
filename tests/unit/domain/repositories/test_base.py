"""Tests for simple_repository/domain/repositories/base.py."""

import pytest

from simple_repository.domain.repositories.base import DEFAULT_ORDER, Repository


def test_repository_cannot_be_instantiated_directly():
    with pytest.raises(TypeError):
        Repository()  # type: ignore[abstract]


def test_repository_concrete_subclass_must_implement_all_methods():
    class _Partial(Repository):
        async def find(self, id, columns=None): return None
        async def find_or_fail(self, id, columns=None): return None
        # missing the rest

    with pytest.raises(TypeError):
        _Partial()  # type: ignore[abstract]


def test_repository_full_concrete_subclass_instantiates():
    class _Full(Repository):
        async def find(self, id, columns=None): return None
        async def find_or_fail(self, id, columns=None): return None
        async def find_by(self, column, value, columns=None): return None
        async def find_or_fail_by(self, column, value, columns=None): return None
        async def find_all(self, order_by=DEFAULT_ORDER, columns=None): return []
        async def find_all_by(self, column, value, order_by=DEFAULT_ORDER, columns=None): return []
        async def find_all_paginated(self, per_page=20, order_by=DEFAULT_ORDER, columns=None, page=1): return None
        async def create(self, data): return data
        async def update(self, id, data): return True
        async def delete(self, id): return True
        async def find_by_attributes(self, attributes, columns=None): return None
        async def find_all_by_attributes(self, attributes, columns=None): return []
        async def first_or_create(self, attributes, values=None): return attributes
        async def first_or_new(self, attributes, values=None): return attributes
        def with_(self, *relations): return self

    assert _Full() is not None


def test_default_order_is_id_ascending():
    assert DEFAULT_ORDER == ("id", "asc")
