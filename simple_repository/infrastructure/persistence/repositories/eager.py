"""Eager-loading helpers: relation paths to SQLAlchemy loader options."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

from sqlalchemy.orm import RelationshipProperty, selectinload

if TYPE_CHECKING:
    from sqlalchemy.orm.strategy_options import _AbstractLoad


def normalize_relations(relations: Iterable[str | Sequence[str]]) -> tuple[str, ...]:
    """Flatten with_() arguments into a tuple of relation paths.

    Accepts any mix of strings and sequences of strings, e.g.
    ``("posts", ["profile", "posts.comments"])``.
    """
    paths: list[str] = []
    for relation in relations:
        if isinstance(relation, str):
            paths.append(relation)
        else:
            paths.extend(relation)

    for path in paths:
        if not isinstance(path, str) or not path or "" in path.split("."):
            raise ValueError(f"Invalid relation path: {path!r}")
    return tuple(paths)


def loader_option(model: type, path: str) -> _AbstractLoad:
    """Build a selectinload chain for a dotted relation path.

    ``loader_option(User, "posts.comments")`` is
    ``selectinload(User.posts).selectinload(Post.comments)``.
    Raises AttributeError when a segment is not a relationship.
    """
    option: _AbstractLoad | None = None
    current = model
    for name in path.split("."):
        attr = getattr(current, name)
        prop = getattr(attr, "property", None)
        if not isinstance(prop, RelationshipProperty):
            raise AttributeError(f"{current.__name__}.{name} is not a relationship")
        option = selectinload(attr) if option is None else option.selectinload(attr)
        current = prop.mapper.class_
    assert option is not None
    return option


def loader_options(model: type, paths: Iterable[str]) -> list[_AbstractLoad]:
    return [loader_option(model, path) for path in paths]
