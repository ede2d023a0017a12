"""Paginated query result."""

from __future__ import annotations

from math import ceil
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, computed_field

T = TypeVar("T")


class Page(BaseModel, Generic[T]):
    """One page of a sorted query plus the metadata needed to render pagers.

    current_page is 1-based.  last_page is never below 1, so an empty result
    still reports a single (empty) page.  from_index / to_index are the 1-based
    positions of the first and last item on this page, or None when it is empty.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    items: list[T]
    total: int = Field(ge=0)
    per_page: int = Field(ge=1)
    current_page: int = Field(ge=1)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def last_page(self) -> int:
        return max(ceil(self.total / self.per_page), 1)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def has_more(self) -> bool:
        return self.current_page < self.last_page

    @computed_field  # type: ignore[prop-decorator]
    @property
    def from_index(self) -> int | None:
        if not self.items:
            return None
        return (self.current_page - 1) * self.per_page + 1

    @computed_field  # type: ignore[prop-decorator]
    @property
    def to_index(self) -> int | None:
        if not self.items:
            return None
        return (self.current_page - 1) * self.per_page + len(self.items)
