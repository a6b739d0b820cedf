"""Paging and sorting primitives shared by the catalog stores."""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100


class InvalidPageRequestError(ValueError):
    """Raised when paging or sorting parameters cannot be honored."""


class SortDirection(str, Enum):
    """Direction applied to a sorted field."""

    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class SortOrder:
    """A single sort clause."""

    field: str
    direction: SortDirection = SortDirection.ASC

    @classmethod
    def parse(cls, raw: str, allowed_fields: frozenset[str]) -> "SortOrder":
        """Parse a ``field[,direction]`` clause."""
        name, _, direction = raw.partition(",")
        name = name.strip()
        if name not in allowed_fields:
            raise InvalidPageRequestError(f"Unsupported sort field: {name!r}")
        direction = direction.strip().lower() or SortDirection.ASC.value
        try:
            return cls(field=name, direction=SortDirection(direction))
        except ValueError as exc:
            raise InvalidPageRequestError(
                f"Unsupported sort direction: {direction!r}"
            ) from exc


@dataclass(frozen=True)
class PageRequest:
    """Zero-based page request passed through to the store."""

    page: int = 0
    size: int = DEFAULT_PAGE_SIZE
    sort: tuple[SortOrder, ...] = ()

    def __post_init__(self) -> None:
        if self.page < 0:
            raise InvalidPageRequestError("Page index must not be negative")
        if not 1 <= self.size <= MAX_PAGE_SIZE:
            raise InvalidPageRequestError(
                f"Page size must be between 1 and {MAX_PAGE_SIZE}"
            )

    @property
    def offset(self) -> int:
        return self.page * self.size


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of results plus the total element count."""

    items: list[T] = field(default_factory=list)
    page: int = 0
    size: int = DEFAULT_PAGE_SIZE
    total: int = 0

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.size) if self.size else 0
