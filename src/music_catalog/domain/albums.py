"""Domain models for albums."""

from dataclasses import dataclass
from datetime import date

ALBUM_SORT_FIELDS = frozenset({"id", "title", "release_date", "active"})


@dataclass(frozen=True)
class Album:
    """Represents an album stored in the catalog."""

    id: int
    title: str
    release_date: date | None
    active: bool


@dataclass(frozen=True)
class AlbumInput:
    """Caller-supplied album fields for create and update."""

    title: str
    release_date: date | None = None
    active: bool | None = None
