"""Artist lifecycle business logic."""

import logging
from dataclasses import dataclass
from typing import Protocol

from music_catalog.domain.artists import (
    Artist,
    ArtistInput,
    ArtistType,
    parse_artist_type,
)
from music_catalog.domain.models import resolve_active
from music_catalog.domain.paging import SortDirection

_logger = logging.getLogger(__name__)


class ArtistRepository(Protocol):
    """Persistence interface for artists."""

    def list_artists(self, name_order: SortDirection | None = None) -> list[Artist]:
        """Return all artists, ordered by name when a direction is given."""

    def get_artist(self, artist_id: int) -> Artist | None:
        """Return an artist by id, if present."""

    def create_artist(self, name: str, type_: ArtistType, active: bool) -> Artist:
        """Create an artist and return it with its assigned id."""

    def update_artist(self, artist: Artist) -> Artist:
        """Persist every field of an existing artist and return it."""

    def artist_exists(self, artist_id: int) -> bool:
        """Return whether an artist with this id exists."""

    def delete_artist(self, artist_id: int) -> None:
        """Delete an artist row."""


def resolve_name_order(raw: str | None) -> SortDirection | None:
    """Map the ``sort`` query value to a name ordering.

    Blank means store order, exactly ``asc`` (any case) ascending, anything
    else descending. Only the blank check ignores surrounding whitespace.
    """
    if raw is None or not raw.strip():
        return None
    if raw.lower() == SortDirection.ASC.value:
        return SortDirection.ASC
    return SortDirection.DESC


@dataclass
class ArtistService:
    """Application service for artist lifecycle actions."""

    repository: ArtistRepository

    def list(self, sort_direction: str | None = None) -> list[Artist]:
        """Return every artist, optionally ordered by name."""
        return self.repository.list_artists(resolve_name_order(sort_direction))

    def get(self, artist_id: int) -> Artist | None:
        """Return a single artist, if present."""
        return self.repository.get_artist(artist_id)

    def create(self, payload: ArtistInput) -> Artist:
        """Create an artist after coercing its type."""
        artist = self.repository.create_artist(
            name=payload.name,
            type_=parse_artist_type(payload.type),
            active=resolve_active(payload.active),
        )
        _logger.info("Artist created: id=%s type=%s", artist.id, artist.type.value)
        return artist

    def update(self, artist_id: int, payload: ArtistInput) -> Artist | None:
        """Replace name, type and active flag of an artist.

        The type is coerced before the store is touched, so an unknown type
        fails without a write even for a missing id.
        """
        artist_type = parse_artist_type(payload.type)
        existing = self.repository.get_artist(artist_id)
        if existing is None:
            return None
        updated = self.repository.update_artist(
            Artist(
                id=existing.id,
                name=payload.name,
                type=artist_type,
                active=resolve_active(payload.active),
            )
        )
        _logger.info("Artist updated: id=%s", artist_id)
        return updated

    def delete(self, artist_id: int) -> bool:
        """Delete an artist, reporting whether it existed."""
        if not self.repository.artist_exists(artist_id):
            return False
        self.repository.delete_artist(artist_id)
        _logger.info("Artist deleted: id=%s", artist_id)
        return True
