"""Album lifecycle business logic."""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Protocol

from music_catalog.domain.albums import Album, AlbumInput
from music_catalog.domain.models import resolve_active
from music_catalog.domain.paging import Page, PageRequest

_logger = logging.getLogger(__name__)


class AlbumRepository(Protocol):
    """Persistence interface for albums."""

    def list_albums(self, request: PageRequest) -> Page[Album]:
        """Return one page of albums, sorted as requested."""

    def get_album(self, album_id: int) -> Album | None:
        """Return an album by id, if present."""

    def create_album(
        self, title: str, release_date: date | None, active: bool
    ) -> Album:
        """Create an album and return it with its assigned id."""

    def update_album(self, album: Album) -> Album:
        """Persist every field of an existing album and return it."""

    def album_exists(self, album_id: int) -> bool:
        """Return whether an album with this id exists."""

    def delete_album(self, album_id: int) -> None:
        """Delete an album row."""


@dataclass
class AlbumService:
    """Application service for album lifecycle actions."""

    repository: AlbumRepository

    def list(self, request: PageRequest) -> Page[Album]:
        """Return a page of albums exactly as the store orders it."""
        return self.repository.list_albums(request)

    def get(self, album_id: int) -> Album | None:
        """Return a single album, if present."""
        return self.repository.get_album(album_id)

    def create(self, payload: AlbumInput) -> Album:
        """Create an album, defaulting ``active`` to true."""
        album = self.repository.create_album(
            title=payload.title,
            release_date=payload.release_date,
            active=resolve_active(payload.active),
        )
        _logger.info("Album created: id=%s", album.id)
        return album

    def update(self, album_id: int, payload: AlbumInput) -> Album | None:
        """Replace every mutable field of an album.

        Returns ``None`` without writing when the album does not exist.
        """
        existing = self.repository.get_album(album_id)
        if existing is None:
            return None
        updated = self.repository.update_album(
            Album(
                id=existing.id,
                title=payload.title,
                release_date=payload.release_date,
                active=resolve_active(payload.active),
            )
        )
        _logger.info("Album updated: id=%s", album_id)
        return updated

    def delete(self, album_id: int) -> bool:
        """Delete an album, reporting whether it existed."""
        if not self.repository.album_exists(album_id):
            return False
        self.repository.delete_album(album_id)
        _logger.info("Album deleted: id=%s", album_id)
        return True
