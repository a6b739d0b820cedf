"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import date
from uuid import uuid4

import pytest

from music_catalog.config import Settings
from music_catalog.containers import AppContainer
from music_catalog.domain.albums import Album
from music_catalog.domain.artists import Artist, ArtistType
from music_catalog.domain.images import ImageNotFoundError, ImageStorageError
from music_catalog.domain.paging import Page, PageRequest, SortDirection
from music_catalog.services.albums import AlbumRepository, AlbumService
from music_catalog.services.artists import ArtistRepository, ArtistService
from music_catalog.services.images import ImageService, ImageStorage


@dataclass
class InMemoryAlbumRepository(AlbumRepository):
    """In-memory album repository for tests."""

    albums: dict[int, Album] = field(default_factory=dict)
    writes: list[str] = field(default_factory=list)
    next_id: int = 1

    def list_albums(self, request: PageRequest) -> Page[Album]:
        items = list(self.albums.values())
        for order in reversed(request.sort):
            items.sort(
                key=lambda album: getattr(album, order.field),
                reverse=order.direction is SortDirection.DESC,
            )
        return Page(
            items=items[request.offset : request.offset + request.size],
            page=request.page,
            size=request.size,
            total=len(items),
        )

    def get_album(self, album_id: int) -> Album | None:
        return self.albums.get(album_id)

    def create_album(
        self, title: str, release_date: date | None, active: bool
    ) -> Album:
        album = Album(
            id=self.next_id, title=title, release_date=release_date, active=active
        )
        self.next_id += 1
        self.albums[album.id] = album
        self.writes.append("create")
        return album

    def update_album(self, album: Album) -> Album:
        self.albums[album.id] = album
        self.writes.append("update")
        return album

    def album_exists(self, album_id: int) -> bool:
        return album_id in self.albums

    def delete_album(self, album_id: int) -> None:
        self.albums.pop(album_id, None)
        self.writes.append("delete")


@dataclass
class InMemoryArtistRepository(ArtistRepository):
    """In-memory artist repository that keeps insertion order."""

    artists: dict[int, Artist] = field(default_factory=dict)
    writes: list[str] = field(default_factory=list)
    next_id: int = 1

    def list_artists(self, name_order: SortDirection | None = None) -> list[Artist]:
        items = list(self.artists.values())
        if name_order is None:
            return items
        return sorted(
            items,
            key=lambda artist: artist.name,
            reverse=name_order is SortDirection.DESC,
        )

    def get_artist(self, artist_id: int) -> Artist | None:
        return self.artists.get(artist_id)

    def create_artist(self, name: str, type_: ArtistType, active: bool) -> Artist:
        artist = Artist(id=self.next_id, name=name, type=type_, active=active)
        self.next_id += 1
        self.artists[artist.id] = artist
        self.writes.append("create")
        return artist

    def update_artist(self, artist: Artist) -> Artist:
        self.artists[artist.id] = artist
        self.writes.append("update")
        return artist

    def artist_exists(self, artist_id: int) -> bool:
        return artist_id in self.artists

    def delete_artist(self, artist_id: int) -> None:
        self.artists.pop(artist_id, None)
        self.writes.append("delete")


@dataclass
class InMemoryImageStorage(ImageStorage):
    """In-memory object store; ``failing`` simulates an unreachable backend."""

    objects: dict[str, tuple[bytes, str | None]] = field(default_factory=dict)
    failing: bool = False

    def put(self, data: bytes, content_type: str | None = None) -> str:
        self._check()
        image_id = uuid4().hex
        self.objects[image_id] = (data, content_type)
        return image_id

    def get(self, image_id: str) -> bytes:
        self._check()
        if image_id not in self.objects:
            raise ImageNotFoundError(image_id)
        return self.objects[image_id][0]

    def stat(self, image_id: str) -> str | None:
        self._check()
        if image_id not in self.objects:
            raise ImageNotFoundError(image_id)
        return self.objects[image_id][1]

    def _check(self) -> None:
        if self.failing:
            raise ImageStorageError("storage offline")


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key=(
            "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9."
            "eyJyb2xlIjoic2VydmljZV9yb2xlIn0."
            "c2lnbmF0dXJl"
        ),
    )


@pytest.fixture
def image_storage() -> InMemoryImageStorage:
    return InMemoryImageStorage()


@pytest.fixture
def container(
    settings: Settings, image_storage: InMemoryImageStorage
) -> AppContainer:
    return AppContainer(
        settings=settings,
        album_service=AlbumService(InMemoryAlbumRepository()),
        artist_service=ArtistService(InMemoryArtistRepository()),
        image_service=ImageService(storage=image_storage),
    )
