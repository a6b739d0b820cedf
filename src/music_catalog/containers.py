"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from music_catalog.adapters.supabase_album_repository import SupabaseAlbumRepository
from music_catalog.adapters.supabase_artist_repository import (
    SupabaseArtistRepository,
)
from music_catalog.adapters.supabase_image_storage import SupabaseImageStorage
from music_catalog.config import Settings
from music_catalog.services.albums import AlbumService
from music_catalog.services.artists import ArtistService
from music_catalog.services.images import ImageService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    album_service: AlbumService
    artist_service: ArtistService
    image_service: ImageService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    image_storage = SupabaseImageStorage(
        client=supabase_client, bucket=resolved_settings.storage_bucket
    )
    return AppContainer(
        settings=resolved_settings,
        album_service=AlbumService(SupabaseAlbumRepository(supabase_client)),
        artist_service=ArtistService(SupabaseArtistRepository(supabase_client)),
        image_service=ImageService(
            storage=image_storage,
            collapse_storage_errors=resolved_settings.collapse_storage_errors,
        ),
    )
