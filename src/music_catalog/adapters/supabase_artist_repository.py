"""Supabase-backed artist repository."""

from dataclasses import dataclass

from supabase import Client

from music_catalog.domain.artists import Artist, ArtistType
from music_catalog.domain.paging import SortDirection
from music_catalog.services.artists import ArtistRepository

_TABLE = "artistas"


@dataclass
class SupabaseArtistRepository(ArtistRepository):
    """Supabase implementation for artist persistence."""

    client: Client

    def list_artists(self, name_order: SortDirection | None = None) -> list[Artist]:
        """Return all artists, ordered by name when requested."""
        query = self.client.table(_TABLE).select("*")
        if name_order is not None:
            query = query.order("nome", desc=name_order is SortDirection.DESC)
        response = query.execute()
        return [_parse_artist(row) for row in response.data or []]

    def get_artist(self, artist_id: int) -> Artist | None:
        """Return an artist by id, if present."""
        response = (
            self.client.table(_TABLE)
            .select("*")
            .eq("id", artist_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_artist(response.data[0])

    def create_artist(self, name: str, type_: ArtistType, active: bool) -> Artist:
        """Insert an artist row and return it."""
        response = (
            self.client.table(_TABLE)
            .insert({"nome": name, "tipo": type_.value, "ativo": active})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create artist")
        return _parse_artist(response.data[0])

    def update_artist(self, artist: Artist) -> Artist:
        """Overwrite an artist row and return it."""
        response = (
            self.client.table(_TABLE)
            .update(
                {
                    "nome": artist.name,
                    "tipo": artist.type.value,
                    "ativo": artist.active,
                }
            )
            .eq("id", artist.id)
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update artist")
        return _parse_artist(response.data[0])

    def artist_exists(self, artist_id: int) -> bool:
        """Return whether an artist row exists."""
        response = (
            self.client.table(_TABLE).select("id").eq("id", artist_id).limit(1).execute()
        )
        return bool(response.data)

    def delete_artist(self, artist_id: int) -> None:
        """Delete an artist row."""
        self.client.table(_TABLE).delete().eq("id", artist_id).execute()


def _parse_artist(row: dict[str, object]) -> Artist:
    """Parse an artist row into a domain model."""
    return Artist(
        id=int(row["id"]),
        name=str(row.get("nome", "")),
        type=ArtistType(str(row["tipo"])),
        active=row.get("ativo") is not False,
    )
