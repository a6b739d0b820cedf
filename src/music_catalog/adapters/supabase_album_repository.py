"""Supabase-backed album repository."""

from dataclasses import dataclass
from datetime import date

from supabase import Client

from music_catalog.domain.albums import Album
from music_catalog.domain.paging import Page, PageRequest, SortDirection
from music_catalog.services.albums import AlbumRepository

_TABLE = "albuns"
_COLUMNS = {
    "id": "id",
    "title": "titulo",
    "release_date": "data_lancamento",
    "active": "ativo",
}


@dataclass
class SupabaseAlbumRepository(AlbumRepository):
    """Supabase implementation for album persistence."""

    client: Client

    def list_albums(self, request: PageRequest) -> Page[Album]:
        """Return one page of albums using range queries."""
        query = self.client.table(_TABLE).select("*", count="exact")
        for order in request.sort:
            query = query.order(
                _COLUMNS[order.field], desc=order.direction is SortDirection.DESC
            )
        response = query.range(
            request.offset, request.offset + request.size - 1
        ).execute()
        rows = response.data or []
        total = response.count if response.count is not None else len(rows)
        return Page(
            items=[_parse_album(row) for row in rows],
            page=request.page,
            size=request.size,
            total=total,
        )

    def get_album(self, album_id: int) -> Album | None:
        """Return an album by id, if present."""
        response = (
            self.client.table(_TABLE).select("*").eq("id", album_id).limit(1).execute()
        )
        if not response.data:
            return None
        return _parse_album(response.data[0])

    def create_album(
        self, title: str, release_date: date | None, active: bool
    ) -> Album:
        """Insert an album row and return it."""
        response = (
            self.client.table(_TABLE)
            .insert(_album_payload(title, release_date, active))
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create album")
        return _parse_album(response.data[0])

    def update_album(self, album: Album) -> Album:
        """Overwrite an album row and return it."""
        response = (
            self.client.table(_TABLE)
            .update(_album_payload(album.title, album.release_date, album.active))
            .eq("id", album.id)
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update album")
        return _parse_album(response.data[0])

    def album_exists(self, album_id: int) -> bool:
        """Return whether an album row exists."""
        response = (
            self.client.table(_TABLE).select("id").eq("id", album_id).limit(1).execute()
        )
        return bool(response.data)

    def delete_album(self, album_id: int) -> None:
        """Delete an album row."""
        self.client.table(_TABLE).delete().eq("id", album_id).execute()


def _album_payload(
    title: str, release_date: date | None, active: bool
) -> dict[str, object]:
    return {
        "titulo": title,
        "data_lancamento": release_date.isoformat() if release_date else None,
        "ativo": active,
    }


def _parse_album(row: dict[str, object]) -> Album:
    """Parse an album row into a domain model."""
    release_raw = row.get("data_lancamento")
    release_date = (
        date.fromisoformat(release_raw)
        if isinstance(release_raw, str) and release_raw
        else None
    )
    return Album(
        id=int(row["id"]),
        title=str(row.get("titulo", "")),
        release_date=release_date,
        active=row.get("ativo") is not False,
    )
