"""Artist API endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, HTTPException, Query, Request, Response, status

from music_catalog.api.models import ArtistOut, ArtistPayload

if TYPE_CHECKING:
    from music_catalog.containers import AppContainer

router = APIRouter(tags=["artists"])


@router.get("")
def list_artists(
    request: Request,
    sort: str | None = None,
    sort_artista_nome: str | None = Query(default=None, alias="sortArtistaNome"),
) -> list[ArtistOut]:
    """Return all artists, ordered by name when a sort value is given.

    ``sortArtistaNome`` is accepted for older clients; ``sort`` wins when both
    are sent.
    """
    container: AppContainer = request.app.state.container
    direction = sort if sort is not None else sort_artista_nome
    return [
        ArtistOut.model_validate(artist)
        for artist in container.artist_service.list(direction)
    ]


@router.get("/{artist_id}")
def get_artist(artist_id: int, request: Request) -> ArtistOut:
    """Return a single artist."""
    container: AppContainer = request.app.state.container
    artist = container.artist_service.get(artist_id)
    if artist is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return ArtistOut.model_validate(artist)


@router.post("", status_code=status.HTTP_201_CREATED)
def create_artist(
    payload: ArtistPayload, request: Request, response: Response
) -> ArtistOut:
    """Create an artist and point ``Location`` at it."""
    container: AppContainer = request.app.state.container
    artist = container.artist_service.create(payload.to_input())
    response.headers["Location"] = str(
        request.url_for("get_artist", artist_id=artist.id)
    )
    return ArtistOut.model_validate(artist)


@router.put("/{artist_id}")
def update_artist(
    artist_id: int, payload: ArtistPayload, request: Request
) -> ArtistOut:
    """Replace an artist's fields."""
    container: AppContainer = request.app.state.container
    artist = container.artist_service.update(artist_id, payload.to_input())
    if artist is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return ArtistOut.model_validate(artist)


@router.delete("/{artist_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_artist(artist_id: int, request: Request) -> Response:
    """Delete an artist."""
    container: AppContainer = request.app.state.container
    if not container.artist_service.delete(artist_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
