"""Album API endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, HTTPException, Query, Request, Response, status

from music_catalog.api.models import AlbumOut, AlbumPageOut, AlbumPayload
from music_catalog.domain.albums import ALBUM_SORT_FIELDS
from music_catalog.domain.paging import DEFAULT_PAGE_SIZE, PageRequest, SortOrder

if TYPE_CHECKING:
    from music_catalog.containers import AppContainer

router = APIRouter(tags=["albums"])


@router.get("")
def list_albums(
    request: Request,
    page: int = 0,
    size: int = DEFAULT_PAGE_SIZE,
    sort: list[str] = Query(default=[]),
) -> AlbumPageOut:
    """Return a page of albums."""
    container: AppContainer = request.app.state.container
    page_request = PageRequest(
        page=page,
        size=size,
        sort=tuple(SortOrder.parse(raw, ALBUM_SORT_FIELDS) for raw in sort),
    )
    result = container.album_service.list(page_request)
    return AlbumPageOut(
        items=[AlbumOut.model_validate(album) for album in result.items],
        page=result.page,
        size=result.size,
        total=result.total,
        total_pages=result.total_pages,
    )


@router.get("/{album_id}")
def get_album(album_id: int, request: Request) -> AlbumOut:
    """Return a single album."""
    container: AppContainer = request.app.state.container
    album = container.album_service.get(album_id)
    if album is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return AlbumOut.model_validate(album)


@router.post("", status_code=status.HTTP_201_CREATED)
def create_album(
    payload: AlbumPayload, request: Request, response: Response
) -> AlbumOut:
    """Create an album and point ``Location`` at it."""
    container: AppContainer = request.app.state.container
    album = container.album_service.create(payload.to_input())
    response.headers["Location"] = str(request.url_for("get_album", album_id=album.id))
    return AlbumOut.model_validate(album)


@router.put("/{album_id}")
def update_album(
    album_id: int, payload: AlbumPayload, request: Request
) -> AlbumOut:
    """Replace an album's fields."""
    container: AppContainer = request.app.state.container
    album = container.album_service.update(album_id, payload.to_input())
    if album is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return AlbumOut.model_validate(album)


@router.delete("/{album_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_album(album_id: int, request: Request) -> Response:
    """Delete an album."""
    container: AppContainer = request.app.state.container
    if not container.album_service.delete(album_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
