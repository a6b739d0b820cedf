"""Image upload and download endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, File, HTTPException, Request, UploadFile, status
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import PlainTextResponse, Response

if TYPE_CHECKING:
    from music_catalog.containers import AppContainer

router = APIRouter(prefix="/v1/images", tags=["images"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def upload_image(request: Request, file: UploadFile = File(...)) -> Response:
    """Store an uploaded image and return its id as plain text."""
    container: AppContainer = request.app.state.container
    try:
        data = await file.read()
    finally:
        await file.close()
    image_id = await run_in_threadpool(
        container.image_service.upload, data, file.content_type
    )
    return PlainTextResponse(image_id, status_code=status.HTTP_201_CREATED)


@router.get("/{image_id}")
def get_image(image_id: str, request: Request) -> Response:
    """Return the image as base64 text."""
    container: AppContainer = request.app.state.container
    encoded = container.image_service.fetch_encoded(image_id)
    if encoded is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return PlainTextResponse(encoded)


@router.get("/{image_id}/raw")
def get_raw_image(image_id: str, request: Request) -> Response:
    """Return the image bytes with their stored content type."""
    container: AppContainer = request.app.state.container
    image = container.image_service.fetch_raw(image_id)
    if image is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return Response(content=image.data, media_type=image.content_type)
