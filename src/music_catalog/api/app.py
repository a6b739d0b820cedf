"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from music_catalog.api.albums import router as albums_router
from music_catalog.api.artists import router as artists_router
from music_catalog.api.images import router as images_router
from music_catalog.app_logging import configure_logging
from music_catalog.containers import AppContainer
from music_catalog.domain.artists import UnknownArtistTypeError
from music_catalog.domain.images import ImageStorageError
from music_catalog.domain.paging import InvalidPageRequestError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Music Catalog")
    app.state.container = container

    app.include_router(albums_router, prefix="/v1/albums")
    app.include_router(artists_router, prefix="/v1/artists")
    app.include_router(images_router)
    # Paths used by existing clients of the catalog.
    app.include_router(albums_router, prefix="/v1/albuns", include_in_schema=False)
    app.include_router(
        artists_router, prefix="/v1/artistas", include_in_schema=False
    )

    @app.exception_handler(RequestValidationError)
    async def invalid_request(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": jsonable_encoder(exc.errors())},
        )

    @app.exception_handler(UnknownArtistTypeError)
    @app.exception_handler(InvalidPageRequestError)
    async def bad_request(_request: Request, exc: ValueError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)}
        )

    @app.exception_handler(ImageStorageError)
    async def storage_failure(
        _request: Request, exc: ImageStorageError
    ) -> JSONResponse:
        logger.error("Image storage failure: %s", exc)
        return JSONResponse(
            status_code=status.HTTP_502_BAD_GATEWAY,
            content={"detail": "Image storage unavailable"},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
