"""Image upload and retrieval service."""

import base64
import logging
from dataclasses import dataclass
from typing import Protocol

from music_catalog.domain.images import (
    DEFAULT_CONTENT_TYPE,
    ImageData,
    ImageNotFoundError,
    ImageStorageError,
)

_logger = logging.getLogger(__name__)


class ImageStorage(Protocol):
    """Interface for the object store holding image bytes.

    ``get`` and ``stat`` raise ``ImageNotFoundError`` for unknown ids and
    ``ImageStorageError`` for any other backend failure.
    """

    def put(self, data: bytes, content_type: str | None = None) -> str:
        """Store bytes and return the generated object id."""

    def get(self, image_id: str) -> bytes:
        """Return the stored bytes for an id."""

    def stat(self, image_id: str) -> str | None:
        """Return the stored content type for an id, if reported."""


@dataclass
class ImageService:
    """Application service for cover images.

    With ``collapse_storage_errors`` set, backend failures are logged and
    reported as a missing image; otherwise they propagate to the caller.
    """

    storage: ImageStorage
    collapse_storage_errors: bool = True

    def upload(self, data: bytes, content_type: str | None = None) -> str:
        """Store an image and return its generated id."""
        image_id = self.storage.put(data, content_type)
        _logger.info("Image uploaded: id=%s bytes=%s", image_id, len(data))
        return image_id

    def fetch_encoded(self, image_id: str) -> str | None:
        """Return the image bytes as base64 text, or ``None`` if unavailable."""
        try:
            data = self.storage.get(image_id)
        except ImageNotFoundError:
            return None
        except ImageStorageError:
            if not self.collapse_storage_errors:
                raise
            _log_collapsed_failure(image_id)
            return None
        return base64.b64encode(data).decode("ascii")

    def fetch_raw(self, image_id: str) -> ImageData | None:
        """Return image bytes and content type, or ``None`` if unavailable."""
        try:
            content_type = self.storage.stat(image_id)
            data = self.storage.get(image_id)
        except ImageNotFoundError:
            return None
        except ImageStorageError:
            if not self.collapse_storage_errors:
                raise
            _log_collapsed_failure(image_id)
            return None
        return ImageData(data=data, content_type=content_type or DEFAULT_CONTENT_TYPE)


def _log_collapsed_failure(image_id: str) -> None:
    _logger.warning(
        "Image storage failure reported as not found: id=%s",
        image_id,
        exc_info=True,
    )
