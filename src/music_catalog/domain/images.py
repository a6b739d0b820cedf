"""Domain models for stored images."""

from dataclasses import dataclass

DEFAULT_CONTENT_TYPE = "application/octet-stream"


class ImageNotFoundError(LookupError):
    """Raised by storage when no object exists for an id."""

    def __init__(self, image_id: str) -> None:
        super().__init__(f"Image not found: {image_id}")
        self.image_id = image_id


class ImageStorageError(RuntimeError):
    """Raised by storage when the backend fails for any other reason."""


@dataclass(frozen=True)
class ImageData:
    """Raw image bytes with their content type."""

    data: bytes
    content_type: str
