"""Supabase Storage implementation of the image object store."""

from dataclasses import dataclass
from uuid import uuid4

import httpx
from storage3.utils import StorageException
from supabase import Client

from music_catalog.domain.images import ImageNotFoundError, ImageStorageError
from music_catalog.services.images import ImageStorage

_NOT_FOUND_STATUSES = {"404", 404}
_NOT_FOUND_CODES = {"not_found", "NoSuchKey"}


@dataclass
class SupabaseImageStorage(ImageStorage):
    """Stores images as objects in a single Supabase Storage bucket."""

    client: Client
    bucket: str

    def put(self, data: bytes, content_type: str | None = None) -> str:
        """Upload bytes under a freshly generated id."""
        image_id = uuid4().hex
        file_options = {"content-type": content_type} if content_type else None
        try:
            self._bucket().upload(image_id, data, file_options=file_options)
        except (StorageException, httpx.HTTPError) as exc:
            raise ImageStorageError(f"Failed to upload image {image_id}") from exc
        return image_id

    def get(self, image_id: str) -> bytes:
        """Download the stored bytes for an id."""
        try:
            return self._bucket().download(image_id)
        except StorageException as exc:
            raise _translate(exc, image_id) from exc
        except httpx.HTTPError as exc:
            raise ImageStorageError(f"Failed to download image {image_id}") from exc

    def stat(self, image_id: str) -> str | None:
        """Return the mimetype recorded for an object."""
        try:
            entries = self._bucket().list(options={"search": image_id, "limit": 100})
        except StorageException as exc:
            raise _translate(exc, image_id) from exc
        except httpx.HTTPError as exc:
            raise ImageStorageError(f"Failed to stat image {image_id}") from exc
        for entry in entries or []:
            if entry.get("name") == image_id:
                metadata = entry.get("metadata") or {}
                return metadata.get("mimetype") or None
        raise ImageNotFoundError(image_id)

    def _bucket(self):  # type: ignore[no-untyped-def]
        return self.client.storage.from_(self.bucket)


def _translate(exc: StorageException, image_id: str) -> Exception:
    """Map a storage exception to the not-found or failure error."""
    status = getattr(exc, "status", None)
    code = getattr(exc, "code", None)
    if exc.args and isinstance(exc.args[0], dict):
        payload = exc.args[0]
        status = payload.get("statusCode", status)
        code = payload.get("error", code)
    if status in _NOT_FOUND_STATUSES or code in _NOT_FOUND_CODES:
        return ImageNotFoundError(image_id)
    return ImageStorageError(f"Storage backend failed for image {image_id}")
