"""Pydantic models for catalog request and response payloads."""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field

from music_catalog.domain.albums import AlbumInput
from music_catalog.domain.artists import ArtistInput, ArtistType


class AlbumPayload(BaseModel):
    """Album create/update payload."""

    title: str = Field(min_length=1)
    release_date: date | None = None
    active: bool | None = None

    def to_input(self) -> AlbumInput:
        return AlbumInput(
            title=self.title, release_date=self.release_date, active=self.active
        )


class AlbumOut(BaseModel):
    """Album response payload."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    release_date: date | None
    active: bool


class AlbumPageOut(BaseModel):
    """Paged album listing."""

    items: list[AlbumOut]
    page: int
    size: int
    total: int
    total_pages: int


class ArtistPayload(BaseModel):
    """Artist create/update payload; ``type`` is coerced by the service."""

    name: str = Field(min_length=1)
    type: str
    active: bool | None = None

    def to_input(self) -> ArtistInput:
        return ArtistInput(name=self.name, type=self.type, active=self.active)


class ArtistOut(BaseModel):
    """Artist response payload."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    type: ArtistType
    active: bool
