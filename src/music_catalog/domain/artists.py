"""Domain models for artists."""

from dataclasses import dataclass
from enum import Enum


class UnknownArtistTypeError(ValueError):
    """Raised when a string does not name a known artist type."""

    def __init__(self, raw: str | None) -> None:
        super().__init__(f"Unknown artist type: {raw!r}")
        self.raw = raw


class ArtistType(str, Enum):
    """Performer categories."""

    CANTOR = "CANTOR"
    BANDA = "BANDA"
    DUPLA = "DUPLA"


def parse_artist_type(raw: str | None) -> ArtistType:
    """Coerce a wire string to an ``ArtistType``.

    Matching ignores case and surrounding whitespace. Blank or unmatched
    values raise ``UnknownArtistTypeError`` instead of falling back to a
    default member.
    """
    if raw is None:
        raise UnknownArtistTypeError(raw)
    try:
        return ArtistType(raw.strip().upper())
    except ValueError as exc:
        raise UnknownArtistTypeError(raw) from exc


@dataclass(frozen=True)
class Artist:
    """Represents an artist stored in the catalog."""

    id: int
    name: str
    type: ArtistType
    active: bool


@dataclass(frozen=True)
class ArtistInput:
    """Caller-supplied artist fields; ``type`` is still the raw wire string."""

    name: str
    type: str
    active: bool | None = None
