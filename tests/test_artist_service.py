"""Tests for artist service."""

import pytest

from music_catalog.domain.artists import (
    ArtistInput,
    ArtistType,
    UnknownArtistTypeError,
    parse_artist_type,
)
from music_catalog.domain.paging import SortDirection
from music_catalog.services.artists import ArtistService, resolve_name_order
from tests.conftest import InMemoryArtistRepository


def _seeded_service() -> ArtistService:
    service = ArtistService(InMemoryArtistRepository())
    for name in ["Mutantes", "Anitta", "Zeca Pagodinho", "Caetano"]:
        service.create(ArtistInput(name=name, type="CANTOR"))
    return service


def test_create_coerces_type_and_defaults_active() -> None:
    service = ArtistService(InMemoryArtistRepository())

    artist = service.create(ArtistInput(name="New", type="CANTOR"))

    assert artist.id > 0
    assert artist.type is ArtistType.CANTOR
    assert artist.active is True


def test_create_rejects_unknown_type_without_writing() -> None:
    repository = InMemoryArtistRepository()
    service = ArtistService(repository)

    with pytest.raises(UnknownArtistTypeError):
        service.create(ArtistInput(name="New", type="ORCHESTRA"))

    assert repository.writes == []


def test_update_replaces_fields_and_recoerces_type() -> None:
    repository = InMemoryArtistRepository()
    service = ArtistService(repository)
    created = service.create(ArtistInput(name="Duo", type="DUPLA", active=False))

    updated = service.update(created.id, ArtistInput(name="Band", type="banda"))

    assert updated is not None
    assert updated.name == "Band"
    assert updated.type is ArtistType.BANDA
    assert updated.active is True


def test_update_missing_artist_returns_none() -> None:
    repository = InMemoryArtistRepository()
    service = ArtistService(repository)

    assert service.update(7, ArtistInput(name="X", type="CANTOR")) is None
    assert repository.writes == []


def test_delete_is_idempotent() -> None:
    service = ArtistService(InMemoryArtistRepository())
    artist = service.create(ArtistInput(name="Once", type="BANDA"))

    assert service.delete(artist.id) is True
    assert service.delete(artist.id) is False


def test_list_ascending_by_name() -> None:
    names = [artist.name for artist in _seeded_service().list("ASC")]

    assert names == sorted(names)


def test_list_descending_for_any_other_value() -> None:
    service = _seeded_service()

    assert [a.name for a in service.list("desc")] == sorted(
        [a.name for a in service.list()], reverse=True
    )
    assert [a.name for a in service.list("sideways")] == [
        a.name for a in service.list("desc")
    ]


@pytest.mark.parametrize("raw", [None, "", "   "])
def test_list_blank_sort_keeps_store_order(raw: str | None) -> None:
    names = [artist.name for artist in _seeded_service().list(raw)]

    assert names == ["Mutantes", "Anitta", "Zeca Pagodinho", "Caetano"]


def test_resolve_name_order() -> None:
    assert resolve_name_order(None) is None
    assert resolve_name_order("aSc") is SortDirection.ASC
    assert resolve_name_order(" asc ") is SortDirection.DESC
    assert resolve_name_order("Desc") is SortDirection.DESC


def test_parse_artist_type_accepts_case_and_whitespace() -> None:
    assert parse_artist_type(" dupla ") is ArtistType.DUPLA


@pytest.mark.parametrize("raw", [None, "", "SOLO"])
def test_parse_artist_type_rejects_unknown(raw: str | None) -> None:
    with pytest.raises(UnknownArtistTypeError) as exc_info:
        parse_artist_type(raw)

    assert exc_info.value.raw == raw


def test_list_padded_asc_sorts_descending() -> None:
    service = ArtistService(InMemoryArtistRepository())
    for name in ["B", "A", "C"]:
        service.create(ArtistInput(name=name, type="BANDA"))

    assert [artist.name for artist in service.list(" asc ")] == ["C", "B", "A"]


def test_update_rejects_unknown_type_before_writing() -> None:
    repository = InMemoryArtistRepository()
    service = ArtistService(repository)
    created = service.create(ArtistInput(name="Duo", type="DUPLA"))

    with pytest.raises(UnknownArtistTypeError):
        service.update(created.id, ArtistInput(name="X", type="ORCHESTRA"))

    assert repository.writes == ["create"]
    assert repository.artists[created.id] == created


def test_update_unknown_type_raises_even_for_missing_artist() -> None:
    repository = InMemoryArtistRepository()
    service = ArtistService(repository)

    with pytest.raises(UnknownArtistTypeError):
        service.update(404, ArtistInput(name="X", type="ORCHESTRA"))

    assert repository.writes == []
