"""ASGI entrypoint for the music catalog API."""

from music_catalog.api.app import create_app
from music_catalog.containers import build_container

app = create_app(build_container())
