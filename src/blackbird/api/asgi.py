"""ASGI entrypoint for the Blackbird session directory."""

from blackbird.api.app import create_app
from blackbird.containers import build_container

app = create_app(build_container())
