"""Dependency container wiring for the application."""

from dataclasses import dataclass

from blackbird.config import Settings
from blackbird.services.registry import SessionRegistry


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    registry: SessionRegistry


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    return AppContainer(settings=resolved_settings, registry=SessionRegistry())
