"""Shared test fixtures."""

from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta

import pytest
from fastapi.testclient import TestClient

from blackbird.api.app import create_app
from blackbird.config import Settings
from blackbird.containers import AppContainer
from blackbird.services.registry import SessionRegistry


@dataclass
class FakeClock:
    """Clock returning scripted moments, then repeating the last one."""

    moments: list[datetime] = field(
        default_factory=lambda: [datetime(2024, 5, 1, 9, 30, tzinfo=UTC)]
    )
    calls: int = 0

    def __call__(self) -> datetime:
        index = min(self.calls, len(self.moments) - 1)
        self.calls += 1
        return self.moments[index]

    def advance(self, seconds: float) -> None:
        self.moments.append(self.moments[-1] + timedelta(seconds=seconds))


@dataclass
class ScriptedIds:
    """Id factory that hands out a fixed sequence of ids."""

    ids: list[str]
    issued: list[str] = field(default_factory=list)

    def __call__(self) -> str:
        value = self.ids[len(self.issued)]
        self.issued.append(value)
        return value


@pytest.fixture
def settings() -> Settings:
    return Settings(host="localhost", port=8000, log_level="debug", environment="test")


@pytest.fixture
def registry() -> SessionRegistry:
    return SessionRegistry()


@pytest.fixture
def container(settings: Settings, registry: SessionRegistry) -> AppContainer:
    return AppContainer(settings=settings, registry=registry)


@pytest.fixture
def client(container: AppContainer) -> Iterator[TestClient]:
    with TestClient(create_app(container), raise_server_exceptions=False) as test_client:
        yield test_client
