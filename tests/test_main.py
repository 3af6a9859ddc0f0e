"""Tests for the command-line launcher."""

import runpy
import sys

import pytest
from fastapi import FastAPI

from blackbird import main as launcher


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("BLACKBIRD_HOST", "BLACKBIRD_PORT", "BLACKBIRD_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


def test_parse_settings_defaults() -> None:
    settings = launcher.parse_settings([])

    assert settings.host == "localhost"
    assert settings.port == 8000
    assert settings.log_level == "info"


def test_parse_settings_address_overrides_host_and_port() -> None:
    settings = launcher.parse_settings(
        ["--host", "ignored", "--address", "0.0.0.0:9000", "--log-level", "WARN"]
    )

    assert (settings.host, settings.port) == ("0.0.0.0", 9000)
    assert settings.log_level == "warning"


def test_parse_settings_rejects_unknown_log_level(
    capsys: pytest.CaptureFixture[str],
) -> None:
    with pytest.raises(SystemExit):
        launcher.parse_settings(["--log-level", "loud"])

    assert "unknown log level" in capsys.readouterr().err


def test_parse_settings_rejects_malformed_address() -> None:
    with pytest.raises(SystemExit):
        launcher.parse_settings(["--address", "nowhere"])


def test_main_serves_app_with_uvicorn(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[tuple[object, dict[str, object]]] = []
    monkeypatch.setattr(
        launcher.uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs))
    )

    launcher.main(["--port", "8123", "--log-level", "debug"])

    app, kwargs = calls[0]
    assert isinstance(app, FastAPI)
    assert kwargs == {"host": "localhost", "port": 8123, "log_level": "debug"}


def test_parse_settings_rejects_blank_host() -> None:
    with pytest.raises(SystemExit):
        launcher.parse_settings(["--host", "  "])


def test_package_runs_as_module(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[dict[str, object]] = []
    monkeypatch.setattr(
        launcher.uvicorn, "run", lambda app, **kwargs: calls.append(kwargs)
    )
    monkeypatch.setattr(sys, "argv", ["blackbird", "--port", "8124"])

    runpy.run_module("blackbird", run_name="__main__")

    assert calls == [{"host": "localhost", "port": 8124, "log_level": "info"}]
