"""Application configuration."""

import logging
import os

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from blackbird.app_logging import parse_log_level

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    host: str = "localhost"
    port: int = 8000
    log_level: str = "info"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_prefix="BLACKBIRD_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @field_validator("host")
    @classmethod
    def _host_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("server address must not be blank")
        return value

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        return logging.getLevelName(parse_log_level(value)).lower()


def split_address(address: str) -> tuple[str, int]:
    """Split a ``host:port`` server address."""
    host, separator, port = address.strip().rpartition(":")
    if not separator or not host or not port.isdigit():
        raise ValueError(f"invalid server address {address!r}")
    return host, int(port)
