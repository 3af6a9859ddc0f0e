"""Command-line launcher for the Blackbird session directory."""

import argparse
import logging
from collections.abc import Sequence

import uvicorn
from pydantic import ValidationError

from blackbird.api.app import create_app
from blackbird.app_logging import parse_log_level
from blackbird.config import Settings, split_address
from blackbird.containers import build_container

logger = logging.getLogger(__name__)


def build_parser(defaults: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Blackbird live view session directory."
    )
    parser.add_argument("--host", default=defaults.host, help="interface to bind")
    parser.add_argument("--port", type=int, default=defaults.port, help="port to bind")
    parser.add_argument(
        "--address",
        help="server address as host:port; overrides --host and --port",
    )
    parser.add_argument(
        "--log-level",
        default=defaults.log_level,
        help="log level (debug, info, warn, error)",
    )
    return parser


def parse_settings(argv: Sequence[str] | None = None) -> Settings:
    """Resolve settings from the environment and command-line flags."""
    defaults = Settings()
    parser = build_parser(defaults)
    args = parser.parse_args(argv)
    host, port = args.host, args.port
    if args.address:
        try:
            host, port = split_address(args.address)
        except ValueError as exc:
            parser.error(str(exc))
    try:
        level = parse_log_level(args.log_level)
    except ValueError as exc:
        parser.error(str(exc))
    try:
        return Settings.model_validate(
            {
                **defaults.model_dump(),
                "host": host,
                "port": port,
                "log_level": logging.getLevelName(level).lower(),
            }
        )
    except ValidationError as exc:
        parser.error(str(exc))


def main(argv: Sequence[str] | None = None) -> None:
    settings = parse_settings(argv)
    app = create_app(build_container(settings))
    logger.info("starting uvicorn on %s:%s", settings.host, settings.port)
    uvicorn.run(
        app, host=settings.host, port=settings.port, log_level=settings.log_level
    )


if __name__ == "__main__":
    main()
