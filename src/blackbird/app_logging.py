"""Logging configuration helpers."""

import logging

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def parse_log_level(name: str) -> int:
    """Map a log level name (debug, info, warn, error) to a logging level."""
    level = _LEVELS.get(name.strip().lower())
    if level is None:
        raise ValueError(f"unknown log level {name!r}")
    return level


def configure_logging(level: str = "info") -> None:
    """Configure application logging with a single stream handler."""
    logger = logging.getLogger("blackbird")
    logger.setLevel(parse_log_level(level))
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s: %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
