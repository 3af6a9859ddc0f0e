"""Identifier and timestamp generation."""

import hashlib
from datetime import UTC, datetime
from uuid import uuid4

from blackbird.domain.validation import ID_LENGTH


def generate_id() -> str:
    """Return a short id derived from the SHA-256 digest of a random UUID."""
    digest = hashlib.sha256(str(uuid4()).encode("utf-8")).hexdigest()
    return digest[:ID_LENGTH]


def utc_now() -> datetime:
    return datetime.now(tz=UTC)


def format_timestamp(moment: datetime) -> str:
    """Format a moment as a UTC ISO-8601 string that sorts chronologically."""
    return moment.astimezone(UTC).isoformat(timespec="microseconds")
