"""Field checks shared by the operation parameter records."""

import re

ID_LENGTH = 10

_ID_PATTERN = re.compile(rf"[A-Za-z0-9=+\-]{{{ID_LENGTH}}}")


def is_not_blank(field: str, value: str) -> str | None:
    """Return an error message if the value is empty after stripping."""
    if not value.strip():
        return f"{field} must not be blank"
    return None


def is_id(field: str, value: str) -> str | None:
    """Return an error message if the value is not a well-formed identifier."""
    if _ID_PATTERN.fullmatch(value) is None:
        return f"{field} must be a valid id"
    return None


def collect_errors(*checks: str | None) -> list[str]:
    """Keep the messages of the checks that failed, in order."""
    return [message for message in checks if message is not None]
