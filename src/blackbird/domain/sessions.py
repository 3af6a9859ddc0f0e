"""Domain models for live view sessions."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Session:
    """Represents a registered live view session."""

    name: str
    id: str
    creation_date_time: str


@dataclass(frozen=True)
class Participant:
    """Represents a participant of a live view session."""

    name: str
    id: str
    session_id: str
    creation_date_time: str
