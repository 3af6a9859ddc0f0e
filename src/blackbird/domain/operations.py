"""Parameter and result records for registry operations.

Every parameter record exposes ``check()``, which returns all validation
errors for its fields (an empty list when the parameters are well formed).
Result records carry either the affected entity or a list of errors. An
absent entity together with an empty error list means the entity was not
found.
"""

from dataclasses import dataclass, field

from blackbird.domain.sessions import Participant, Session
from blackbird.domain.validation import collect_errors, is_id, is_not_blank


@dataclass(frozen=True)
class CreateSessionParams:
    """Parameters required to create a session."""

    name: str

    def check(self) -> list[str]:
        return collect_errors(is_not_blank("name", self.name))


@dataclass(frozen=True)
class GetSessionParams:
    """Parameters required to retrieve a session."""

    id: str

    def check(self) -> list[str]:
        return collect_errors(is_id("id", self.id))


@dataclass(frozen=True)
class DeleteSessionParams:
    """Parameters required to delete a session."""

    id: str

    def check(self) -> list[str]:
        return collect_errors(is_id("id", self.id))


@dataclass(frozen=True)
class AddParticipantParams:
    """Parameters required to add a participant to a session."""

    session_id: str
    name: str

    def check(self) -> list[str]:
        return collect_errors(
            is_id("sessionId", self.session_id),
            is_not_blank("name", self.name),
        )


@dataclass(frozen=True)
class GetParticipantParams:
    """Parameters required to retrieve a participant."""

    session_id: str
    participant_id: str

    def check(self) -> list[str]:
        return collect_errors(
            is_id("sessionId", self.session_id),
            is_id("participantId", self.participant_id),
        )


@dataclass(frozen=True)
class UpdateParticipantParams:
    """Parameters required to rename a participant."""

    session_id: str
    participant_id: str
    name: str

    def check(self) -> list[str]:
        return collect_errors(
            is_id("sessionId", self.session_id),
            is_id("participantId", self.participant_id),
            is_not_blank("name", self.name),
        )


@dataclass(frozen=True)
class DeleteParticipantParams:
    """Parameters required to remove a participant."""

    session_id: str
    participant_id: str

    def check(self) -> list[str]:
        return collect_errors(
            is_id("sessionId", self.session_id),
            is_id("participantId", self.participant_id),
        )


@dataclass(frozen=True)
class GetParticipantsParams:
    """Parameters required to list the participants of a session."""

    session_id: str

    def check(self) -> list[str]:
        return collect_errors(is_id("sessionId", self.session_id))


@dataclass(frozen=True)
class SessionResult:
    """Outcome of a create, get or delete session operation."""

    session: Session | None = None
    errors: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class ParticipantResult:
    """Outcome of an add, get, update or delete participant operation."""

    participant: Participant | None = None
    errors: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class ParticipantsResult:
    """Outcome of listing the participants of a session."""

    participants: list[Participant] | None = None
    errors: list[str] = field(default_factory=list)
