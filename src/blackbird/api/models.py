"""Pydantic models for request and response payloads."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from blackbird.domain.operations import (
    ParticipantResult,
    ParticipantsResult,
    SessionResult,
)
from blackbird.domain.sessions import Participant, Session


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class NameBody(_CamelModel):
    """Body of create session, add participant and update participant requests."""

    name: str = ""


class SessionPayload(_CamelModel):
    """Session as rendered on the wire."""

    name: str
    id: str
    creation_date_time: str

    @classmethod
    def from_domain(cls, session: Session) -> "SessionPayload":
        return cls(
            name=session.name,
            id=session.id,
            creation_date_time=session.creation_date_time,
        )


class ParticipantPayload(_CamelModel):
    """Participant as rendered on the wire."""

    name: str
    id: str
    session_id: str
    creation_date_time: str

    @classmethod
    def from_domain(cls, participant: Participant) -> "ParticipantPayload":
        return cls(
            name=participant.name,
            id=participant.id,
            session_id=participant.session_id,
            creation_date_time=participant.creation_date_time,
        )


class ResultEnvelope(_CamelModel):
    """Response body; unset fields are omitted when rendered."""

    session: SessionPayload | None = None
    participant: ParticipantPayload | None = None
    participants: list[ParticipantPayload] | None = None
    errors: list[str] | None = None

    @classmethod
    def from_result(
        cls, result: SessionResult | ParticipantResult | ParticipantsResult
    ) -> "ResultEnvelope":
        """Build the response body for a registry result record."""
        envelope = cls(errors=list(result.errors) or None)
        if isinstance(result, SessionResult) and result.session is not None:
            envelope.session = SessionPayload.from_domain(result.session)
        if isinstance(result, ParticipantResult) and result.participant is not None:
            envelope.participant = ParticipantPayload.from_domain(result.participant)
        if isinstance(result, ParticipantsResult) and result.participants is not None:
            envelope.participants = [
                ParticipantPayload.from_domain(participant)
                for participant in result.participants
            ]
        return envelope

    def render(self) -> dict[str, object]:
        return self.model_dump(by_alias=True, exclude_none=True)
