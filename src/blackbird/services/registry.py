"""Concurrency-safe registry of live view sessions and their participants."""

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from datetime import datetime, timedelta

from blackbird.domain.operations import (
    AddParticipantParams,
    CreateSessionParams,
    DeleteParticipantParams,
    DeleteSessionParams,
    GetParticipantParams,
    GetParticipantsParams,
    GetSessionParams,
    ParticipantResult,
    ParticipantsResult,
    SessionResult,
    UpdateParticipantParams,
)
from blackbird.domain.sessions import Participant, Session
from blackbird.services.identifiers import format_timestamp, generate_id, utc_now

_logger = logging.getLogger(__name__)

_CLOCK_STEP = timedelta(microseconds=1)


@dataclass
class _RegisteredSession:
    session: Session
    participants: dict[str, Participant] = field(default_factory=dict)


@dataclass
class SessionRegistry:
    """In-memory directory of sessions and participants.

    A single lock serializes every operation, so a session can never be
    deleted while one of its participants is being added, renamed or removed.
    Expected failures (validation errors, unknown sessions) are returned in
    the result records; only unexpected conditions raise.
    """

    id_factory: Callable[[], str] = generate_id
    clock: Callable[[], datetime] = utc_now
    _sessions: dict[str, _RegisteredSession] = field(
        default_factory=dict, init=False, repr=False
    )
    _lock: threading.Lock = field(
        default_factory=threading.Lock, init=False, repr=False
    )
    _last_moment: datetime | None = field(default=None, init=False, repr=False)

    def create_session(self, params: CreateSessionParams) -> SessionResult:
        """Register a new session with a fresh id and creation timestamp."""
        errors = params.check()
        if errors:
            return SessionResult(errors=errors)
        with self._lock:
            session = Session(
                name=params.name,
                id=self._unique_id(self._sessions),
                creation_date_time=self._timestamp(),
            )
            self._sessions[session.id] = _RegisteredSession(session)
        _logger.debug("Created session %s", session.id)
        return SessionResult(session=session)

    def get_session(self, params: GetSessionParams) -> SessionResult:
        """Return the session with the given id, if registered."""
        errors = params.check()
        if errors:
            return SessionResult(errors=errors)
        with self._lock:
            registered = self._sessions.get(params.id)
        if registered is None:
            return SessionResult()
        return SessionResult(session=registered.session)

    def delete_session(self, params: DeleteSessionParams) -> SessionResult:
        """Remove a session together with all of its participants."""
        errors = params.check()
        if errors:
            return SessionResult(errors=errors)
        with self._lock:
            registered = self._sessions.pop(params.id, None)
        if registered is None:
            return SessionResult()
        _logger.debug(
            "Deleted session %s with %s participants",
            params.id,
            len(registered.participants),
        )
        return SessionResult(session=registered.session)

    def add_participant(self, params: AddParticipantParams) -> ParticipantResult:
        """Attach a new participant to an existing session."""
        errors = params.check()
        if errors:
            return ParticipantResult(errors=errors)
        with self._lock:
            registered = self._sessions.get(params.session_id)
            if registered is None:
                return ParticipantResult(errors=[_missing_session(params.session_id)])
            participant = Participant(
                name=params.name,
                id=self._unique_id(registered.participants),
                session_id=params.session_id,
                creation_date_time=self._timestamp(),
            )
            registered.participants[participant.id] = participant
        return ParticipantResult(participant=participant)

    def get_participant(self, params: GetParticipantParams) -> ParticipantResult:
        """Return a participant of an existing session, if present."""
        errors = params.check()
        if errors:
            return ParticipantResult(errors=errors)
        with self._lock:
            registered = self._sessions.get(params.session_id)
            if registered is None:
                return ParticipantResult(errors=[_missing_session(params.session_id)])
            participant = registered.participants.get(params.participant_id)
        return ParticipantResult(participant=participant)

    def update_participant(
        self, params: UpdateParticipantParams
    ) -> ParticipantResult:
        """Rename a participant.

        A participant that does not exist under an existing session yields an
        empty result rather than an error.
        """
        errors = params.check()
        if errors:
            return ParticipantResult(errors=errors)
        with self._lock:
            registered = self._sessions.get(params.session_id)
            if registered is None:
                return ParticipantResult(errors=[_missing_session(params.session_id)])
            current = registered.participants.get(params.participant_id)
            if current is None:
                return ParticipantResult()
            updated = replace(current, name=params.name)
            registered.participants[updated.id] = updated
        return ParticipantResult(participant=updated)

    def delete_participant(
        self, params: DeleteParticipantParams
    ) -> ParticipantResult:
        """Remove a participant from an existing session."""
        errors = params.check()
        if errors:
            return ParticipantResult(errors=errors)
        with self._lock:
            registered = self._sessions.get(params.session_id)
            if registered is None:
                return ParticipantResult(errors=[_missing_session(params.session_id)])
            participant = registered.participants.pop(params.participant_id, None)
        return ParticipantResult(participant=participant)

    def get_participants(self, params: GetParticipantsParams) -> ParticipantsResult:
        """Return all participants of an existing session in no particular order."""
        errors = params.check()
        if errors:
            return ParticipantsResult(errors=errors)
        with self._lock:
            registered = self._sessions.get(params.session_id)
            if registered is None:
                return ParticipantsResult(errors=[_missing_session(params.session_id)])
            participants = list(registered.participants.values())
        return ParticipantsResult(participants=participants)

    def _unique_id(self, taken: dict[str, object]) -> str:
        # Caller holds the lock.
        candidate = self.id_factory()
        while candidate in taken:
            _logger.warning("Generated id %s collides, regenerating", candidate)
            candidate = self.id_factory()
        return candidate

    def _timestamp(self) -> str:
        # Caller holds the lock; timestamps never move backwards.
        moment = self.clock()
        if self._last_moment is not None and moment <= self._last_moment:
            moment = self._last_moment + _CLOCK_STEP
        self._last_moment = moment
        return format_timestamp(moment)


def _missing_session(session_id: str) -> str:
    return f"session {session_id} does not exist"
