"""Session and participant endpoints."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request, status

from blackbird.api.models import NameBody, ResultEnvelope
from blackbird.api.responses import Utf8JSONResponse
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
from blackbird.services.registry import SessionRegistry  # noqa: TC001

if TYPE_CHECKING:
    from blackbird.containers import AppContainer

_logger = logging.getLogger(__name__)

router = APIRouter(prefix="/{version}/sessions", tags=["sessions"])


def _get_registry(request: Request) -> SessionRegistry:
    container: AppContainer = request.app.state.container
    return container.registry


def request_message(request: Request, message: str) -> str:
    """Prefix a log message with the request path and method."""
    return f"{request.url.path} {request.method}: {message}"


def _respond(
    request: Request,
    result: SessionResult | ParticipantResult | ParticipantsResult,
    success_status: int = status.HTTP_200_OK,
    missing: str | None = None,
) -> Utf8JSONResponse:
    """Map a registry result to a response.

    ``missing`` is the debug message logged when the result carries no
    entity; it is only given for operations where that means not found.
    """
    if result.errors:
        _logger.warning(request_message(request, f"bad request: {result.errors}"))
        return Utf8JSONResponse(
            ResultEnvelope.from_result(result).render(),
            status_code=status.HTTP_400_BAD_REQUEST,
        )
    if missing is not None and _is_empty(result):
        _logger.debug(request_message(request, missing))
        return Utf8JSONResponse({}, status_code=status.HTTP_404_NOT_FOUND)
    return Utf8JSONResponse(
        ResultEnvelope.from_result(result).render(), status_code=success_status
    )


def _is_empty(result: SessionResult | ParticipantResult | ParticipantsResult) -> bool:
    if isinstance(result, SessionResult):
        return result.session is None
    if isinstance(result, ParticipantResult):
        return result.participant is None
    return result.participants is None


@router.api_route("", methods=["POST", "PUT"])
def create_session(
    body: NameBody,
    request: Request,
    registry: SessionRegistry = Depends(_get_registry),
) -> Utf8JSONResponse:
    """Create a live view session."""
    result = registry.create_session(CreateSessionParams(name=body.name))
    return _respond(request, result, success_status=status.HTTP_201_CREATED)


@router.get("/{session_id}")
def get_session(
    session_id: str,
    request: Request,
    registry: SessionRegistry = Depends(_get_registry),
) -> Utf8JSONResponse:
    """Return a live view session."""
    result = registry.get_session(GetSessionParams(id=session_id))
    return _respond(request, result, missing=f"no such session: {session_id}")


@router.delete("/{session_id}")
def delete_session(
    session_id: str,
    request: Request,
    registry: SessionRegistry = Depends(_get_registry),
) -> Utf8JSONResponse:
    """Delete a live view session and its participants."""
    result = registry.delete_session(DeleteSessionParams(id=session_id))
    return _respond(request, result, missing=f"no such session: {session_id}")


@router.get("/{session_id}/participants")
def get_participants(
    session_id: str,
    request: Request,
    registry: SessionRegistry = Depends(_get_registry),
) -> Utf8JSONResponse:
    """List the participants of a session."""
    result = registry.get_participants(GetParticipantsParams(session_id=session_id))
    return _respond(request, result)


@router.api_route("/{session_id}/participants", methods=["POST", "PUT"])
def add_participant(
    session_id: str,
    body: NameBody,
    request: Request,
    registry: SessionRegistry = Depends(_get_registry),
) -> Utf8JSONResponse:
    """Add a participant to a session."""
    result = registry.add_participant(
        AddParticipantParams(session_id=session_id, name=body.name)
    )
    return _respond(request, result, success_status=status.HTTP_201_CREATED)


@router.get("/{session_id}/participants/{participant_id}")
def get_participant(
    session_id: str,
    participant_id: str,
    request: Request,
    registry: SessionRegistry = Depends(_get_registry),
) -> Utf8JSONResponse:
    """Return a participant of a session."""
    result = registry.get_participant(
        GetParticipantParams(session_id=session_id, participant_id=participant_id)
    )
    return _respond(
        request,
        result,
        missing=f"no such participant {participant_id!r} in session {session_id!r}",
    )


@router.api_route(
    "/{session_id}/participants/{participant_id}", methods=["POST", "PUT"]
)
def update_participant(
    session_id: str,
    participant_id: str,
    body: NameBody,
    request: Request,
    registry: SessionRegistry = Depends(_get_registry),
) -> Utf8JSONResponse:
    """Rename a participant of a session."""
    result = registry.update_participant(
        UpdateParticipantParams(
            session_id=session_id, participant_id=participant_id, name=body.name
        )
    )
    return _respond(
        request,
        result,
        missing=f"no such participant {participant_id!r} in session {session_id!r}",
    )


@router.delete("/{session_id}/participants/{participant_id}")
def delete_participant(
    session_id: str,
    participant_id: str,
    request: Request,
    registry: SessionRegistry = Depends(_get_registry),
) -> Utf8JSONResponse:
    """Remove a participant from a session."""
    result = registry.delete_participant(
        DeleteParticipantParams(session_id=session_id, participant_id=participant_id)
    )
    return _respond(
        request,
        result,
        missing=f"no such participant {participant_id!r} in session {session_id!r}",
    )
