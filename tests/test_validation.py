"""Tests for parameter validation."""

import pytest

from blackbird.domain.operations import (
    AddParticipantParams,
    CreateSessionParams,
    GetParticipantParams,
    GetSessionParams,
    UpdateParticipantParams,
)
from blackbird.domain.validation import is_id, is_not_blank


@pytest.mark.parametrize(
    "value", ["a1b2c3d4e5", "ABCDEFGHIJ", "0123456789", "ab=+-cd0Z9"]
)
def test_is_id_accepts_well_formed_ids(value: str) -> None:
    assert is_id("id", value) is None


@pytest.mark.parametrize(
    "value", ["", "short", "a1b2c3d4e5f", "a1b2c3d4e!", "a1b2 3d4e5", "a1b2c3d4é5"]
)
def test_is_id_rejects_malformed_ids(value: str) -> None:
    assert is_id("sessionId", value) == "sessionId must be a valid id"


def test_is_not_blank_rejects_whitespace() -> None:
    assert is_not_blank("name", " \t\n") == "name must not be blank"
    assert is_not_blank("name", "") == "name must not be blank"
    assert is_not_blank("name", " alice ") is None


def test_create_session_params_check() -> None:
    assert CreateSessionParams(name="standup").check() == []
    assert CreateSessionParams(name="   ").check() == ["name must not be blank"]


def test_get_session_params_check() -> None:
    assert GetSessionParams(id="x").check() == ["id must be a valid id"]


def test_checks_collect_every_failing_field() -> None:
    errors = UpdateParticipantParams(
        session_id="bad", participant_id="also bad", name=" "
    ).check()

    assert errors == [
        "sessionId must be a valid id",
        "participantId must be a valid id",
        "name must not be blank",
    ]


def test_add_participant_params_check_reports_both_fields() -> None:
    errors = AddParticipantParams(session_id="", name="").check()

    assert errors == ["sessionId must be a valid id", "name must not be blank"]


def test_get_participant_params_check_passes_for_valid_ids() -> None:
    params = GetParticipantParams(session_id="a1b2c3d4e5", participant_id="f6a7b8c9d0")

    assert params.check() == []
