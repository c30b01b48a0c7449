"""Validação local: inputs obrigatórios falham sem nenhuma chamada HTTP."""

from __future__ import annotations

from typing import Any

import pytest

from api.connectors.messenger.errors import ValidationError

from .conftest import ACCESS_TOKEN, GraphStub, build_client

CASES: list[tuple[str, dict[str, Any], str]] = [
    (
        "pass_thread_control",
        {"target_app_id": 0, "recipient": "999", "metadata": "m", "access_token": ACCESS_TOKEN},
        "target_app_id",
    ),
    (
        "pass_thread_control",
        {"target_app_id": 123, "recipient": "", "metadata": "m", "access_token": ACCESS_TOKEN},
        "recipient",
    ),
    (
        "pass_thread_control",
        {"target_app_id": 123, "recipient": "999", "metadata": "m", "access_token": ""},
        "access_token",
    ),
    (
        "take_thread_control",
        {"recipient": "  ", "metadata": "m", "access_token": ACCESS_TOKEN},
        "recipient",
    ),
    (
        "take_thread_control",
        {"recipient": "999", "metadata": "m", "access_token": ""},
        "access_token",
    ),
    ("get_profile", {"user_id": "", "access_token": ACCESS_TOKEN}, "user_id"),
    ("get_profile", {"user_id": "42", "access_token": ""}, "access_token"),
    ("get_profile", {"user_id": "42", "access_token": ACCESS_TOKEN, "fields": ["email"]}, "fields"),
    ("update_page_settings", {"access_token": "", "payload": {"greeting": []}}, "access_token"),
    ("update_page_settings", {"access_token": ACCESS_TOKEN, "payload": None}, "payload"),
    ("delete_page_settings", {"access_token": "", "payload": {"fields": ["greeting"]}}, "access_token"),
    ("send_private_reply", {"object_id": "", "access_token": ACCESS_TOKEN, "message": "oi"}, "object_id"),
    ("send_private_reply", {"object_id": "post_1", "access_token": "", "message": "oi"}, "access_token"),
    ("create_persona", {"access_token": "", "payload": {"name": "Ana"}}, "access_token"),
    ("create_persona", {"access_token": ACCESS_TOKEN, "payload": None}, "payload"),
    ("get_persona", {"access_token": ACCESS_TOKEN, "persona_id": ""}, "persona_id"),
    ("get_persona", {"access_token": "", "persona_id": "p1"}, "access_token"),
    ("list_personas", {"access_token": ""}, "access_token"),
    ("delete_persona", {"access_token": ACCESS_TOKEN, "persona_id": ""}, "persona_id"),
    ("delete_persona", {"access_token": "", "persona_id": "p1"}, "access_token"),
    ("get_profile", {"user_id": 42, "access_token": ACCESS_TOKEN}, "user_id"),
    ("get_persona", {"access_token": ACCESS_TOKEN, "persona_id": 1234}, "persona_id"),
    ("take_thread_control", {"recipient": None, "metadata": "m", "access_token": ACCESS_TOKEN}, "recipient"),
]


@pytest.mark.asyncio
@pytest.mark.parametrize(("operation", "kwargs", "field"), CASES)
async def test_missing_required_input_raises_without_io(
    stub: GraphStub,
    operation: str,
    kwargs: dict[str, Any],
    field: str,
) -> None:
    client = build_client(stub)

    with pytest.raises(ValidationError) as exc_info:
        await getattr(client, operation)(**kwargs)

    assert exc_info.value.field == field
    assert exc_info.value.operation == operation
    assert field in str(exc_info.value)
    assert stub.calls == 0


def test_validation_error_is_value_error() -> None:
    error = ValidationError("recipient", operation="take_thread_control")
    assert isinstance(error, ValueError)


@pytest.mark.asyncio
async def test_empty_private_reply_message_is_passed_through(stub: GraphStub) -> None:
    stub.json_body = {"id": "m_1", "user_id": "u_1"}
    client = build_client(stub)

    await client.send_private_reply("post_1", ACCESS_TOKEN, "")

    assert stub.calls == 1
    assert stub.last_json() == {"message": ""}


@pytest.mark.asyncio
async def test_non_string_identifier_is_validation_error(stub: GraphStub) -> None:
    client = build_client(stub)

    with pytest.raises(ValidationError) as exc_info:
        await client.get_profile(42, ACCESS_TOKEN)  # type: ignore[arg-type]

    assert "must be a string" in str(exc_info.value)
    assert stub.calls == 0
