"""Configurações da página (messenger_profile)."""

from __future__ import annotations

import pytest

from api.connectors.messenger.errors import RemoteError, SerializationError

from .conftest import ACCESS_TOKEN, GraphStub, StubFactory, build_client

GREETING = {"greeting": [{"locale": "default", "text": "Olá!"}]}


@pytest.mark.asyncio
async def test_update_posts_payload(stub: GraphStub) -> None:
    client = build_client(stub)

    await client.update_page_settings(ACCESS_TOKEN, GREETING)

    request = stub.last_request
    assert request.method == "POST"
    assert request.url.path == "/v3.1/me/messenger_profile"
    assert stub.last_json() == GREETING


@pytest.mark.asyncio
async def test_delete_uses_delete_method(stub: GraphStub) -> None:
    client = build_client(stub)

    await client.delete_page_settings(ACCESS_TOKEN, {"fields": ["greeting"]})

    request = stub.last_request
    assert request.method == "DELETE"
    assert request.url.path == "/v3.1/me/messenger_profile"
    assert stub.last_json() == {"fields": ["greeting"]}


@pytest.mark.asyncio
async def test_raw_json_string_is_sent_verbatim(stub: GraphStub) -> None:
    client = build_client(stub)
    raw = '{"get_started": {"payload": "START"}}'

    await client.update_page_settings(ACCESS_TOKEN, raw)

    assert stub.last_request.content == raw.encode()


@pytest.mark.asyncio
async def test_non_200_surfaces_raw_body(make_stub: StubFactory) -> None:
    """Qualquer status != 200 expõe o body cru, sem decode estruturado."""
    stub = make_stub(status_code=400, text="Invalid greeting locale")
    client = build_client(stub)

    with pytest.raises(RemoteError) as exc_info:
        await client.update_page_settings(ACCESS_TOKEN, GREETING)

    error = exc_info.value
    assert error.message == "Invalid greeting locale"
    assert error.raw_body == "Invalid greeting locale"
    assert error.status_code == 400
    assert error.operation == "update_page_settings"


@pytest.mark.asyncio
async def test_other_2xx_is_still_failure(make_stub: StubFactory) -> None:
    stub = make_stub(status_code=201, text="created?")
    client = build_client(stub)

    with pytest.raises(RemoteError):
        await client.delete_page_settings(ACCESS_TOKEN, {"fields": ["greeting"]})


@pytest.mark.asyncio
async def test_invalid_raw_json_is_serialization_error(stub: GraphStub) -> None:
    client = build_client(stub)

    with pytest.raises(SerializationError) as exc_info:
        await client.update_page_settings(ACCESS_TOKEN, "{not json")

    assert exc_info.value.operation == "update_page_settings"
    assert stub.calls == 0


@pytest.mark.asyncio
async def test_unserializable_payload_is_serialization_error(stub: GraphStub) -> None:
    client = build_client(stub)

    with pytest.raises(SerializationError) as exc_info:
        await client.update_page_settings(ACCESS_TOKEN, {"when": object()})

    assert isinstance(exc_info.value.__cause__, TypeError)
    assert stub.calls == 0
