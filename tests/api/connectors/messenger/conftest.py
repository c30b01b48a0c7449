"""Fixtures do conector Messenger: stub de Graph API sobre httpx.MockTransport."""

from __future__ import annotations

import json
from collections.abc import AsyncIterator, Callable
from typing import Any

import httpx
import pytest_asyncio

from api.connectors.messenger.client import MessengerClient
from config.settings import MessengerSettings

ACCESS_TOKEN = "page-token"


class GraphStub:
    """Responde sempre o mesmo status/body e registra as requisições."""

    def __init__(
        self,
        status_code: int = 200,
        json_body: Any = None,
        text: str | None = None,
    ) -> None:
        self.status_code = status_code
        self.json_body = json_body if json_body is not None else {"success": True}
        self.text = text
        self.requests: list[httpx.Request] = []
        self._clients: list[httpx.AsyncClient] = []

    @property
    def calls(self) -> int:
        return len(self.requests)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last_request.content)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        return httpx.Response(self.status_code, json=self.json_body)

    def http_client(self) -> httpx.AsyncClient:
        client = httpx.AsyncClient(transport=httpx.MockTransport(self.handler))
        self._clients.append(client)
        return client

    async def aclose(self) -> None:
        """Fecha os clientes httpx abertos por este stub."""
        for client in self._clients:
            await client.aclose()
        self._clients.clear()


StubFactory = Callable[..., GraphStub]


def build_client(
    stub: GraphStub,
    settings: MessengerSettings | None = None,
) -> MessengerClient:
    return MessengerClient(settings or MessengerSettings(), http_client=stub.http_client())


@pytest_asyncio.fixture
async def stub() -> AsyncIterator[GraphStub]:
    graph_stub = GraphStub()
    yield graph_stub
    await graph_stub.aclose()


@pytest_asyncio.fixture
async def make_stub() -> AsyncIterator[StubFactory]:
    """Fábrica de stubs com status/body próprios, fechados no teardown."""
    created: list[GraphStub] = []

    def factory(**kwargs: Any) -> GraphStub:
        graph_stub = GraphStub(**kwargs)
        created.append(graph_stub)
        return graph_stub

    yield factory
    for graph_stub in created:
        await graph_stub.aclose()
