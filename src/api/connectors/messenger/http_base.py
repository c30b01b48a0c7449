"""Adapter de transporte HTTP para a Graph API.

Único ponto de IO do conector. Não faz retries: falhas de rede viram
TransportError e são reportadas uma única vez ao chamador.
"""

from __future__ import annotations

import logging

import httpx

from api.connectors.messenger.errors import TransportError
from api.connectors.messenger.messenger_logging import log_transport_error

logger = logging.getLogger(__name__)

JSON_HEADERS = {"Content-Type": "application/json"}


class GraphTransport:
    """Executa requisições com um httpx.AsyncClient plugável.

    Sem cliente injetado, abre um cliente de vida curta por chamada com
    o timeout configurado. Timeout/cancelamento ficam a cargo do cliente.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient | None = None,
        timeout_seconds: float = 30.0,
    ) -> None:
        self._http_client = http_client
        self._timeout_seconds = timeout_seconds

    @property
    def http_client(self) -> httpx.AsyncClient | None:
        return self._http_client

    def set_http_client(self, http_client: httpx.AsyncClient | None) -> None:
        """Troca o cliente HTTP. Deve ocorrer antes do uso concorrente."""
        self._http_client = http_client

    async def send(
        self,
        method: str,
        url: str,
        *,
        operation: str,
        body: bytes | None = None,
    ) -> httpx.Response:
        """Envia a requisição e retorna a resposta já lida por completo.

        Raises:
            TransportError: DNS, conexão, timeout, URL mal-formada,
                redirects em excesso ou body comprimido corrompido
        """
        try:
            if self._http_client is not None:
                return await self._request(self._http_client, method, url, body)
            async with httpx.AsyncClient(timeout=self._timeout_seconds) as client:
                return await self._request(client, method, url, body)
        except (httpx.RequestError, httpx.InvalidURL) as exc:
            cause = type(exc).__name__
            error = TransportError(f"{operation}: {cause}", operation=operation)
            log_transport_error(error, method, cause)
            raise error from exc

    @staticmethod
    async def _request(
        client: httpx.AsyncClient,
        method: str,
        url: str,
        body: bytes | None,
    ) -> httpx.Response:
        # Sem stream: o body é lido e a conexão devolvida ao pool antes do retorno
        return await client.request(method, url, content=body, headers=JSON_HEADERS)
