"""Settings específicas do Messenger.

Configurações do canal Facebook Messenger via Graph API (Meta).
Objeto imutável passado explicitamente ao MessengerClient; não há
variáveis globais mutáveis de host/versão.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from enum import Enum
from functools import lru_cache

# Constantes da Graph API para Messenger
GRAPH_API_VERSION: str = "v3.1"
GRAPH_API_BASE_URL: str = "https://graph.facebook.com"


class DebugType(str, Enum):
    """Níveis de debug aceitos pela Graph API (query param `debug`)."""

    ALL = "all"
    INFO = "info"
    WARNING = "warning"


@dataclass(frozen=True)
class MessengerSettings:
    """Configurações do canal Messenger.

    Attributes:
        api_version: Versão da Graph API (ex: v3.1)
        api_base_url: URL base da Graph API
        request_timeout_seconds: Timeout do cliente HTTP criado internamente
        debug: Nível de debug opcional enviado em toda requisição
    """

    # API
    api_version: str = GRAPH_API_VERSION
    api_base_url: str = GRAPH_API_BASE_URL

    # Timeouts (sem retries: falhas são reportadas uma única vez)
    request_timeout_seconds: float = 30.0

    debug: DebugType | None = None

    @property
    def api_endpoint(self) -> str:
        """URL base completa da API com versão."""
        return f"{self.api_base_url.rstrip('/')}/{self.api_version}"

    def with_api_version(self, api_version: str) -> MessengerSettings:
        """Retorna cópia com outra versão da Graph API."""
        return replace(self, api_version=api_version)

    def validate(self) -> list[str]:
        """Valida configurações mínimas do Messenger.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.api_base_url:
            errors.append("MESSENGER_API_BASE_URL não configurado")
        elif not self.api_base_url.startswith(("http://", "https://")):
            errors.append("MESSENGER_API_BASE_URL deve começar com http:// ou https://")

        if not self.api_version:
            errors.append("MESSENGER_API_VERSION não configurado")

        if self.request_timeout_seconds <= 0:
            errors.append("MESSENGER_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _parse_debug(raw: str) -> DebugType | None:
    if not raw:
        return None
    return DebugType(raw.lower())


def _load_from_env() -> MessengerSettings:
    """Carrega MessengerSettings de variáveis de ambiente."""
    return MessengerSettings(
        api_version=os.getenv("MESSENGER_API_VERSION", GRAPH_API_VERSION),
        api_base_url=os.getenv("MESSENGER_API_BASE_URL", GRAPH_API_BASE_URL),
        request_timeout_seconds=float(
            os.getenv("MESSENGER_REQUEST_TIMEOUT_SECONDS", "30")
        ),
        debug=_parse_debug(os.getenv("MESSENGER_DEBUG", "")),
    )


@lru_cache(maxsize=1)
def get_messenger_settings() -> MessengerSettings:
    """Retorna instância cacheada de MessengerSettings.

    A cache garante singleton para múltiplas injeções.
    """
    return _load_from_env()
