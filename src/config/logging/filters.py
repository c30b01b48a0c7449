"""Filters de logging para injeção de contexto e redação de segredos.

Campos injetados:
- correlation_id: ID de rastreamento da chamada
- service: Nome do serviço

O access_token da Graph API viaja na query string; qualquer URL logada
(inclusive pelo próprio httpx) passa pelo AccessTokenRedactionFilter.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

REDACTED = "***"

_ACCESS_TOKEN_PATTERN = re.compile(r"(access_token=)[^&\s\"'#]+")


def redact_access_token(text: str) -> str:
    """Mascara valores de `access_token=` em URLs/textos."""
    return _ACCESS_TOKEN_PATTERN.sub(rf"\g<1>{REDACTED}", text)


class CorrelationIdFilter(logging.Filter):
    """Injeta correlation_id e service em cada record de log.

    Args:
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função que retorna o correlation_id atual.
            Se não fornecida, usa string vazia como fallback.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        """Adiciona correlation_id e service ao record.

        Se correlation_id já foi passado via `extra`, preserva o valor.
        """
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing if existing else self._get_correlation_id()
        record.service = self._service_name
        return True


class AccessTokenRedactionFilter(logging.Filter):
    """Remove access_token da mensagem final do record.

    Não filtra records, apenas reescreve msg/args quando há token.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        redacted = redact_access_token(message)
        if redacted != message:
            record.msg = redacted
            record.args = None
        return True
