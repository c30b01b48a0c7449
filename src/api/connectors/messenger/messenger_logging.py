"""Helpers de logging para a Graph API do Messenger (sem tokens/PII)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .errors import DecodeError, RemoteError, TransportError

logger = logging.getLogger(__name__)


def log_remote_error(remote_error: RemoteError, method: str) -> None:
    """Loga erro reportado pela Meta sem expor dados sensíveis."""
    logger.warning(
        "messenger_remote_error",
        extra={
            "operation": remote_error.operation,
            "method": method,
            "status_code": remote_error.status_code,
            "error_type": remote_error.error_type,
            "error_code": remote_error.code,
            "error_subcode": remote_error.subcode,
            "trace_id": remote_error.trace_id,
            "is_permanent": remote_error.is_permanent,
        },
    )


def log_decode_error(decode_error: DecodeError, method: str) -> None:
    """Loga resposta fora do schema esperado (body não é logado)."""
    logger.error(
        "messenger_decode_error",
        extra={
            "operation": decode_error.operation,
            "method": method,
            "status_code": decode_error.status_code,
            "body_length": len(decode_error.raw_body),
        },
    )


def log_transport_error(transport_error: TransportError, method: str, cause: str) -> None:
    """Loga falha de rede sem a URL (que carrega o access_token)."""
    logger.warning(
        "messenger_transport_error",
        extra={
            "operation": transport_error.operation,
            "method": method,
            "cause": cause,
        },
    )


def log_success(
    method: str,
    operation: str,
    status_code: int,
) -> None:
    """Loga sucesso sem expor dados sensíveis."""
    logger.debug(
        "messenger_request_ok",
        extra={
            "operation": operation,
            "method": method,
            "status_code": status_code,
        },
    )
