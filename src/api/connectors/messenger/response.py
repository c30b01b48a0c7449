"""Interpretação de respostas da Graph API.

Regra principal: status 200 => decodifica o payload tipado; qualquer
outro status => decodifica o envelope de erro da Meta e levanta
RemoteError (ou DecodeError se o envelope não for reconhecido).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from api.connectors.messenger.errors import DecodeError, RemoteError
from api.connectors.messenger.messenger_logging import (
    log_decode_error,
    log_remote_error,
    log_success,
)
from api.connectors.messenger.models import RawGraphError

if TYPE_CHECKING:
    import httpx

SUCCESS_STATUS = 200

ModelT = TypeVar("ModelT", bound=BaseModel)


def interpret_response(
    response: httpx.Response,
    model: type[ModelT],
    *,
    operation: str,
) -> ModelT:
    """Valida status e decodifica o payload de sucesso.

    Raises:
        RemoteError: Status != 200 com envelope de erro válido
        DecodeError: Body (de sucesso ou de erro) fora do schema
    """
    ensure_success(response, operation=operation)
    return decode_payload(response, model, operation=operation)


def ensure_success(response: httpx.Response, *, operation: str) -> None:
    """Levanta o erro semântico se o status não for 200."""
    method = response.request.method
    if response.status_code == SUCCESS_STATUS:
        log_success(method, operation, response.status_code)
        return

    raw_body = response.text
    try:
        envelope = RawGraphError.model_validate_json(response.content)
    except PydanticValidationError as exc:
        error = DecodeError(
            f"{operation}: unrecognized error body (status {response.status_code})",
            operation=operation,
            raw_body=raw_body,
            status_code=response.status_code,
        )
        log_decode_error(error, method)
        raise error from exc

    graph_error = envelope.error
    remote_error = RemoteError(
        graph_error.message,
        operation=operation,
        status_code=response.status_code,
        code=graph_error.code,
        subcode=graph_error.error_subcode,
        error_type=graph_error.type,
        trace_id=graph_error.fbtrace_id,
        raw_body=raw_body,
    )
    log_remote_error(remote_error, method)
    raise remote_error


def ensure_exact_ok(response: httpx.Response, *, operation: str) -> None:
    """Variante sem decode estruturado: status != 200 expõe o body cru.

    Usada pelo endpoint messenger_profile, que nem sempre devolve o
    envelope de erro padrão.
    """
    method = response.request.method
    if response.status_code == SUCCESS_STATUS:
        log_success(method, operation, response.status_code)
        return

    raw_body = response.text
    remote_error = RemoteError(
        raw_body,
        operation=operation,
        status_code=response.status_code,
        raw_body=raw_body,
    )
    log_remote_error(remote_error, method)
    raise remote_error


def decode_payload(
    response: httpx.Response,
    model: type[ModelT],
    *,
    operation: str,
) -> ModelT:
    """Decodifica o body de sucesso no modelo esperado."""
    try:
        return model.model_validate_json(response.content)
    except PydanticValidationError as exc:
        error = DecodeError(
            f"{operation}: response does not match {model.__name__}",
            operation=operation,
            raw_body=response.text,
            status_code=response.status_code,
        )
        log_decode_error(error, response.request.method)
        raise error from exc
