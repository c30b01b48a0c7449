"""Erros do conector Messenger e helpers de classificação.

Toda falha de uma operação é levantada como subclasse de MessengerError,
carregando o nome da operação para log sem precisar de stack trace.
"""

from __future__ import annotations


class MessengerError(Exception):
    """Base para erros do conector Messenger."""

    def __init__(self, message: str, *, operation: str) -> None:
        super().__init__(message)
        self.operation = operation


class ValidationError(MessengerError, ValueError):
    """Input do chamador viola pré-condição; nenhum IO foi feito."""

    def __init__(self, field: str, *, operation: str, reason: str = "is empty") -> None:
        super().__init__(f"{operation}: {field} {reason}", operation=operation)
        self.field = field


class SerializationError(MessengerError):
    """Payload local não pôde ser codificado em JSON."""


class TransportError(MessengerError):
    """Falha de rede/conexão/timeout antes de obter resposta."""


class DecodeError(MessengerError):
    """Body da resposta não corresponde ao formato esperado."""

    def __init__(
        self,
        message: str,
        *,
        operation: str,
        raw_body: str,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message, operation=operation)
        self.raw_body = raw_body
        self.status_code = status_code


class RemoteError(MessengerError):
    """Erro reportado explicitamente pela Graph API.

    O trace_id (fbtrace_id) deve ser preservado para escalonamento
    ao suporte da Meta.
    """

    def __init__(
        self,
        message: str,
        *,
        operation: str,
        status_code: int,
        code: int = 0,
        subcode: int = 0,
        error_type: str = "",
        trace_id: str = "",
        raw_body: str = "",
    ) -> None:
        super().__init__(message, operation=operation)
        self.message = message
        self.status_code = status_code
        self.code = code
        self.subcode = subcode
        self.error_type = error_type
        self.trace_id = trace_id
        self.raw_body = raw_body

    @property
    def is_permanent(self) -> bool:
        """True se o erro não deve ser retentado pelo chamador."""
        return is_permanent_error(self.code or self.status_code, self.error_type)

    def __str__(self) -> str:
        return f"{self.operation}: [{self.code}] {self.message}"


class RemoteRefusalError(MessengerError):
    """HTTP 200, mas o body indica que a operação não teve efeito."""

    def __init__(self, persona_id: str, *, operation: str) -> None:
        super().__init__(
            f"{operation}: remote did not confirm deletion of persona {persona_id}",
            operation=operation,
        )
        self.persona_id = persona_id


def is_permanent_error(error_code: int, error_type: str) -> bool:
    """Classifica erro como permanente ou transitório.

    Erros permanentes: 400, 401, 403, 404, 413, OAuth (190)
    Erros transitórios: 429 (rate limit), 500+ (server errors), throttling (4, 17, 32, 613)
    """
    transient_codes = {4, 17, 32, 613}
    if error_code in transient_codes:
        return False

    permanent_codes = {190, 400, 401, 403, 404, 413}
    if error_code in permanent_codes:
        return True

    permanent_types = {"OAuthException", "InvalidRequest", "GraphMethodException"}
    return error_type in permanent_types
