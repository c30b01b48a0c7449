"""Formatter JSON dos logs do conector.

Campos obrigatórios em todo record: asctime, level, logger, message,
correlation_id e service. Campos de `extra` (operation, status_code,
trace_id...) são anexados pelo python-json-logger.
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

REQUIRED_LOG_FIELDS: tuple[str, ...] = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

# Nomes de campos no JSON final
FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados.

    Exemplo de output:
        {
            "asctime": "2026-02-02T10:30:00",
            "level": "WARNING",
            "logger": "api.connectors.messenger.messenger_logging",
            "message": "messenger_remote_error",
            "correlation_id": "abc-123",
            "service": "messenger_connector",
            "operation": "get_profile",
            "trace_id": "AbCdEf"
        }
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)

    return JsonFormatter(
        format_string,
        rename_fields=FIELD_RENAME_MAP,
    )
