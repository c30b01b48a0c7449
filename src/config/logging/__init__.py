"""Configuração de logging estruturado.

Uso:
    from config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="messenger_connector")
    logger = get_logger(__name__)

Campos obrigatórios em todo log:
- correlation_id
- service
- level
- logger
- message
- asctime

Logs nunca contêm access_token nem payloads de mensagens.
"""

from config.logging.config import configure_logging, get_logger
from config.logging.filters import (
    AccessTokenRedactionFilter,
    CorrelationIdFilter,
    redact_access_token,
)
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    # Filters
    "AccessTokenRedactionFilter",
    "CorrelationIdFilter",
    # Configuração principal
    "configure_logging",
    # Formatters
    "create_json_formatter",
    "get_logger",
    "redact_access_token",
]
