"""Conector Messenger - adapter de borda para Meta Graph API.

Este módulo é o único ponto de IO para o canal Messenger.
Responsabilidades:
- Transporte HTTP plugável (httpx)
- Operações de handover, perfil, page settings, private replies e personas
- Interpretação de respostas e envelope de erro da Graph API
- Modelos de wire e catálogo de templates
"""

from .client import MessengerClient, create_messenger_client
from .errors import (
    DecodeError,
    MessengerError,
    RemoteError,
    RemoteRefusalError,
    SerializationError,
    TransportError,
    ValidationError,
    is_permanent_error,
)
from .http_base import GraphTransport
from .models import (
    DEFAULT_PROFILE_FIELDS,
    Persona,
    PersonaCreate,
    PersonaResponse,
    PrivateReplyResponse,
    Profile,
    ProfileField,
)
from .urls import build_graph_url

__all__ = [
    "DEFAULT_PROFILE_FIELDS",
    "DecodeError",
    "GraphTransport",
    "MessengerClient",
    "MessengerError",
    "Persona",
    "PersonaCreate",
    "PersonaResponse",
    "PrivateReplyResponse",
    "Profile",
    "ProfileField",
    "RemoteError",
    "RemoteRefusalError",
    "SerializationError",
    "TransportError",
    "ValidationError",
    "build_graph_url",
    "create_messenger_client",
    "is_permanent_error",
]
