"""Cliente da Graph API para o Messenger Platform.

Ponto único de mediação request/response para:
- Handover protocol (pass/take thread control)
- Perfil do usuário
- Configurações da página (messenger_profile)
- Private replies
- CRUD de personas

Cada operação segue três fases:
1. Validação local (ValidationError, sem IO)
2. Montagem de URL e body JSON (SerializationError)
3. Envio via GraphTransport e interpretação da resposta
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, NoReturn

from pydantic import BaseModel

from api.connectors.messenger.errors import (
    RemoteRefusalError,
    SerializationError,
    ValidationError,
)
from api.connectors.messenger.http_base import GraphTransport
from api.connectors.messenger.models import (
    DEFAULT_PROFILE_FIELDS,
    MESSENGER_PROFILE_PATH,
    PASS_THREAD_CONTROL_PATH,
    PERSONAS_PATH,
    PRIVATE_REPLIES_PATH,
    TAKE_THREAD_CONTROL_PATH,
    DeletePersonaResponse,
    ListOfPersonaResponse,
    PassThreadControl,
    Persona,
    PersonaResponse,
    PrivateReply,
    PrivateReplyResponse,
    Profile,
    ProfileField,
    Recipient,
    TakeThreadControl,
)
from api.connectors.messenger.response import (
    ensure_exact_ok,
    ensure_success,
    interpret_response,
)
from api.connectors.messenger.urls import build_graph_url

if TYPE_CHECKING:
    from collections.abc import Sequence

    import httpx

    from config.settings import MessengerSettings

logger: logging.Logger = logging.getLogger(__name__)

# Payload JSON já montado pelo chamador (dict, modelo pydantic ou JSON cru)
RawPayload = Mapping[str, Any] | BaseModel | str | bytes

ME = "me"


class MessengerClient:
    """Mediador das operações da Graph API do Messenger.

    O access_token é recebido por chamada e nunca armazenado.
    Cliente HTTP e versão da API são estado de dono único: configurar
    antes do primeiro uso, nunca durante chamadas concorrentes.
    """

    def __init__(
        self,
        settings: MessengerSettings,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Inicializa o cliente.

        Args:
            settings: Host, versão, timeout e debug da Graph API
            http_client: Cliente httpx plugável (None = cliente por chamada)
        """
        self._settings = settings
        self._transport = GraphTransport(
            http_client,
            timeout_seconds=settings.request_timeout_seconds,
        )

    @property
    def settings(self) -> MessengerSettings:
        return self._settings

    @property
    def api_version(self) -> str:
        return self._settings.api_version

    def set_http_client(self, http_client: httpx.AsyncClient | None) -> None:
        """Troca o cliente HTTP usado pelo transporte."""
        self._transport.set_http_client(http_client)

    def set_api_version(self, api_version: str) -> None:
        """Troca a versão da Graph API usada nas próximas chamadas."""
        if not api_version or not api_version.strip():
            raise ValidationError("api_version", operation="set_api_version")
        self._settings = self._settings.with_api_version(api_version)

    async def pass_thread_control(
        self,
        target_app_id: int,
        recipient: str,
        metadata: str,
        access_token: str,
    ) -> None:
        """Passa o controle da conversa para o app `target_app_id`.

        Raises:
            ValidationError: target_app_id == 0, recipient ou token vazios
            TransportError, RemoteError, DecodeError
        """
        operation = "pass_thread_control"
        if target_app_id == 0:
            _reject("target_app_id", operation, reason="is 0")
        _require(recipient, "recipient", operation)
        _require(access_token, "access_token", operation)

        data = PassThreadControl(
            recipient=Recipient(id=recipient),
            target_app_id=target_app_id,
            metadata=metadata or "",
        )
        response = await self._send(
            "POST",
            self._url(ME, PASS_THREAD_CONTROL_PATH, access_token=access_token),
            operation=operation,
            body=_encode(data, operation),
        )
        ensure_success(response, operation=operation)

    async def take_thread_control(
        self,
        recipient: str,
        metadata: str,
        access_token: str,
    ) -> None:
        """Retoma o controle da conversa para o app primário."""
        operation = "take_thread_control"
        _require(recipient, "recipient", operation)
        _require(access_token, "access_token", operation)

        data = TakeThreadControl(recipient=Recipient(id=recipient), metadata=metadata or "")
        response = await self._send(
            "POST",
            self._url(ME, TAKE_THREAD_CONTROL_PATH, access_token=access_token),
            operation=operation,
            body=_encode(data, operation),
        )
        ensure_success(response, operation=operation)

    async def get_profile(
        self,
        user_id: str,
        access_token: str,
        fields: Sequence[ProfileField | str] | None = None,
        api_base_url: str | None = None,
    ) -> Profile:
        """Busca o perfil do usuário.

        Args:
            user_id: PSID do usuário
            access_token: Page access token
            fields: Campos na ordem desejada. Vazio/None usa
                name, first_name, last_name, profile_pic
            api_base_url: Substitui host+versão apenas nesta chamada
        """
        operation = "get_profile"
        _require(user_id, "user_id", operation)
        _require(access_token, "access_token", operation)

        url = build_graph_url(
            api_base_url or self._settings.api_endpoint,
            user_id,
            query=self._query(access_token, fields=_join_profile_fields(fields, operation)),
        )
        response = await self._send("GET", url, operation=operation)
        return interpret_response(response, Profile, operation=operation)

    async def update_page_settings(self, access_token: str, payload: RawPayload) -> None:
        """Atualiza configurações da página (get started, menu, greeting...)."""
        await self._page_settings_request("POST", "update_page_settings", access_token, payload)

    async def delete_page_settings(self, access_token: str, payload: RawPayload) -> None:
        """Remove configurações da página listadas em `payload`."""
        await self._page_settings_request("DELETE", "delete_page_settings", access_token, payload)

    async def _page_settings_request(
        self,
        method: str,
        operation: str,
        access_token: str,
        payload: RawPayload,
    ) -> None:
        _require(access_token, "access_token", operation)
        if payload is None:
            _reject("payload", operation, reason="is missing")

        response = await self._send(
            method,
            self._url(ME, MESSENGER_PROFILE_PATH, access_token=access_token),
            operation=operation,
            body=_encode(payload, operation),
        )
        ensure_exact_ok(response, operation=operation)

    async def send_private_reply(
        self,
        object_id: str,
        access_token: str,
        message: str,
    ) -> PrivateReplyResponse:
        """Responde em privado a um comentário ou post da página.

        Mensagem vazia é repassada à Meta, que decide se aceita.
        """
        operation = "send_private_reply"
        _require(object_id, "object_id", operation)
        _require(access_token, "access_token", operation)

        response = await self._send(
            "POST",
            self._url(object_id, PRIVATE_REPLIES_PATH, access_token=access_token),
            operation=operation,
            body=_encode(PrivateReply(message=message), operation),
        )
        return interpret_response(response, PrivateReplyResponse, operation=operation)

    async def create_persona(self, access_token: str, payload: RawPayload) -> PersonaResponse:
        """Cria persona e retorna o ID gerado pela Meta."""
        operation = "create_persona"
        _require(access_token, "access_token", operation)
        if payload is None:
            _reject("payload", operation, reason="is missing")

        response = await self._send(
            "POST",
            self._url(ME, PERSONAS_PATH, access_token=access_token),
            operation=operation,
            body=_encode(payload, operation),
        )
        return interpret_response(response, PersonaResponse, operation=operation)

    async def get_persona(self, access_token: str, persona_id: str) -> Persona:
        """Busca persona pelo ID."""
        operation = "get_persona"
        _require(access_token, "access_token", operation)
        _require(persona_id, "persona_id", operation)

        response = await self._send(
            "GET",
            self._url(persona_id, access_token=access_token),
            operation=operation,
        )
        return interpret_response(response, Persona, operation=operation)

    async def list_personas(self, access_token: str) -> list[Persona]:
        """Lista personas da página (lista vazia quando não há nenhuma)."""
        operation = "list_personas"
        _require(access_token, "access_token", operation)

        response = await self._send(
            "GET",
            self._url(ME, PERSONAS_PATH, access_token=access_token),
            operation=operation,
        )
        return list(interpret_response(response, ListOfPersonaResponse, operation=operation).data)

    async def delete_persona(self, access_token: str, persona_id: str) -> None:
        """Remove persona pelo ID.

        Raises:
            RemoteRefusalError: HTTP 200 com `success: false`
        """
        operation = "delete_persona"
        _require(access_token, "access_token", operation)
        _require(persona_id, "persona_id", operation)

        response = await self._send(
            "DELETE",
            self._url(persona_id, access_token=access_token),
            operation=operation,
        )
        result = interpret_response(response, DeletePersonaResponse, operation=operation)
        if not result.success:
            logger.warning(
                "messenger_persona_delete_refused",
                extra={"operation": operation, "persona_id": persona_id},
            )
            raise RemoteRefusalError(persona_id, operation=operation)

    def _query(self, access_token: str, **params: str) -> dict[str, str | None]:
        debug = self._settings.debug
        return {
            **params,
            "access_token": access_token,
            "debug": debug.value if debug else None,
        }

    def _url(self, *segments: str, access_token: str) -> str:
        return build_graph_url(
            self._settings.api_endpoint,
            *segments,
            query=self._query(access_token),
        )

    async def _send(
        self,
        method: str,
        url: str,
        *,
        operation: str,
        body: bytes | None = None,
    ) -> httpx.Response:
        return await self._transport.send(method, url, operation=operation, body=body)


def create_messenger_client(
    settings: MessengerSettings | None = None,
    http_client: httpx.AsyncClient | None = None,
) -> MessengerClient:
    """Factory para criar cliente Messenger com config padrão.

    Args:
        settings: MessengerSettings opcional. Se None, carrega do ambiente.
        http_client: Cliente httpx opcional compartilhado entre chamadas.

    Returns:
        Cliente configurado para a Graph API.
    """
    # Import local para evitar dependência circular
    from config.settings import get_messenger_settings

    return MessengerClient(settings or get_messenger_settings(), http_client=http_client)


def _reject(field: str, operation: str, *, reason: str) -> NoReturn:
    logger.warning(
        "messenger_validation_error",
        extra={"operation": operation, "field": field},
    )
    raise ValidationError(field, operation=operation, reason=reason)


def _require(value: str | None, field: str, operation: str) -> None:
    """Garante string não vazia antes de qualquer IO."""
    if value is not None and not isinstance(value, str):
        _reject(field, operation, reason="must be a string")
    if not value or not value.strip():
        _reject(field, operation, reason="is empty")


def _join_profile_fields(
    fields: Sequence[ProfileField | str] | None,
    operation: str,
) -> str:
    if not fields:
        return ",".join(field.value for field in DEFAULT_PROFILE_FIELDS)
    try:
        selected = [ProfileField(field) for field in fields]
    except ValueError:
        _reject("fields", operation, reason="contains an unknown profile field")
    # Preserva ordem do chamador, sem duplicados
    return ",".join(field.value for field in dict.fromkeys(selected))


def _encode(payload: RawPayload, operation: str) -> bytes:
    """Serializa payload em JSON.

    Raises:
        SerializationError: Payload não serializável ou JSON cru inválido
    """
    try:
        if isinstance(payload, BaseModel):
            return payload.model_dump_json(exclude_none=True).encode()
        if isinstance(payload, (str, bytes)):
            json.loads(payload)
            return payload.encode() if isinstance(payload, str) else payload
        return json.dumps(payload).encode()
    except (TypeError, ValueError) as exc:
        raise SerializationError(
            f"{operation}: payload is not valid JSON ({type(exc).__name__})",
            operation=operation,
        ) from exc
