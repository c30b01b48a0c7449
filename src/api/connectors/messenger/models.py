"""Modelos de wire da Graph API (Messenger Platform).

Nomes de campos JSON são fixados pela plataforma e não podem ser
renomeados.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

# Paths da Graph API
PASS_THREAD_CONTROL_PATH = "pass_thread_control"
TAKE_THREAD_CONTROL_PATH = "take_thread_control"
MESSENGER_PROFILE_PATH = "messenger_profile"
PRIVATE_REPLIES_PATH = "private_replies"
PERSONAS_PATH = "personas"


class ProfileField(str, Enum):
    """Campos disponíveis do perfil do usuário.

    https://developers.facebook.com/docs/messenger-platform/identity/user-profile
    """

    NAME = "name"
    FIRST_NAME = "first_name"
    LAST_NAME = "last_name"
    PROFILE_PICTURE = "profile_pic"
    LOCALE = "locale"
    TIMEZONE = "timezone"
    GENDER = "gender"


DEFAULT_PROFILE_FIELDS: tuple[ProfileField, ...] = (
    ProfileField.NAME,
    ProfileField.FIRST_NAME,
    ProfileField.LAST_NAME,
    ProfileField.PROFILE_PICTURE,
)


class Recipient(BaseModel):
    """Destinatário identificado pelo PSID."""

    id: str


class PassThreadControl(BaseModel):
    """Passa o controle da conversa para outro app."""

    recipient: Recipient
    target_app_id: int
    metadata: str = ""


class TakeThreadControl(BaseModel):
    """Retoma o controle da conversa para o app primário."""

    recipient: Recipient
    metadata: str = ""


class Profile(BaseModel):
    """Perfil do usuário retornado pela Graph API."""

    model_config = ConfigDict(extra="ignore")

    name: str = ""
    first_name: str = ""
    last_name: str = ""
    profile_pic: str | None = None
    locale: str | None = None
    timezone: float | None = None
    gender: str | None = None


class PrivateReply(BaseModel):
    """Mensagem privada em resposta a comentário/post público."""

    # ID do comentário ou post; vai na URL, omitido do body quando vazio
    id: str | None = None
    message: str


class PrivateReplyResponse(BaseModel):
    """Confirmação de private reply."""

    model_config = ConfigDict(extra="ignore")

    id: str
    user_id: str = ""


class PersonaCreate(BaseModel):
    """Descritor para criação de persona."""

    name: str
    profile_picture_url: str


class Persona(BaseModel):
    """Persona (identidade de remetente) de uma página."""

    model_config = ConfigDict(extra="ignore")

    name: str = ""
    profile_picture_url: str = ""
    id: str


class PersonaResponse(BaseModel):
    """Resposta de criação de persona."""

    model_config = ConfigDict(extra="ignore")

    id: str


class ListOfPersonaResponse(BaseModel):
    """Resposta de listagem de personas."""

    model_config = ConfigDict(extra="ignore")

    data: list[Persona] = Field(default_factory=list)


class DeletePersonaResponse(BaseModel):
    """Resposta de remoção de persona."""

    model_config = ConfigDict(extra="ignore")

    success: bool


class GraphError(BaseModel):
    """Objeto `error` do envelope de erro da Graph API."""

    model_config = ConfigDict(extra="ignore")

    message: str = ""
    type: str = ""
    code: int = 0
    error_subcode: int = 0
    fbtrace_id: str = ""


class RawGraphError(BaseModel):
    """Envelope de erro: `{"error": {...}}`."""

    model_config = ConfigDict(extra="ignore")

    error: GraphError
