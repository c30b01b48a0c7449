"""Base do catálogo de templates do Messenger.

Schema passivo: os modelos só mapeiam campos JSON. O conector apenas
serializa estes objetos, sem interpretar o conteúdo.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict

# Versão do schema canônico dos templates (ver DESIGN.md)
TEMPLATE_SCHEMA_VERSION = "2018-08"


class TemplateType(str, Enum):
    """Valores de `template_type` aceitos pela Send API."""

    LIST = "list"
    MEDIA = "media"
    OPEN_GRAPH = "open_graph"
    AIRLINE_BOARDINGPASS = "airline_boardingpass"
    AIRLINE_CHECKIN = "airline_checkin"
    AIRLINE_ITINERARY = "airline_itinerary"
    AIRLINE_UPDATE = "airline_update"


class TemplateModel(BaseModel):
    """Modelo base: campos None são omitidos do JSON."""

    model_config = ConfigDict(extra="forbid")

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


class Template(TemplateModel):
    """Template com `template_type` fixo por subclasse."""

    template_type: ClassVar[TemplateType]

    sharable: bool | None = None

    def to_payload(self) -> dict[str, Any]:
        """Payload do template, pronto para `attachment.payload`."""
        return {"template_type": self.template_type.value, **self.to_dict()}


class Attachment(TemplateModel):
    """Anexo de mensagem (usado em share_contents)."""

    type: str
    payload: dict[str, Any]


class DefaultAction(TemplateModel):
    """Ação ao tocar no elemento (sempre web_url)."""

    type: str = "web_url"
    url: str
    messenger_extensions: bool | None = None
    webview_height_ratio: str | None = None
    fallback_url: str | None = None
