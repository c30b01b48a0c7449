"""Media template."""

from __future__ import annotations

from enum import Enum
from typing import ClassVar

from pydantic import Field, model_validator

from .base import Template, TemplateModel, TemplateType
from .buttons import Button


class MediaType(str, Enum):
    IMAGE = "image"
    VIDEO = "video"


class MediaElement(TemplateModel):
    """Imagem ou vídeo, por attachment_id ou URL do Facebook."""

    media_type: MediaType
    attachment_id: str | None = None
    url: str | None = None
    buttons: list[Button] | None = None

    @model_validator(mode="after")
    def _check_source(self) -> MediaElement:
        if not self.attachment_id and not self.url:
            raise ValueError("attachment_id or url is required")
        return self


class MediaTemplate(Template):
    template_type: ClassVar[TemplateType] = TemplateType.MEDIA

    elements: list[MediaElement] = Field(min_length=1, max_length=1)
