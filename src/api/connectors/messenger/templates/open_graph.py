"""Open graph template."""

from __future__ import annotations

from typing import ClassVar

from pydantic import Field

from .base import Template, TemplateModel, TemplateType
from .buttons import Button


class OpenGraphElement(TemplateModel):
    url: str
    buttons: list[Button] | None = None


class OpenGraphTemplate(Template):
    template_type: ClassVar[TemplateType] = TemplateType.OPEN_GRAPH

    elements: list[OpenGraphElement] = Field(min_length=1, max_length=1)
