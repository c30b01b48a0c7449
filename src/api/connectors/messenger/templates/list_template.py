"""List template."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, ClassVar

from pydantic import Field

from .base import DefaultAction, Template, TemplateModel, TemplateType
from .buttons import Button


class TopElementStyle(str, Enum):
    LARGE = "large"
    COMPACT = "compact"


class ListElement(TemplateModel):
    """Item da lista (no máximo um botão por item)."""

    title: str
    subtitle: str | None = None
    image_url: str | None = None
    default_action: DefaultAction | None = None
    buttons: Annotated[list[Button], Field(max_length=1)] | None = None


class ListTemplate(Template):
    """Lista vertical de 2 a 4 itens, com até um botão global."""

    template_type: ClassVar[TemplateType] = TemplateType.LIST

    top_element_style: TopElementStyle = TopElementStyle.COMPACT
    elements: list[ListElement] = Field(min_length=2, max_length=4)
    buttons: Annotated[list[Button], Field(max_length=1)] | None = None
