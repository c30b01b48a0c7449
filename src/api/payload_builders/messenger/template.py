"""Builder para anexos de template do Messenger."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.connectors.messenger.templates import Attachment

if TYPE_CHECKING:
    from api.connectors.messenger.templates import Template

ATTACHMENT_TYPE_TEMPLATE = "template"


class TemplatePayloadBuilder:
    """Envolve um template no envelope `attachment` da Send API."""

    def build_attachment(self, template: Template) -> Attachment:
        """Constrói o anexo tipado (reutilizável em share_contents)."""
        return Attachment(type=ATTACHMENT_TYPE_TEMPLATE, payload=template.to_payload())

    def build(self, template: Template) -> dict[str, Any]:
        """Constrói payload de mensagem para o template.

        Args:
            template: Qualquer template do catálogo

        Returns:
            `{"attachment": {"type": "template", "payload": {...}}}`
        """
        return {"attachment": self.build_attachment(template).to_dict()}
