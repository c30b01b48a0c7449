"""Builders de payload para a Send API do Messenger."""

from api.payload_builders.messenger.template import (
    ATTACHMENT_TYPE_TEMPLATE,
    TemplatePayloadBuilder,
)

__all__ = [
    "ATTACHMENT_TYPE_TEMPLATE",
    "TemplatePayloadBuilder",
]
