"""Botões usados pelos templates.

Schema canônico único para todos os templates; a variante reduzida de
botão de lista foi absorvida por `Button`.
"""

from __future__ import annotations

from enum import Enum

from pydantic import Field

from .base import Attachment, TemplateModel


class ButtonType(str, Enum):
    """Comportamento do botão."""

    WEB_URL = "web_url"
    POSTBACK = "postback"
    PHONE_NUMBER = "phone_number"
    ACCOUNT_LINK = "account_link"
    ACCOUNT_UNLINK = "account_unlink"
    ELEMENT_SHARE = "element_share"
    PAYMENT = "payment"
    GAME_PLAY = "game_play"


class ShareContent(TemplateModel):
    attachment: Attachment


class PaymentPrice(TemplateModel):
    label: str
    amount: str


class RequestUserInfo(TemplateModel):
    shipping_address: str
    contact_name: str
    contact_phone: str
    contact_email: str


class PaymentSummary(TemplateModel):
    currency: str
    payment_type: str
    is_test_payment: bool = False
    merchant_name: str
    request_user_info: RequestUserInfo
    price_list: list[PaymentPrice] = Field(default_factory=list)


class GameMetadata(TemplateModel):
    player_id: str
    context_id: str | None = None


class Button(TemplateModel):
    """Botão de template."""

    type: ButtonType
    title: str | None = None
    url: str | None = None
    payload: str | None = None
    share_contents: ShareContent | None = None
    payment_summary: PaymentSummary | None = None
    game_metadata: GameMetadata | None = None
    messenger_extensions: bool | None = None
    webview_height_ratio: str | None = None
    fallback_url: str | None = None


def new_web_url_button(title: str, url: str) -> Button:
    """Botão que abre endereço externo."""
    return Button(type=ButtonType.WEB_URL, title=title, url=url)


def new_postback_button(title: str, payload: str) -> Button:
    """Botão que envia `payload` ao webhook."""
    return Button(type=ButtonType.POSTBACK, title=title, payload=payload)


def new_phone_number_button(title: str, phone: str) -> Button:
    """Botão que abre o discador nativo."""
    return Button(type=ButtonType.PHONE_NUMBER, title=title, payload=phone)


def new_account_link_button(url: str) -> Button:
    """Botão de account linking.

    https://developers.facebook.com/docs/messenger-platform/account-linking/authentication
    """
    return Button(type=ButtonType.ACCOUNT_LINK, url=url)


def new_account_unlink_button() -> Button:
    return Button(type=ButtonType.ACCOUNT_UNLINK)


def new_shared_button(attachment: Attachment | None = None) -> Button:
    """Botão de compartilhamento, opcionalmente com conteúdo próprio."""
    if attachment is None:
        return Button(type=ButtonType.ELEMENT_SHARE)
    return Button(
        type=ButtonType.ELEMENT_SHARE,
        share_contents=ShareContent(attachment=attachment),
    )


def new_payment_button(
    title: str,
    payload: str,
    payment_summary: PaymentSummary | None = None,
) -> Button:
    return Button(
        type=ButtonType.PAYMENT,
        title=title,
        payload=payload,
        payment_summary=payment_summary,
    )


def new_game_play_button(
    title: str,
    payload: str,
    game_metadata: GameMetadata | None = None,
) -> Button:
    return Button(
        type=ButtonType.GAME_PLAY,
        title=title,
        payload=payload,
        game_metadata=game_metadata,
    )
