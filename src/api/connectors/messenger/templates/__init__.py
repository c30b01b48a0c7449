"""Catálogo de templates do Messenger (schema passivo).

Um schema canônico por tipo de template, versionado em
TEMPLATE_SCHEMA_VERSION.
"""

from .airline import (
    AirlineBoardingPassTemplate,
    AirlineCheckinTemplate,
    AirlineField,
    AirlineItineraryTemplate,
    AirlineUpdateTemplate,
    AirlineUpdateType,
    Airport,
    BoardingPass,
    FlightInfo,
    FlightSchedule,
    PassengerInfo,
    PassengerSegmentInfo,
    PriceInfo,
    ProductInfo,
)
from .base import (
    TEMPLATE_SCHEMA_VERSION,
    Attachment,
    DefaultAction,
    Template,
    TemplateType,
)
from .buttons import (
    Button,
    ButtonType,
    GameMetadata,
    PaymentPrice,
    PaymentSummary,
    RequestUserInfo,
    ShareContent,
    new_account_link_button,
    new_account_unlink_button,
    new_game_play_button,
    new_payment_button,
    new_phone_number_button,
    new_postback_button,
    new_shared_button,
    new_web_url_button,
)
from .list_template import ListElement, ListTemplate, TopElementStyle
from .media import MediaElement, MediaTemplate, MediaType
from .open_graph import OpenGraphElement, OpenGraphTemplate

__all__ = [
    "TEMPLATE_SCHEMA_VERSION",
    "AirlineBoardingPassTemplate",
    "AirlineCheckinTemplate",
    "AirlineField",
    "AirlineItineraryTemplate",
    "AirlineUpdateTemplate",
    "AirlineUpdateType",
    "Airport",
    "Attachment",
    "BoardingPass",
    "Button",
    "ButtonType",
    "DefaultAction",
    "FlightInfo",
    "FlightSchedule",
    "GameMetadata",
    "ListElement",
    "ListTemplate",
    "MediaElement",
    "MediaTemplate",
    "MediaType",
    "OpenGraphElement",
    "OpenGraphTemplate",
    "PassengerInfo",
    "PassengerSegmentInfo",
    "PaymentPrice",
    "PaymentSummary",
    "PriceInfo",
    "ProductInfo",
    "RequestUserInfo",
    "ShareContent",
    "Template",
    "TemplateType",
    "TopElementStyle",
    "new_account_link_button",
    "new_account_unlink_button",
    "new_game_play_button",
    "new_payment_button",
    "new_phone_number_button",
    "new_postback_button",
    "new_shared_button",
    "new_web_url_button",
]
