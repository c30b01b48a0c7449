"""Airline templates (boarding pass, check-in, itinerary, update)."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import ClassVar

from pydantic import Field, field_serializer, model_validator

from .base import Template, TemplateModel, TemplateType

# Formato de data/hora exigido pelos airline templates (sem segundos/fuso)
AIRLINE_DATETIME_FORMAT = "%Y-%m-%dT%H:%M"


class AirlineField(TemplateModel):
    label: str
    value: str


class Airport(TemplateModel):
    airport_code: str
    city: str
    terminal: str | None = None
    gate: str | None = None


class FlightSchedule(TemplateModel):
    boarding_time: datetime | None = None
    departure_time: datetime
    arrival_time: datetime | None = None

    @field_serializer("boarding_time", "departure_time", "arrival_time")
    def _format_time(self, value: datetime | None) -> str | None:
        if value is None:
            return None
        return value.strftime(AIRLINE_DATETIME_FORMAT)


class FlightInfo(TemplateModel):
    connection_id: str | None = None
    segment_id: str | None = None
    flight_number: str
    aircraft_type: str | None = None
    travel_class: str | None = None
    departure_airport: Airport
    arrival_airport: Airport
    flight_schedule: FlightSchedule


class BoardingPass(TemplateModel):
    passenger_name: str
    pnr_number: str
    seat: str | None = None
    logo_image_url: str
    header_image_url: str | None = None
    qr_code: str | None = None
    barcode_image_url: str | None = None
    above_bar_code_image_url: str | None = None
    auxiliary_fields: list[AirlineField] | None = None
    secondary_fields: list[AirlineField] | None = None
    flight_info: FlightInfo

    @model_validator(mode="after")
    def _check_code(self) -> BoardingPass:
        # QR code ou imagem acima do código de barras, nunca ambos
        if bool(self.qr_code) == bool(self.above_bar_code_image_url):
            raise ValueError("exactly one of qr_code or above_bar_code_image_url is required")
        return self


class PassengerInfo(TemplateModel):
    name: str
    ticket_number: str | None = None
    passenger_id: str


class ProductInfo(TemplateModel):
    title: str
    value: str


class PassengerSegmentInfo(TemplateModel):
    segment_id: str
    passenger_id: str
    seat: str
    seat_type: str
    product_info: list[ProductInfo] | None = None


class PriceInfo(TemplateModel):
    title: str
    amount: str
    currency: str | None = None


class AirlineBaseTemplate(Template):
    intro_message: str
    locale: str
    theme_color: str | None = None


class AirlineBoardingPassTemplate(AirlineBaseTemplate):
    template_type: ClassVar[TemplateType] = TemplateType.AIRLINE_BOARDINGPASS

    boarding_pass: list[BoardingPass] = Field(min_length=1)


class AirlineCheckinTemplate(AirlineBaseTemplate):
    template_type: ClassVar[TemplateType] = TemplateType.AIRLINE_CHECKIN

    pnr_number: str
    checkin_url: str
    flight_info: list[FlightInfo] = Field(min_length=1)


class AirlineItineraryTemplate(AirlineBaseTemplate):
    template_type: ClassVar[TemplateType] = TemplateType.AIRLINE_ITINERARY

    pnr_number: str
    passenger_info: list[PassengerInfo] = Field(min_length=1)
    flight_info: list[FlightInfo] = Field(min_length=1)
    passenger_segment_info: list[PassengerSegmentInfo] = Field(min_length=1)
    price_info: list[PriceInfo] | None = None
    base_price: str | None = None
    tax: str | None = None
    total_price: str
    currency: str


class AirlineUpdateType(str, Enum):
    DELAY = "delay"
    GATE_CHANGE = "gate_change"
    CANCELLATION = "cancellation"


class AirlineUpdateTemplate(Template):
    template_type: ClassVar[TemplateType] = TemplateType.AIRLINE_UPDATE

    intro_message: str | None = None
    update_type: AirlineUpdateType
    locale: str
    theme_color: str | None = None
    pnr_number: str
    update_flight_info: FlightInfo
