from enum import StrEnum

from pydantic import Field

from app.schemas.common import DomainModel


class BookingStatus(StrEnum):
    confirmed = "confirmed"
    cancelled = "cancelled"


class Booking(DomainModel):
    id: int | None = Field(default=None, alias="Id")
    check_in: str | None = None  # ISO date
    check_out: str | None = None
    confirmation_number: str | None = None  # e.g. STY-042-2026
    created_at: str | None = None  # ISO timestamp
    guest_details: dict = {}
    guests: int | None = None
    hotel_id: int | None = None
    hotel_image: str | None = None
    hotel_name: str | None = None
    location: str | None = None
    nights: int | None = None
    room_type: str | None = None
    status: str | None = None
    total_price: float | None = None
    user_id: int | None = None


class BookingCreate(DomainModel):
    check_in: str | None = None
    check_out: str | None = None
    guest_details: dict = {}
    guests: int | None = None
    hotel_id: int | None = None
    hotel_image: str | None = None
    hotel_name: str | None = None
    location: str | None = None
    nights: int | None = None
    room_type: str | None = None
    total_price: float | None = None
    user_id: int | None = None


class BookingUpdate(DomainModel):
    check_in: str | None = None
    check_out: str | None = None
    confirmation_number: str | None = None
    guest_details: dict | None = None
    guests: int | None = None
    hotel_id: int | None = None
    hotel_image: str | None = None
    hotel_name: str | None = None
    location: str | None = None
    nights: int | None = None
    room_type: str | None = None
    status: str | None = None
    total_price: float | None = None
    user_id: int | None = None
