from typing import Any

from app.mappers.fields import (
    FieldMap,
    as_float,
    as_int,
    domain_to_record,
    foreign_key,
    json_dumps,
    json_object,
    projection,
    record_to_domain,
)
from app.schemas.booking import Booking

TABLE_NAME = "booking_c"

BOOKING_FIELDS: tuple[FieldMap, ...] = (
    FieldMap("check_in_c", "check_in"),
    FieldMap("check_out_c", "check_out"),
    FieldMap("confirmation_number_c", "confirmation_number"),
    FieldMap("created_at_c", "created_at", writable=False),
    FieldMap("guest_details_c", "guest_details", decode=json_object, encode=json_dumps),
    FieldMap("guests_c", "guests"),
    FieldMap("hotel_id_c", "hotel_id", decode=foreign_key, encode=as_int),
    FieldMap("hotel_image_c", "hotel_image"),
    FieldMap("hotel_name_c", "hotel_name"),
    FieldMap("location_c", "location"),
    FieldMap("nights_c", "nights"),
    FieldMap("room_type_c", "room_type"),
    FieldMap("status_c", "status"),
    FieldMap("total_price_c", "total_price", encode=as_float),
    FieldMap("user_id_c", "user_id", decode=foreign_key, encode=as_int),
)

BOOKING_PROJECTION = projection(BOOKING_FIELDS)


def map_booking(record: dict[str, Any]) -> Booking:
    return Booking.model_validate(record_to_domain(record, BOOKING_FIELDS))


def booking_to_record(values: dict[str, Any]) -> dict[str, Any]:
    """Map present domain keys to ``booking_c`` columns."""
    return domain_to_record(values, BOOKING_FIELDS)
