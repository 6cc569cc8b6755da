from typing import Any

from app.mappers.fields import (
    FieldMap,
    as_float,
    domain_to_record,
    projection,
    record_to_domain,
)
from app.schemas.hotel import Hotel

TABLE_NAME = "hotel_c"

# The hotel table stores no media or amenities yet; these keep cards renderable.
PLACEHOLDER_IMAGES = [
    "https://images.unsplash.com/photo-1566073771259-6a8506099945?w=800&h=600&fit=crop",
    "https://images.unsplash.com/photo-1564013799919-ab600027ffc6?w=800&h=600&fit=crop",
]
PLACEHOLDER_AMENITIES = ["Free WiFi", "Pool", "Spa", "Gym", "Restaurant"]

HOTEL_FIELDS: tuple[FieldMap, ...] = (
    FieldMap("name_c", "name", fallback="Name"),
    FieldMap("address_c", "address"),
    FieldMap("available_c", "available"),
    FieldMap("description_c", "description"),
    FieldMap("featured_c", "featured"),
    FieldMap("city_c", "location.city"),
    FieldMap("state_c", "location.state"),
    FieldMap("country_c", "location.country"),
    FieldMap("coordinates_c", "location.coordinates"),
    FieldMap("price_per_night_c", "price_per_night", encode=as_float),
    FieldMap("rating_c", "rating"),
    FieldMap("review_count_c", "review_count"),
    FieldMap("star_rating_c", "star_rating"),
)

HOTEL_PROJECTION = projection(HOTEL_FIELDS)


def map_hotel(record: dict[str, Any]) -> Hotel:
    values = record_to_domain(record, HOTEL_FIELDS)
    values["images"] = list(PLACEHOLDER_IMAGES)
    values["amenities"] = list(PLACEHOLDER_AMENITIES)
    return Hotel.model_validate(values)


def hotel_to_record(values: dict[str, Any]) -> dict[str, Any]:
    return domain_to_record(values, HOTEL_FIELDS)
