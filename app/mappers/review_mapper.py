from typing import Any

from app.mappers.fields import (
    FieldMap,
    as_int,
    domain_to_record,
    foreign_key,
    json_list,
    projection,
    record_to_domain,
)
from app.schemas.review import Review

TABLE_NAME = "review_c"

REVIEW_FIELDS: tuple[FieldMap, ...] = (
    FieldMap("hotel_id_c", "hotel_id", decode=foreign_key, encode=as_int),
    FieldMap("user_id_c", "user_id", decode=foreign_key, encode=as_int),
    FieldMap("user_name_c", "user_name"),
    FieldMap("user_avatar_c", "user_avatar"),
    FieldMap("rating_c", "rating", encode=as_int),
    FieldMap("title_c", "title"),
    FieldMap("comment_c", "comment"),
    # stored without the _c suffix and never written from here
    FieldMap("photos", "photos", decode=json_list, writable=False),
    FieldMap("stay_date_c", "stay_date"),
    FieldMap("created_at_c", "created_at"),
    FieldMap("updated_at_c", "updated_at"),
    FieldMap("helpful_c", "helpful"),
    FieldMap("verified_c", "verified"),
)

REVIEW_PROJECTION = projection(REVIEW_FIELDS)


def map_review(record: dict[str, Any]) -> Review:
    return Review.model_validate(record_to_domain(record, REVIEW_FIELDS))


def review_to_record(values: dict[str, Any]) -> dict[str, Any]:
    return domain_to_record(values, REVIEW_FIELDS)
