from typing import Any

from app.mappers.fields import (
    FieldMap,
    domain_to_record,
    projection,
    record_to_domain,
)
from app.schemas.user import User

TABLE_NAME = "user_c"

USER_FIELDS: tuple[FieldMap, ...] = (
    FieldMap("name_c", "name", fallback="Name"),
    FieldMap("first_name_c", "first_name"),
    FieldMap("last_name_c", "last_name"),
    FieldMap("email_c", "email"),
    FieldMap("phone_c", "phone"),
    FieldMap("avatar_c", "avatar"),
    FieldMap("loyalty_status_c", "loyalty_status"),
    FieldMap("member_since_c", "member_since"),
    FieldMap("total_bookings_c", "total_bookings"),
    FieldMap("room_type_c", "preferences.room_type"),
    FieldMap("bed_type_c", "preferences.bed_type"),
    FieldMap("smoking_preference_c", "preferences.smoking_preference"),
    FieldMap("floor_preference_c", "preferences.floor_preference"),
    FieldMap("newsletter_c", "preferences.newsletter"),
)

USER_PROJECTION = projection(USER_FIELDS)


def map_user(record: dict[str, Any]) -> User:
    return User.model_validate(record_to_domain(record, USER_FIELDS))


def user_to_record(values: dict[str, Any]) -> dict[str, Any]:
    """Flatten a partial profile, including the ``preferences`` sub-object."""
    return domain_to_record(values, USER_FIELDS)
