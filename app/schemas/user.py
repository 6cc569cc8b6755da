from pydantic import Field

from app.schemas.common import DomainModel


class UserPreferences(DomainModel):
    room_type: str | None = None
    bed_type: str | None = None
    smoking_preference: str | None = None
    floor_preference: str | None = None
    newsletter: bool | None = None


class User(DomainModel):
    id: int | None = Field(default=None, alias="Id")
    name: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    phone: str | None = None
    avatar: str | None = None
    loyalty_status: str | None = None
    member_since: str | None = None
    total_bookings: int | None = None
    preferences: UserPreferences = UserPreferences()


class UserUpdate(DomainModel):
    name: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    phone: str | None = None
    avatar: str | None = None
    loyalty_status: str | None = None
    member_since: str | None = None
    total_bookings: int | None = None
    preferences: UserPreferences | None = None
