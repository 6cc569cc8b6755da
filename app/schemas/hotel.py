from typing import Any

from pydantic import Field

from app.schemas.common import DomainModel


class HotelLocation(DomainModel):
    city: str | None = None
    state: str | None = None
    country: str | None = None
    coordinates: Any = None


class Hotel(DomainModel):
    id: int | None = Field(default=None, alias="Id")
    name: str | None = None
    address: str | None = None
    available: bool | None = None
    description: str | None = None
    featured: bool | None = None
    location: HotelLocation = HotelLocation()
    price_per_night: float | None = None
    rating: float | None = None
    review_count: int | None = None
    star_rating: int | None = None
    images: list[str] = []
    amenities: list[str] = []
    review_stats: dict[int, int] | None = None  # rating histogram, set by get_by_id


class HotelCreate(DomainModel):
    name: str | None = None
    address: str | None = None
    available: bool = True
    description: str | None = None
    featured: bool = False
    location: HotelLocation = HotelLocation()
    price_per_night: float | None = None
    rating: float | None = None
    review_count: int = 0
    star_rating: int | None = None


class HotelUpdate(DomainModel):
    name: str | None = None
    address: str | None = None
    available: bool | None = None
    description: str | None = None
    featured: bool | None = None
    location: HotelLocation | None = None
    price_per_night: float | None = None
    rating: float | None = None
    review_count: int | None = None
    star_rating: int | None = None


class HotelFilters(DomainModel):
    destination: str | None = None
    min_price: float | None = None
    max_price: float | None = None
    star_rating: list[int] = []
    rating: float | None = None
    sort_by: str | None = None  # price-low | price-high | rating | name


class RoomOffer(DomainModel):
    id: str
    type: str
    capacity: int
    price_per_night: float | None = None
    amenities: list[str] = []
    available: bool = True


class Availability(DomainModel):
    """Result of a simulated availability check; not an inventory hold."""

    available: bool
    hotel_id: int | None = None
    check_in: str | None = None
    check_out: str | None = None
    rooms: list[RoomOffer] = []
    simulated: bool = True
