from pydantic import Field

from app.schemas.common import DomainModel


class Review(DomainModel):
    id: int | None = Field(default=None, alias="Id")
    hotel_id: int | None = None
    user_id: int | None = None
    user_name: str | None = None
    user_avatar: str | None = None
    rating: int | None = None  # 1-5
    title: str | None = None
    comment: str | None = None
    photos: list = []
    stay_date: str | None = None
    created_at: str | None = None
    updated_at: str | None = None
    helpful: int | None = None
    verified: bool | None = None


class ReviewCreate(DomainModel):
    hotel_id: int | None = None
    user_id: int | None = None
    rating: int | None = Field(default=None, ge=1, le=5)
    title: str | None = None
    comment: str | None = None
    stay_date: str | None = None
    user_avatar: str | None = None
    user_name: str | None = None


class ReviewUpdate(DomainModel):
    comment: str | None = None
    helpful: int | None = None
    rating: int | None = Field(default=None, ge=1, le=5)
    stay_date: str | None = None
    title: str | None = None
    user_avatar: str | None = None
    user_name: str | None = None
    verified: bool | None = None


class ReviewFilters(DomainModel):
    hotel_id: int | None = None
    user_id: int | None = None
    min_rating: int | None = None
    search: str | None = None
    sort_by: str | None = None  # newest | oldest | rating-high | rating-low


class HotelStats(DomainModel):
    average_rating: float = 0.0
    total_reviews: int = 0
    rating_distribution: dict[int, int] = Field(
        default_factory=lambda: {5: 0, 4: 0, 3: 0, 2: 0, 1: 0}
    )
