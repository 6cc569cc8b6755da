from fastapi import APIRouter, Query

from app.dependencies import ReviewDep
from app.schemas.review import HotelStats, Review, ReviewCreate, ReviewFilters, ReviewUpdate

router = APIRouter(prefix="/reviews", tags=["reviews"])


@router.get("", response_model=list[Review])
async def list_reviews(
    service: ReviewDep,
    hotel_id: int | None = Query(default=None, alias="hotelId"),
    user_id: int | None = Query(default=None, alias="userId"),
    min_rating: int | None = Query(default=None, alias="minRating", ge=1, le=5),
    search: str | None = None,
    sort_by: str | None = Query(default=None, alias="sortBy"),
) -> list[Review]:
    filters = ReviewFilters(
        hotel_id=hotel_id,
        user_id=user_id,
        min_rating=min_rating,
        search=search,
        sort_by=sort_by,
    )
    return await service.get_all(filters)


@router.get("/stats/{hotel_id}", response_model=HotelStats)
async def hotel_review_stats(hotel_id: int, service: ReviewDep) -> HotelStats:
    return await service.get_hotel_stats(hotel_id)


@router.get("/{review_id}", response_model=Review)
async def get_review(review_id: int, service: ReviewDep) -> Review:
    return await service.get_by_id(review_id)


@router.post("", response_model=Review, status_code=201)
async def create_review(payload: ReviewCreate, service: ReviewDep) -> Review:
    return await service.create(payload)


@router.patch("/{review_id}", response_model=Review)
async def update_review(review_id: int, payload: ReviewUpdate, service: ReviewDep) -> Review:
    return await service.update(review_id, payload)


@router.delete("/{review_id}", status_code=204)
async def delete_review(review_id: int, service: ReviewDep) -> None:
    await service.delete([review_id])
