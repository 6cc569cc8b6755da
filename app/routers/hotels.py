from fastapi import APIRouter, Query

from app.dependencies import HotelDep, ReviewDep
from app.schemas.hotel import Availability, Hotel, HotelCreate, HotelFilters, HotelUpdate
from app.schemas.review import Review

router = APIRouter(prefix="/hotels", tags=["hotels"])


@router.get("", response_model=list[Hotel])
async def list_hotels(
    service: HotelDep,
    destination: str | None = None,
    min_price: float | None = Query(default=None, alias="minPrice"),
    max_price: float | None = Query(default=None, alias="maxPrice"),
    star_rating: list[int] = Query(default=[], alias="starRating"),
    rating: float | None = None,
    sort_by: str | None = Query(default=None, alias="sortBy"),
) -> list[Hotel]:
    filters = HotelFilters(
        destination=destination,
        min_price=min_price,
        max_price=max_price,
        star_rating=star_rating,
        rating=rating,
        sort_by=sort_by,
    )
    return await service.get_all(filters)


@router.get("/featured", response_model=list[Hotel])
async def featured_hotels(
    service: HotelDep, limit: int = Query(default=4, ge=1, le=50)
) -> list[Hotel]:
    return await service.get_featured(limit)


@router.get("/search", response_model=list[Hotel])
async def search_hotels(service: HotelDep, q: str = "") -> list[Hotel]:
    return await service.search(q)


@router.get("/{hotel_id}", response_model=Hotel)
async def get_hotel(hotel_id: int, service: HotelDep) -> Hotel:
    return await service.get_by_id(hotel_id)


@router.get("/{hotel_id}/availability", response_model=Availability)
async def hotel_availability(
    hotel_id: int,
    service: HotelDep,
    check_in: str | None = Query(default=None, alias="checkIn"),
    check_out: str | None = Query(default=None, alias="checkOut"),
) -> Availability:
    return await service.check_availability(hotel_id, check_in, check_out)


@router.get("/{hotel_id}/reviews", response_model=list[Review])
async def hotel_reviews(hotel_id: int, reviews: ReviewDep) -> list[Review]:
    return await reviews.get_by_hotel_id(hotel_id)


@router.post("", response_model=Hotel, status_code=201)
async def create_hotel(payload: HotelCreate, service: HotelDep) -> Hotel:
    return await service.create(payload)


@router.patch("/{hotel_id}", response_model=Hotel)
async def update_hotel(hotel_id: int, payload: HotelUpdate, service: HotelDep) -> Hotel:
    return await service.update(hotel_id, payload)


@router.delete("/{hotel_id}", status_code=204)
async def delete_hotel(hotel_id: int, service: HotelDep) -> None:
    await service.delete([hotel_id])
