from fastapi import APIRouter, Query

from app.dependencies import BookingDep
from app.schemas.booking import Booking, BookingCreate, BookingUpdate

router = APIRouter(prefix="/bookings", tags=["bookings"])


@router.get("", response_model=list[Booking])
async def list_bookings(
    service: BookingDep,
    user_id: int | None = Query(default=None, alias="userId"),
    status: str | None = None,
) -> list[Booking]:
    if status:
        return await service.get_by_status(status, user_id)
    return await service.get_all(user_id)


@router.get("/upcoming", response_model=list[Booking])
async def upcoming_bookings(
    service: BookingDep,
    user_id: int | None = Query(default=None, alias="userId"),
) -> list[Booking]:
    return await service.get_upcoming(user_id)


@router.get("/recent", response_model=list[Booking])
async def recent_bookings(
    service: BookingDep,
    user_id: int | None = Query(default=None, alias="userId"),
    limit: int = Query(default=5, ge=1, le=100),
) -> list[Booking]:
    return await service.get_recent(user_id, limit=limit)


@router.get("/{booking_id}", response_model=Booking)
async def get_booking(booking_id: int, service: BookingDep) -> Booking:
    return await service.get_by_id(booking_id)


@router.post("", response_model=Booking, status_code=201)
async def create_booking(payload: BookingCreate, service: BookingDep) -> Booking:
    return await service.create(payload)


@router.patch("/{booking_id}", response_model=Booking)
async def update_booking(booking_id: int, payload: BookingUpdate, service: BookingDep) -> Booking:
    return await service.update(booking_id, payload)


@router.post("/{booking_id}/cancel", response_model=Booking)
async def cancel_booking(booking_id: int, service: BookingDep) -> Booking:
    return await service.cancel(booking_id)


@router.delete("/{booking_id}", status_code=204)
async def delete_booking(booking_id: int, service: BookingDep) -> None:
    await service.delete([booking_id])
