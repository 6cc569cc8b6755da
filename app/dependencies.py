from typing import Annotated

from fastapi import Depends, Request

from app.services.bookings import BookingService
from app.services.hotels import HotelService
from app.services.reviews import ReviewService
from app.services.users import UserService


def get_booking_service(request: Request) -> BookingService:
    return request.app.state.booking_service


def get_hotel_service(request: Request) -> HotelService:
    return request.app.state.hotel_service


def get_review_service(request: Request) -> ReviewService:
    return request.app.state.review_service


def get_user_service(request: Request) -> UserService:
    return request.app.state.user_service


BookingDep = Annotated[BookingService, Depends(get_booking_service)]
HotelDep = Annotated[HotelService, Depends(get_hotel_service)]
ReviewDep = Annotated[ReviewService, Depends(get_review_service)]
UserDep = Annotated[UserService, Depends(get_user_service)]
