import logging
import sys
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from app.clients.table_client import ApperTableClient
from app.config import Settings
from app.exceptions.custom import (
    AuthNotSupportedError,
    BatchOperationError,
    ClientNotInitializedError,
    MissingFieldsError,
    RateLimitError,
    RecordNotFoundError,
    RemoteOperationError,
    TableClientError,
)
from app.exceptions.handlers import (
    auth_not_supported_handler,
    batch_operation_error_handler,
    client_not_initialized_handler,
    missing_fields_handler,
    not_found_handler,
    rate_limit_error_handler,
    remote_operation_error_handler,
    table_client_error_handler,
)
from app.notifications import LoggingNotifier
from app.routers.bookings import router as bookings_router
from app.routers.hotels import router as hotels_router
from app.routers.reviews import router as reviews_router
from app.routers.users import router as users_router
from app.services.bookings import BookingService
from app.services.hotels import HotelService
from app.services.reviews import ReviewService
from app.services.users import UserService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = Settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stdout,
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)

    async with httpx.AsyncClient(timeout=settings.request_timeout) as client:
        table_client: ApperTableClient | None = None
        if settings.apper_project_id and settings.apper_public_key:
            table_client = ApperTableClient(
                client,
                settings.apper_project_id,
                settings.apper_public_key,
                base_url=settings.apper_base_url,
            )
        else:
            logger.warning("Apper credentials not configured; table calls will fail")

        notifier = LoggingNotifier()
        reviews = ReviewService(table_client, notifier)

        app.state.review_service = reviews
        app.state.booking_service = BookingService(table_client, notifier)
        app.state.hotel_service = HotelService(table_client, notifier, stats_provider=reviews)
        app.state.user_service = UserService(table_client, notifier)

        yield


app = FastAPI(title="Hotel Data Services", lifespan=lifespan)

app.add_exception_handler(ClientNotInitializedError, client_not_initialized_handler)
app.add_exception_handler(TableClientError, table_client_error_handler)
app.add_exception_handler(RemoteOperationError, remote_operation_error_handler)
app.add_exception_handler(RecordNotFoundError, not_found_handler)
app.add_exception_handler(MissingFieldsError, missing_fields_handler)
app.add_exception_handler(BatchOperationError, batch_operation_error_handler)
app.add_exception_handler(AuthNotSupportedError, auth_not_supported_handler)
app.add_exception_handler(RateLimitError, rate_limit_error_handler)

app.include_router(bookings_router)
app.include_router(hotels_router)
app.include_router(reviews_router)
app.include_router(users_router)
