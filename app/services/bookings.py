import logging
import random
from datetime import datetime, timezone
from typing import Any

from app.clients.table_client import TableClient
from app.exceptions.custom import MissingFieldsError
from app.mappers.booking_mapper import (
    BOOKING_PROJECTION,
    TABLE_NAME,
    booking_to_record,
    map_booking,
)
from app.notifications import Notifier
from app.schemas.booking import Booking, BookingCreate, BookingStatus, BookingUpdate
from app.schemas.query import Condition, Operator, QueryParams
from app.services.base import TableService

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("hotel_id", "user_id", "check_in", "check_out")

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def parse_timestamp(value: str | None) -> datetime | None:
    """Parse an ISO date or timestamp; naive values are taken as UTC."""
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


class BookingService(TableService):
    table_name = TABLE_NAME
    entity = "Booking"
    projection = BOOKING_PROJECTION

    def __init__(
        self,
        client: TableClient | None,
        notifier: Notifier | None = None,
        rng: random.Random | None = None,
    ):
        super().__init__(client, notifier)
        self._rng = rng or random.Random()

    def _confirmation_number(self, now: datetime) -> str:
        return f"STY-{self._rng.randint(0, 999):03d}-{now.year}"

    async def get_all(self, user_id: int | None = None) -> list[Booking]:
        where: list[Condition] = []
        if user_id:
            where.append(
                Condition(field_name="user_id_c", operator=Operator.equal_to, values=[int(user_id)])
            )

        rows = await self._fetch_many(QueryParams(fields=BOOKING_PROJECTION, where=where))
        return self._map_rows(rows, map_booking)

    async def get_by_id(self, booking_id: int) -> Booking:
        return map_booking(await self._fetch_one(booking_id))

    async def create(self, payload: BookingCreate | dict[str, Any]) -> Booking:
        data = BookingCreate.model_validate(payload)
        missing = [name for name in REQUIRED_FIELDS if not getattr(data, name)]
        if missing:
            raise MissingFieldsError(missing)

        now = datetime.now(timezone.utc)
        record = booking_to_record(data.model_dump())
        record.update(
            {
                "Name": f"Booking - {data.hotel_name}",
                "confirmation_number_c": self._confirmation_number(now),
                "created_at_c": now.isoformat(),
                "status_c": BookingStatus.confirmed.value,
            }
        )

        created = await self._create_one(record)
        return map_booking(created)

    async def update(self, booking_id: int, updates: BookingUpdate | dict[str, Any]) -> Booking:
        data = BookingUpdate.model_validate(updates)
        await self._update_one(booking_id, booking_to_record(data.model_dump(exclude_unset=True)))
        return await self.get_by_id(booking_id)

    async def cancel(self, booking_id: int) -> Booking:
        logger.info("Cancelling booking %s", booking_id)
        return await self.update(booking_id, {"status": BookingStatus.cancelled.value})

    async def get_by_status(self, status: str, user_id: int | None = None) -> list[Booking]:
        bookings = await self.get_all(user_id)
        return [b for b in bookings if b.status == status]

    async def get_upcoming(self, user_id: int | None = None) -> list[Booking]:
        """Bookings checking in from now on, excluding cancelled ones."""
        bookings = await self.get_all(user_id)
        now = datetime.now(timezone.utc)
        upcoming = []
        for booking in bookings:
            check_in = parse_timestamp(booking.check_in)
            if check_in is None or check_in < now:
                continue
            if booking.status == BookingStatus.cancelled:
                continue
            upcoming.append(booking)
        return upcoming

    async def get_recent(self, user_id: int | None = None, limit: int = 5) -> list[Booking]:
        bookings = await self.get_all(user_id)
        bookings.sort(key=lambda b: parse_timestamp(b.created_at) or _EPOCH, reverse=True)
        return bookings[:limit]
