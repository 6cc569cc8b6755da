import logging
import random
from typing import Any, Protocol

from app.clients.table_client import TableClient
from app.exceptions.custom import MissingFieldsError
from app.mappers.hotel_mapper import (
    HOTEL_PROJECTION,
    TABLE_NAME,
    hotel_to_record,
    map_hotel,
)
from app.notifications import Notifier
from app.schemas.hotel import (
    Availability,
    Hotel,
    HotelCreate,
    HotelFilters,
    HotelUpdate,
    RoomOffer,
)
from app.schemas.query import (
    Condition,
    Operator,
    OrderBy,
    PagingInfo,
    QueryParams,
    SortType,
    any_contains,
)
from app.schemas.review import HotelStats
from app.services.base import TableService

logger = logging.getLogger(__name__)

SORT_ORDERS: dict[str, OrderBy] = {
    "price-low": OrderBy(field_name="price_per_night_c", sorttype=SortType.asc),
    "price-high": OrderBy(field_name="price_per_night_c", sorttype=SortType.desc),
    "rating": OrderBy(field_name="rating_c", sorttype=SortType.desc),
    "name": OrderBy(field_name="name_c", sorttype=SortType.asc),
}

DESTINATION_FIELDS = ["city_c", "state_c", "name_c"]
SEARCH_FIELDS = ["name_c", "city_c", "state_c", "description_c"]

FEATURED_LIMIT = 4

# Simulated availability: share of checks that come back sold out.
SIMULATED_SOLD_OUT_RATE = 0.1
SUITE_PRICE_FACTOR = 1.5


class HotelStatsProvider(Protocol):
    async def get_hotel_stats(self, hotel_id: int) -> HotelStats: ...


def build_hotel_query(f: HotelFilters) -> QueryParams:
    where: list[Condition] = []
    if f.min_price:
        where.append(
            Condition(
                field_name="price_per_night_c",
                operator=Operator.greater_than_or_equal_to,
                values=[f.min_price],
            )
        )
    if f.max_price:
        where.append(
            Condition(
                field_name="price_per_night_c",
                operator=Operator.less_than_or_equal_to,
                values=[f.max_price],
            )
        )
    if f.star_rating:
        where.append(
            Condition(field_name="star_rating_c", operator=Operator.exact_match, values=f.star_rating)
        )
    if f.rating:
        where.append(
            Condition(
                field_name="rating_c",
                operator=Operator.greater_than_or_equal_to,
                values=[f.rating],
            )
        )

    order = SORT_ORDERS.get(f.sort_by or "")
    return QueryParams(
        fields=HOTEL_PROJECTION,
        where=where,
        where_groups=[any_contains(DESTINATION_FIELDS, f.destination)] if f.destination else [],
        order_by=[order] if order else [],
    )


def simulated_rooms(hotel: Hotel) -> list[RoomOffer]:
    """Two fixed offers derived from the base nightly price."""
    price = hotel.price_per_night
    return [
        RoomOffer(
            id=f"{hotel.id}_deluxe",
            type="Deluxe Room",
            capacity=2,
            price_per_night=price,
            amenities=["Free WiFi", "Mini Bar", "City View"],
        ),
        RoomOffer(
            id=f"{hotel.id}_suite",
            type="Executive Suite",
            capacity=4,
            price_per_night=price * SUITE_PRICE_FACTOR if price is not None else None,
            amenities=["Free WiFi", "Mini Bar", "Ocean View", "Living Area"],
        ),
    ]


class HotelService(TableService):
    table_name = TABLE_NAME
    entity = "Hotel"
    projection = HOTEL_PROJECTION

    def __init__(
        self,
        client: TableClient | None,
        notifier: Notifier | None = None,
        stats_provider: HotelStatsProvider | None = None,
        rng: random.Random | None = None,
    ):
        super().__init__(client, notifier)
        self._stats_provider = stats_provider
        self._rng = rng or random.Random()

    async def get_all(
        self, filters: HotelFilters | dict[str, Any] | None = None
    ) -> list[Hotel]:
        query = build_hotel_query(HotelFilters.model_validate(filters or {}))
        rows = await self._fetch_many(query)
        return self._map_rows(rows, map_hotel)

    async def get_by_id(self, hotel_id: int) -> Hotel:
        hotel = map_hotel(await self._fetch_one(hotel_id))
        return await self._with_review_stats(hotel)

    async def _with_review_stats(self, hotel: Hotel) -> Hotel:
        """Overlay aggregated review data; the base record wins on any failure."""
        if self._stats_provider is None or hotel.id is None:
            return hotel
        try:
            stats = await self._stats_provider.get_hotel_stats(hotel.id)
        except Exception:
            logger.warning("Review stats unavailable for hotel %s", hotel.id, exc_info=True)
            return hotel

        return hotel.model_copy(
            update={
                "rating": stats.average_rating or hotel.rating,
                "review_count": stats.total_reviews or hotel.review_count or 0,
                "review_stats": stats.rating_distribution,
            }
        )

    async def get_featured(self, limit: int = FEATURED_LIMIT) -> list[Hotel]:
        query = QueryParams(
            fields=HOTEL_PROJECTION,
            where=[Condition(field_name="featured_c", operator=Operator.equal_to, values=[True])],
            paging_info=PagingInfo(limit=limit),
        )
        rows = await self._fetch_many(query)
        return self._map_rows(rows, map_hotel)

    async def search(self, text: str | None) -> list[Hotel]:
        if not text or not text.strip():
            return []

        query = QueryParams(
            fields=HOTEL_PROJECTION,
            where_groups=[any_contains(SEARCH_FIELDS, text)],
        )
        rows = await self._fetch_many(query)
        return self._map_rows(rows, map_hotel)

    async def check_availability(
        self, hotel_id: int, check_in: str | None, check_out: str | None
    ) -> Availability:
        """Simulated check: no inventory is consulted and nothing is held.

        A hotel flagged available passes a random gate most of the time and
        is then offered two synthetic room types.
        """
        hotel = await self.get_by_id(hotel_id)
        available = bool(hotel.available) and self._rng.random() > SIMULATED_SOLD_OUT_RATE
        return Availability(
            available=available,
            hotel_id=hotel.id,
            check_in=check_in,
            check_out=check_out,
            rooms=simulated_rooms(hotel) if available else [],
        )

    async def create(self, payload: HotelCreate | dict[str, Any]) -> Hotel:
        data = HotelCreate.model_validate(payload)
        if not data.name:
            raise MissingFieldsError(["name"])

        record = hotel_to_record(data.model_dump())
        record["Name"] = data.name
        return map_hotel(await self._create_one(record))

    async def update(self, hotel_id: int, updates: HotelUpdate | dict[str, Any]) -> Hotel:
        values = HotelUpdate.model_validate(updates).model_dump(exclude_unset=True)
        await self._update_one(hotel_id, hotel_to_record(values))
        return await self.get_by_id(hotel_id)
