import logging
import math
from datetime import datetime, timezone
from typing import Any

from app.exceptions.custom import MissingFieldsError
from app.mappers.review_mapper import (
    REVIEW_PROJECTION,
    TABLE_NAME,
    map_review,
    review_to_record,
)
from app.schemas.query import Condition, Operator, OrderBy, QueryParams, SortType
from app.schemas.review import HotelStats, Review, ReviewCreate, ReviewFilters, ReviewUpdate
from app.services.base import TableService

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("hotel_id", "user_id", "rating", "title")

NEWEST_FIRST = OrderBy(field_name="created_at_c", sorttype=SortType.desc)

SORT_ORDERS: dict[str, OrderBy] = {
    "newest": NEWEST_FIRST,
    "oldest": OrderBy(field_name="created_at_c", sorttype=SortType.asc),
    "rating-high": OrderBy(field_name="rating_c", sorttype=SortType.desc),
    "rating-low": OrderBy(field_name="rating_c", sorttype=SortType.asc),
}


def round_half_up(value: float, digits: int = 1) -> float:
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor


def compute_stats(reviews: list[Review]) -> HotelStats:
    """Average (one decimal), count and a zero-filled 1-5 histogram."""
    if not reviews:
        return HotelStats()

    distribution = {5: 0, 4: 0, 3: 0, 2: 0, 1: 0}
    ratings = [r.rating for r in reviews if r.rating is not None]
    for rating in ratings:
        if rating in distribution:
            distribution[rating] += 1

    average = sum(ratings) / len(ratings) if ratings else 0
    return HotelStats(
        average_rating=round_half_up(average),
        total_reviews=len(reviews),
        rating_distribution=distribution,
    )


class ReviewService(TableService):
    table_name = TABLE_NAME
    entity = "Review"
    projection = REVIEW_PROJECTION

    async def get_all(
        self, filters: ReviewFilters | dict[str, Any] | None = None
    ) -> list[Review]:
        f = ReviewFilters.model_validate(filters or {})

        where: list[Condition] = []
        if f.hotel_id:
            where.append(Condition(field_name="hotel_id_c", operator=Operator.equal_to, values=[f.hotel_id]))
        if f.user_id:
            where.append(Condition(field_name="user_id_c", operator=Operator.equal_to, values=[f.user_id]))
        if f.min_rating:
            where.append(
                Condition(
                    field_name="rating_c",
                    operator=Operator.greater_than_or_equal_to,
                    values=[f.min_rating],
                )
            )
        if f.search:
            where.append(Condition(field_name="title_c", operator=Operator.contains, values=[f.search]))

        query = QueryParams(
            fields=REVIEW_PROJECTION,
            where=where,
            order_by=[SORT_ORDERS.get(f.sort_by or "newest", NEWEST_FIRST)],
        )
        rows = await self._fetch_many(query)
        return self._map_rows(rows, map_review)

    async def get_by_id(self, review_id: int) -> Review:
        return map_review(await self._fetch_one(review_id))

    async def get_by_hotel_id(self, hotel_id: int) -> list[Review]:
        return await self.get_all({"hotel_id": hotel_id})

    async def get_by_user_id(self, user_id: int) -> list[Review]:
        return await self.get_all({"user_id": user_id})

    async def create(self, payload: ReviewCreate | dict[str, Any]) -> Review:
        data = ReviewCreate.model_validate(payload)
        missing = [name for name in REQUIRED_FIELDS if not getattr(data, name)]
        if missing:
            raise MissingFieldsError(missing)

        now = datetime.now(timezone.utc)
        record = review_to_record(
            {
                "comment": data.comment or "",
                "created_at": now.isoformat(),
                "helpful": 0,
                "hotel_id": data.hotel_id,
                "rating": data.rating,
                "stay_date": data.stay_date or now.date().isoformat(),
                "title": data.title,
                "updated_at": now.isoformat(),
                "user_avatar": data.user_avatar,
                "user_id": data.user_id,
                "user_name": data.user_name or "Anonymous",
                "verified": True,
            }
        )
        record["Name"] = f"Review - {data.title}"

        return map_review(await self._create_one(record))

    async def update(self, review_id: int, updates: ReviewUpdate | dict[str, Any]) -> Review:
        values = ReviewUpdate.model_validate(updates).model_dump(exclude_unset=True)
        values["updated_at"] = datetime.now(timezone.utc).isoformat()
        await self._update_one(review_id, review_to_record(values))
        return await self.get_by_id(review_id)

    async def get_hotel_stats(self, hotel_id: int) -> HotelStats:
        reviews = await self.get_by_hotel_id(int(hotel_id))
        logger.debug("Aggregating %d review(s) for hotel %s", len(reviews), hotel_id)
        return compute_stats(reviews)
