import httpx
import pytest
from httpx import ASGITransport

from app.notifications import CollectingNotifier
from app.services.bookings import BookingService
from app.services.hotels import HotelService
from app.services.reviews import ReviewService
from app.services.users import UserService
from tests.fakes import FakeTableClient

HOTEL_ROWS = [
    {
        "Id": 1,
        "Name": "Grand Plaza",
        "name_c": "Grand Plaza",
        "address_c": "1 Main St",
        "available_c": True,
        "description_c": "Downtown landmark",
        "featured_c": True,
        "city_c": "Chicago",
        "state_c": "IL",
        "country_c": "USA",
        "coordinates_c": "41.88,-87.63",
        "price_per_night_c": 200.0,
        "rating_c": 4.2,
        "review_count_c": 10,
        "star_rating_c": 4,
    },
    {
        "Id": 2,
        "Name": "Seaside Inn",
        "name_c": "Seaside Inn",
        "available_c": False,
        "description_c": "Quiet beach stay",
        "featured_c": False,
        "city_c": "Miami",
        "state_c": "FL",
        "country_c": "USA",
        "price_per_night_c": 120.0,
        "rating_c": 3.8,
        "review_count_c": 4,
        "star_rating_c": 3,
    },
]

REVIEW_ROWS = [
    {
        "Id": 1,
        "hotel_id_c": {"Id": 1, "Name": "Grand Plaza"},
        "user_id_c": 7,
        "user_name_c": "Dana",
        "rating_c": 5,
        "title_c": "Wonderful stay",
        "comment_c": "Great staff",
        "photos": '["a.jpg"]',
        "created_at_c": "2026-01-01T10:00:00+00:00",
        "helpful_c": 2,
        "verified_c": True,
    },
    {
        "Id": 2,
        "hotel_id_c": 1,
        "user_id_c": 8,
        "rating_c": 5,
        "title_c": "Loved it",
        "created_at_c": "2026-01-02T10:00:00+00:00",
    },
    {
        "Id": 3,
        "hotel_id_c": 1,
        "user_id_c": 9,
        "rating_c": 4,
        "title_c": "Good value",
        "photos": "not json",
        "created_at_c": "2026-01-03T10:00:00+00:00",
    },
]

USER_ROWS = [
    {
        "Id": 7,
        "Name": "Dana Reyes",
        "name_c": "Dana Reyes",
        "first_name_c": "Dana",
        "last_name_c": "Reyes",
        "email_c": "dana@example.com",
        "phone_c": "+1 555 0100",
        "loyalty_status_c": "Gold",
        "member_since_c": "2021-03-14",
        "total_bookings_c": 12,
        "room_type_c": "King",
        "bed_type_c": "King",
        "smoking_preference_c": "Non-smoking",
        "floor_preference_c": "High",
        "newsletter_c": True,
    },
]


@pytest.fixture
def fake_table() -> FakeTableClient:
    return FakeTableClient(
        {
            "hotel_c": HOTEL_ROWS,
            "review_c": REVIEW_ROWS,
            "user_c": USER_ROWS,
            "booking_c": [],
        }
    )


@pytest.fixture
def notifier() -> CollectingNotifier:
    return CollectingNotifier()


@pytest.fixture
def mock_env(monkeypatch):
    monkeypatch.setenv("APPER_PROJECT_ID", "test-project")
    monkeypatch.setenv("APPER_PUBLIC_KEY", "test-key")
    monkeypatch.setenv("APPER_BASE_URL", "https://apper.test/v1")


@pytest.fixture
async def client(mock_env, fake_table, notifier):
    from app.main import app, lifespan

    async with lifespan(app):
        reviews = ReviewService(fake_table, notifier)
        app.state.review_service = reviews
        app.state.booking_service = BookingService(fake_table, notifier)
        app.state.hotel_service = HotelService(fake_table, notifier, stats_provider=reviews)
        app.state.user_service = UserService(fake_table, notifier)

        async with httpx.AsyncClient(
            transport=ASGITransport(app=app),
            base_url="http://test",
        ) as c:
            yield c
