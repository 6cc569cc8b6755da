async def test_list_hotels_with_filters(client):
    resp = await client.get(
        "/hotels", params={"minPrice": 150, "starRating": [4, 5], "sortBy": "name"}
    )

    assert resp.status_code == 200
    hotels = resp.json()
    assert [h["name"] for h in hotels] == ["Grand Plaza"]
    assert hotels[0]["location"]["city"] == "Chicago"
    assert hotels[0]["pricePerNight"] == 200.0


async def test_list_hotels_backend_failure_is_empty(client, fake_table, notifier):
    fake_table.fail("fetch_records", "Backend offline")

    resp = await client.get("/hotels")

    assert resp.status_code == 200
    assert resp.json() == []
    assert notifier.messages == ["Backend offline"]


async def test_get_hotel_enriched(client):
    resp = await client.get("/hotels/1")

    assert resp.status_code == 200
    hotel = resp.json()
    assert hotel["rating"] == 4.7
    assert hotel["reviewCount"] == 3
    assert hotel["reviewStats"] == {"1": 0, "2": 0, "3": 0, "4": 1, "5": 2}


async def test_get_hotel_remote_failure(client, fake_table):
    fake_table.fail("get_record_by_id", "Permission denied")

    resp = await client.get("/hotels/1")

    assert resp.status_code == 502
    assert resp.json()["detail"] == "Permission denied"


async def test_search_and_featured(client):
    resp = await client.get("/hotels/search", params={"q": "plaza"})
    assert [h["Id"] for h in resp.json()] == [1]

    resp = await client.get("/hotels/featured")
    assert [h["Id"] for h in resp.json()] == [1]


async def test_availability_unavailable_hotel(client):
    resp = await client.get(
        "/hotels/2/availability", params={"checkIn": "2030-01-01", "checkOut": "2030-01-02"}
    )

    assert resp.status_code == 200
    body = resp.json()
    assert body["available"] is False
    assert body["rooms"] == []
    assert body["simulated"] is True


async def test_hotel_reviews(client):
    resp = await client.get("/hotels/1/reviews")

    assert len(resp.json()) == 3
