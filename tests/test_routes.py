"""Tests for the HTTP layer, backed by the in-memory stores."""

import pytest
from httpx import AsyncClient


async def _create(client: AsyncClient, first: str, last: str, **extra) -> dict:
    response = await client.post("/v1/customers", json={"firstName": first, "lastName": last, **extra})
    assert response.status_code == 201
    return response.json()


@pytest.mark.asyncio
async def test_health_check(client: AsyncClient):
    """Test health endpoint returns ok."""
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"ok": True}


@pytest.mark.asyncio
async def test_add_customer_returns_created_customer(client: AsyncClient):
    """Test adding a customer returns it with its new id."""
    data = await _create(client, "Ada", "Lovelace", phone="555-0100")

    assert data["id"] == 1
    assert data["fullName"] == "Ada Lovelace"
    assert data["phone"] == "555-0100"
    assert data["notes"] == ""


@pytest.mark.asyncio
async def test_add_customer_rejects_blank_name(client: AsyncClient):
    """Test a blank first name is rejected with 422."""
    response = await client.post("/v1/customers", json={"firstName": "", "lastName": "Lovelace"})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_list_customers_sorted_by_last_name(client: AsyncClient):
    """Test the customer list is ordered by last name."""
    await _create(client, "Grace", "Hopper")
    await _create(client, "Ada", "Lovelace")
    await _create(client, "Charles", "Babbage")

    response = await client.get("/v1/customers")
    assert response.status_code == 200
    assert [c["lastName"] for c in response.json()] == ["Babbage", "Hopper", "Lovelace"]


@pytest.mark.asyncio
async def test_search_customers(client: AsyncClient):
    """Test name search over HTTP."""
    await _create(client, "Ada", "Lovelace")
    await _create(client, "Grace", "Hopper")

    response = await client.get("/v1/customers/search", params={"search": "hop"})
    assert response.status_code == 200
    assert [c["fullName"] for c in response.json()] == ["Grace Hopper"]


@pytest.mark.asyncio
async def test_search_without_matches_is_404(client: AsyncClient):
    """Test a search with no hits answers 404 NOT_FOUND."""
    await _create(client, "Ada", "Lovelace")

    response = await client.get("/v1/customers/search", params={"search": "zzz-no-such-name"})
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "NOT_FOUND"


@pytest.mark.asyncio
async def test_unknown_customer_is_404(client: AsyncClient):
    """Test an unknown customer id answers 404."""
    response = await client.get("/v1/customers/999")
    assert response.status_code == 404
    assert response.json()["error"]["message"] == "No such customer: 999"


@pytest.mark.asyncio
async def test_edit_customer(client: AsyncClient):
    """Test editing a customer overwrites every field."""
    ada = await _create(client, "Ada", "Lovelace")

    response = await client.put(
        f"/v1/customers/{ada['id']}",
        json={"firstName": "Augusta Ada", "lastName": "King", "phone": None, "notes": "Countess"},
    )
    assert response.status_code == 200

    detail = (await client.get(f"/v1/customers/{ada['id']}")).json()
    assert detail["customer"]["fullName"] == "Augusta Ada King"
    assert detail["customer"]["notes"] == "Countess"


@pytest.mark.asyncio
async def test_add_reservation_shows_on_customer_detail(client: AsyncClient):
    """Test a new reservation shows on the customer detail."""
    ada = await _create(client, "Ada", "Lovelace")

    response = await client.post(
        f"/v1/customers/{ada['id']}/reservations",
        json={"startAt": "2026-03-05T19:30:00", "numGuests": 4, "notes": "Window"},
    )
    assert response.status_code == 201
    reservation = response.json()
    assert reservation["customerId"] == ada["id"]
    assert reservation["formattedStartAt"] == "March 5th 2026, 7:30 pm"

    detail = (await client.get(f"/v1/customers/{ada['id']}")).json()
    assert [r["id"] for r in detail["reservations"]] == [reservation["id"]]


@pytest.mark.asyncio
async def test_add_reservation_for_unknown_customer_is_404(client: AsyncClient):
    """Test booking for an unknown customer answers 404."""
    response = await client.post(
        "/v1/customers/12/reservations",
        json={"startAt": "2026-03-05T19:30:00", "numGuests": 2},
    )
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_add_reservation_rejects_zero_guests(client: AsyncClient):
    """Test a reservation for zero guests is rejected with 422."""
    ada = await _create(client, "Ada", "Lovelace")
    response = await client.post(
        f"/v1/customers/{ada['id']}/reservations",
        json={"startAt": "2026-03-05T19:30:00", "numGuests": 0},
    )
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_aware_start_time_is_stored_as_utc(client: AsyncClient):
    """Test a start time with an offset is stored as naive UTC."""
    ada = await _create(client, "Ada", "Lovelace")
    response = await client.post(
        f"/v1/customers/{ada['id']}/reservations",
        json={"startAt": "2026-03-05T19:30:00+02:00", "numGuests": 2},
    )
    assert response.status_code == 201
    assert response.json()["startAt"] == "2026-03-05T17:30:00"


@pytest.mark.asyncio
async def test_edit_reservation(client: AsyncClient):
    """Test editing a reservation keeps its customer."""
    ada = await _create(client, "Ada", "Lovelace")
    created = (
        await client.post(
            f"/v1/customers/{ada['id']}/reservations",
            json={"startAt": "2026-03-05T19:30:00", "numGuests": 2},
        )
    ).json()

    response = await client.put(
        f"/v1/reservations/{created['id']}",
        json={"startAt": "2026-03-06T20:00:00", "numGuests": 3, "notes": "Moved"},
    )
    assert response.status_code == 200

    fetched = (await client.get(f"/v1/reservations/{created['id']}")).json()
    assert fetched["numGuests"] == 3
    assert fetched["notes"] == "Moved"
    assert fetched["startAt"] == "2026-03-06T20:00:00"
    assert fetched["customerId"] == ada["id"]


@pytest.mark.asyncio
async def test_unknown_reservation_is_404(client: AsyncClient):
    """Test an unknown reservation id answers 404."""
    response = await client.get("/v1/reservations/3")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_top_ten(client: AsyncClient):
    """Test the top-ten ranking over HTTP."""
    ada = await _create(client, "Ada", "Lovelace")
    grace = await _create(client, "Grace", "Hopper")
    await _create(client, "Alan", "Turing")

    for customer, count in ((ada, 1), (grace, 3)):
        for day in range(1, count + 1):
            await client.post(
                f"/v1/customers/{customer['id']}/reservations",
                json={"startAt": f"2026-04-{day:02d}T19:00:00", "numGuests": 2},
            )

    response = await client.get("/v1/customers/top-ten")
    assert response.status_code == 200
    assert [(e["customer"]["fullName"], e["reservationCount"]) for e in response.json()] == [
        ("Grace Hopper", 3),
        ("Ada Lovelace", 1),
    ]
