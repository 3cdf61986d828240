"""Tests for error responses: 500 INTERNAL_ERROR bodies and id bounds."""

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from lunchly.errors import RowMappingError
from lunchly.main import app, create_app
from lunchly.routes.deps import MAX_ID, get_customer_store
from lunchly.settings import Settings
from lunchly.stores.customers import CustomerStore
from lunchly.stores.postgres import drop_tables


class BrokenRowStore:
    """Customer store stand-in whose rows fail to map."""

    async def get_by_id(self, customer_id: int):
        raise RowMappingError("customers.first_name is NULL")


def _client(target: FastAPI) -> AsyncClient:
    """Client that returns the 500 response instead of re-raising the error."""
    return AsyncClient(
        transport=ASGITransport(app=target, raise_app_exceptions=False),
        base_url="http://test",
    )


@pytest.mark.asyncio
async def test_storage_failure_returns_internal_error(engine, customers: CustomerStore):
    """Test a database error becomes a 500 without leaking its message."""
    await drop_tables(engine)
    app.dependency_overrides[get_customer_store] = lambda: customers
    try:
        async with _client(app) as ac:
            response = await ac.get("/v1/customers")
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 500
    assert response.json() == {
        "error": {"code": "INTERNAL_ERROR", "message": "Internal server error", "detail": None}
    }


@pytest.mark.asyncio
async def test_storage_failure_message_shown_in_debug(engine, customers: CustomerStore):
    """Test debug mode puts the exception text in the 500 body."""
    debug_app = create_app(Settings(debug=True))
    debug_app.dependency_overrides[get_customer_store] = lambda: customers
    await drop_tables(engine)

    async with _client(debug_app) as ac:
        response = await ac.get("/v1/customers")

    assert response.status_code == 500
    error = response.json()["error"]
    assert error["code"] == "INTERNAL_ERROR"
    assert "no such table" in error["message"]


@pytest.mark.asyncio
async def test_row_mapping_failure_returns_internal_error():
    """Test a malformed row surfaces as a 500, not a partial customer."""
    app.dependency_overrides[get_customer_store] = lambda: BrokenRowStore()
    try:
        async with _client(app) as ac:
            response = await ac.put(
                "/v1/customers/1", json={"firstName": "Ada", "lastName": "Lovelace"}
            )
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 500
    assert response.json()["error"]["code"] == "INTERNAL_ERROR"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "path",
    [
        f"/v1/customers/{MAX_ID + 1}",
        "/v1/customers/9999999999",
        f"/v1/reservations/{MAX_ID + 1}",
    ],
)
async def test_ids_beyond_integer_column_are_rejected(client: AsyncClient, path: str):
    """Test ids too large for the key column fail validation instead of reaching the driver."""
    response = await client.get(path)
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_largest_valid_id_is_a_plain_miss(client: AsyncClient):
    """Test the biggest storable id is looked up and reported as not found."""
    response = await client.get(f"/v1/customers/{MAX_ID}")
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "NOT_FOUND"
