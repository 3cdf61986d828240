"""Shared fixtures: an in-memory SQLite database behind the real stores."""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from lunchly.main import app
from lunchly.routes.deps import get_customer_store, get_reservation_store
from lunchly.stores.customers import CustomerStore
from lunchly.stores.postgres import create_tables, make_session_factory
from lunchly.stores.reservations import ReservationStore


@pytest.fixture
async def engine():
    """Fresh in-memory database per test; StaticPool keeps one shared connection."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return make_session_factory(engine)


@pytest.fixture
def customers(session_factory) -> CustomerStore:
    return CustomerStore(session_factory)


@pytest.fixture
def reservations(session_factory) -> ReservationStore:
    return ReservationStore(session_factory)


@pytest.fixture
async def client(customers: CustomerStore, reservations: ReservationStore):
    """Test client whose routes use the SQLite-backed stores."""
    app.dependency_overrides[get_customer_store] = lambda: customers
    app.dependency_overrides[get_reservation_store] = lambda: reservations
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
    app.dependency_overrides.clear()
