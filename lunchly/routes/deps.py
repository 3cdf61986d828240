"""FastAPI dependencies that hand stores to the routers."""

from lunchly.stores.customers import CustomerStore
from lunchly.stores.postgres import get_session_factory
from lunchly.stores.reservations import ReservationStore

# Ids are Postgres `integer` columns; larger values cannot be bound as parameters.
MAX_ID = 2**31 - 1


def get_customer_store() -> CustomerStore:
    return CustomerStore(get_session_factory())


def get_reservation_store() -> ReservationStore:
    return ReservationStore(get_session_factory())
