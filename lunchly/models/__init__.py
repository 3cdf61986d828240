"""SQLAlchemy ORM models and the domain objects mapped from them.

Models represent database tables:
- customers: restaurant customers
- reservations: table reservations, each owned by one customer
"""

from lunchly.models.customer import Customer, CustomerRecord, CustomerReservationCount, customer_from_row
from lunchly.models.reservation import Reservation, ReservationRecord, reservation_from_row

__all__ = [
    "Customer",
    "CustomerRecord",
    "CustomerReservationCount",
    "customer_from_row",
    "Reservation",
    "ReservationRecord",
    "reservation_from_row",
]
