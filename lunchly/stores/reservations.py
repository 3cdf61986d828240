"""Reservation store.

Reservations are always read in the scope of one customer, or fetched by id.
Saving follows the customer store: insert without id, update with id.
"""

import logging

from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from lunchly.errors import NotFoundError
from lunchly.models import Reservation, ReservationRecord, reservation_from_row
from lunchly.stores.postgres import get_session

logger = logging.getLogger("uvicorn.error")

RESERVATION_COLUMNS = (
    ReservationRecord.id,
    ReservationRecord.customer_id,
    ReservationRecord.start_at,
    ReservationRecord.num_guests,
    ReservationRecord.notes,
)


class ReservationStore:
    """Data access for reservations."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def get_for_customer(self, customer_id: int) -> list[Reservation]:
        """Get all reservations of a customer, in the order they were created."""
        query = (
            select(*RESERVATION_COLUMNS)
            .where(ReservationRecord.customer_id == customer_id)
            .order_by(ReservationRecord.id)
        )

        async with get_session(self._session_factory) as session:
            result = await session.execute(query)
            rows = result.mappings().all()

        return [reservation_from_row(row) for row in rows]

    async def get_by_id(self, reservation_id: int) -> Reservation:
        """Get a reservation by id.

        Raises:
            NotFoundError: If no reservation has this id.
        """
        query = select(*RESERVATION_COLUMNS).where(ReservationRecord.id == reservation_id)

        async with get_session(self._session_factory) as session:
            result = await session.execute(query)
            row = result.mappings().one_or_none()

        if row is None:
            raise NotFoundError(f"No such reservation: {reservation_id}")

        return reservation_from_row(row)

    async def save(self, reservation: Reservation) -> None:
        """Insert or update a reservation.

        The update path rewrites start time, guest count and notes; the owning
        customer is left as created.
        """
        async with get_session(self._session_factory) as session:
            if reservation.id is None:
                result = await session.execute(
                    insert(ReservationRecord)
                    .values(
                        customer_id=reservation.customer_id,
                        start_at=reservation.start_at,
                        num_guests=reservation.num_guests,
                        notes=reservation.notes,
                    )
                    .returning(ReservationRecord.id)
                )
                reservation.id = result.scalar_one()
                logger.info(
                    f"Reservation {reservation.id} created for customer {reservation.customer_id}"
                )
            else:
                result = await session.execute(
                    update(ReservationRecord)
                    .where(ReservationRecord.id == reservation.id)
                    .values(
                        start_at=reservation.start_at,
                        num_guests=reservation.num_guests,
                        notes=reservation.notes,
                    )
                )
                if result.rowcount == 0:
                    raise NotFoundError(f"No such reservation: {reservation.id}")
                logger.info(f"Reservation {reservation.id} updated")
