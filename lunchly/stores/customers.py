"""Customer store.

Operations over the customers table:
- list_all: every customer, ordered by last name then first name
- get_by_id: single customer or NotFoundError
- search_by_name: case-insensitive substring match on "first last"
- top_by_reservation_count: customers with the most reservations
- save: insert when the customer has no id, update otherwise (last write wins)

Every call is one statement in its own session; nothing is cached.
"""

import logging

from sqlalchemy import func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from lunchly.errors import NotFoundError
from lunchly.models import (
    Customer,
    CustomerRecord,
    CustomerReservationCount,
    ReservationRecord,
    customer_from_row,
)
from lunchly.models.mapping import require_column
from lunchly.stores.postgres import get_session

logger = logging.getLogger("uvicorn.error")

CUSTOMER_COLUMNS = (
    CustomerRecord.id,
    CustomerRecord.first_name,
    CustomerRecord.last_name,
    CustomerRecord.phone,
    CustomerRecord.notes,
)


class CustomerStore:
    """Data access for customers."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def list_all(self) -> list[Customer]:
        """Get all customers ordered by last name, then first name."""
        query = select(*CUSTOMER_COLUMNS).order_by(
            CustomerRecord.last_name,
            CustomerRecord.first_name,
        )

        async with get_session(self._session_factory) as session:
            result = await session.execute(query)
            rows = result.mappings().all()

        return [customer_from_row(row) for row in rows]

    async def get_by_id(self, customer_id: int) -> Customer:
        """Get a customer by id.

        Raises:
            NotFoundError: If no customer has this id.
        """
        query = select(*CUSTOMER_COLUMNS).where(CustomerRecord.id == customer_id)

        async with get_session(self._session_factory) as session:
            result = await session.execute(query)
            row = result.mappings().one_or_none()

        if row is None:
            raise NotFoundError(f"No such customer: {customer_id}")

        return customer_from_row(row)

    async def search_by_name(self, name: str) -> list[Customer]:
        """Find customers whose "first last" name contains `name`, ignoring case.

        An empty `name` matches every customer. Results are ordered by first
        name, then last name.

        Raises:
            NotFoundError: If nothing matches. Callers that want an empty list
                for "no hits" should catch it.
        """
        full_name = CustomerRecord.first_name + " " + CustomerRecord.last_name
        query = (
            select(*CUSTOMER_COLUMNS)
            .where(full_name.ilike(f"%{name}%"))
            .order_by(CustomerRecord.first_name, CustomerRecord.last_name)
        )

        async with get_session(self._session_factory) as session:
            result = await session.execute(query)
            rows = result.mappings().all()

        logger.debug(f"Customer search {name!r}: {len(rows)} match(es)")

        if not rows:
            raise NotFoundError(f"No customers matching name: {name}")

        return [customer_from_row(row) for row in rows]

    async def top_by_reservation_count(self, limit: int = 10) -> list[CustomerReservationCount]:
        """Get the customers holding the most reservations.

        Customers without reservations never appear (inner join). Ties are
        broken by customer id.

        Args:
            limit: Maximum number of entries to return.

        Returns:
            CustomerReservationCount entries, highest count first.
        """
        if limit < 0:
            raise ValueError(f"limit must be >= 0, got {limit}")

        reservation_count = func.count(ReservationRecord.id).label("reservation_count")
        query = (
            select(*CUSTOMER_COLUMNS, reservation_count)
            .select_from(CustomerRecord)
            .join(ReservationRecord, ReservationRecord.customer_id == CustomerRecord.id)
            .group_by(*CUSTOMER_COLUMNS)
            .order_by(reservation_count.desc(), CustomerRecord.id)
            .limit(limit)
        )

        async with get_session(self._session_factory) as session:
            result = await session.execute(query)
            rows = result.mappings().all()

        return [
            CustomerReservationCount(
                customer=customer_from_row(row),
                reservation_count=require_column(row, "customers", "reservation_count", int),
            )
            for row in rows
        ]

    async def save(self, customer: Customer) -> None:
        """Insert or update a customer.

        A customer without an id is inserted and receives the generated id.
        A customer with an id has all of its mutable fields overwritten.

        Raises:
            NotFoundError: If updating an id that has no row.
        """
        values = {
            "first_name": customer.first_name,
            "last_name": customer.last_name,
            "phone": customer.phone,
            "notes": customer.notes or "",
        }

        async with get_session(self._session_factory) as session:
            if customer.id is None:
                result = await session.execute(
                    insert(CustomerRecord).values(**values).returning(CustomerRecord.id)
                )
                customer.id = result.scalar_one()
                logger.info(f"Customer {customer.id} created ({customer.full_name})")
            else:
                result = await session.execute(
                    update(CustomerRecord)
                    .where(CustomerRecord.id == customer.id)
                    .values(**values)
                )
                if result.rowcount == 0:
                    raise NotFoundError(f"No such customer: {customer.id}")
                logger.info(f"Customer {customer.id} updated")

        customer.notes = values["notes"]
