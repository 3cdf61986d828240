"""Customer model.

`CustomerRecord` maps the `customers` table; `Customer` is the plain domain
object the stores hand to callers. `customer_from_row` converts between the two.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column

from lunchly.models.mapping import require_column
from lunchly.stores.postgres import Base


class CustomerRecord(Base):
    """Row in the customers table."""

    __tablename__ = "customers"

    id: Mapped[int] = mapped_column(primary_key=True)

    first_name: Mapped[str] = mapped_column(Text)
    last_name: Mapped[str] = mapped_column(Text)
    phone: Mapped[str | None] = mapped_column(Text)
    notes: Mapped[str] = mapped_column(Text, default="", server_default="")

    def __repr__(self) -> str:
        return f"<CustomerRecord {self.id} {self.first_name} {self.last_name}>"


@dataclass
class Customer:
    """Customer of the restaurant.

    `id` stays None until the customer is saved for the first time.
    """

    first_name: str
    last_name: str
    phone: str | None = None
    notes: str = ""
    id: int | None = None

    def __post_init__(self) -> None:
        if self.notes is None:
            self.notes = ""

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


@dataclass(frozen=True)
class CustomerReservationCount:
    """A customer paired with how many reservations they hold."""

    customer: Customer
    reservation_count: int


def customer_from_row(row: Mapping[str, Any]) -> Customer:
    """Build a Customer from a customers row mapping."""
    return Customer(
        id=require_column(row, "customers", "id", int),
        first_name=require_column(row, "customers", "first_name", str),
        last_name=require_column(row, "customers", "last_name", str),
        phone=require_column(row, "customers", "phone", str, nullable=True),
        notes=require_column(row, "customers", "notes", str, nullable=True) or "",
    )
