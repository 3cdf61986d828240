"""Reservation model.

A reservation always belongs to an existing customer. The customer it
belongs to is fixed at creation: updates never rewrite `customer_id`.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from sqlalchemy import DateTime, ForeignKey, Text
from sqlalchemy.orm import Mapped, mapped_column

from lunchly.models.mapping import require_column
from lunchly.stores.postgres import Base


class ReservationRecord(Base):
    """Row in the reservations table."""

    __tablename__ = "reservations"

    id: Mapped[int] = mapped_column(primary_key=True)

    customer_id: Mapped[int] = mapped_column(ForeignKey("customers.id"), index=True)

    start_at: Mapped[datetime] = mapped_column(DateTime(timezone=False))
    num_guests: Mapped[int] = mapped_column()
    notes: Mapped[str | None] = mapped_column(Text)

    def __repr__(self) -> str:
        return f"<ReservationRecord {self.id} customer={self.customer_id}>"


def _ordinal(day: int) -> str:
    if 11 <= day % 100 <= 13:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")
    return f"{day}{suffix}"


@dataclass
class Reservation:
    """A table reservation for a customer."""

    customer_id: int
    start_at: datetime
    num_guests: int
    notes: str | None = None
    id: int | None = None

    @property
    def formatted_start_at(self) -> str:
        """Start time for display, e.g. "March 5th 2026, 7:30 pm"."""
        hour = self.start_at.hour % 12 or 12
        meridiem = "am" if self.start_at.hour < 12 else "pm"
        return (
            f"{self.start_at:%B} {_ordinal(self.start_at.day)} {self.start_at:%Y}, "
            f"{hour}:{self.start_at:%M} {meridiem}"
        )


def reservation_from_row(row: Mapping[str, Any]) -> Reservation:
    """Build a Reservation from a reservations row mapping."""
    return Reservation(
        id=require_column(row, "reservations", "id", int),
        customer_id=require_column(row, "reservations", "customer_id", int),
        start_at=require_column(row, "reservations", "start_at", datetime),
        num_guests=require_column(row, "reservations", "num_guests", int),
        notes=require_column(row, "reservations", "notes", str, nullable=True),
    )
