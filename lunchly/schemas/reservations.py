"""Schemas for reservation payloads."""

from datetime import datetime, timezone

from pydantic import BaseModel, Field, field_validator

from lunchly.models import Reservation


class ReservationIn(BaseModel):
    """Request body for adding or editing a reservation."""

    start_at: datetime = Field(alias="startAt")
    num_guests: int = Field(alias="numGuests", ge=1)
    notes: str | None = None

    model_config = {"populate_by_name": True}

    @field_validator("start_at")
    @classmethod
    def _to_naive_utc(cls, v: datetime) -> datetime:
        """start_at is stored without time zone; aware values are converted to UTC."""
        if v.tzinfo is not None:
            return v.astimezone(timezone.utc).replace(tzinfo=None)
        return v


class ReservationOut(BaseModel):
    """A single reservation."""

    id: int
    customer_id: int = Field(alias="customerId")
    start_at: datetime = Field(alias="startAt")
    formatted_start_at: str = Field(alias="formattedStartAt")
    num_guests: int = Field(alias="numGuests")
    notes: str | None = None

    model_config = {"populate_by_name": True}

    @classmethod
    def from_reservation(cls, reservation: Reservation) -> "ReservationOut":
        return cls(
            id=reservation.id,
            customer_id=reservation.customer_id,
            start_at=reservation.start_at,
            formatted_start_at=reservation.formatted_start_at,
            num_guests=reservation.num_guests,
            notes=reservation.notes,
        )
