"""Schemas for the customer endpoints (/v1/customers)."""

from pydantic import BaseModel, Field

from lunchly.models import Customer, CustomerReservationCount
from lunchly.schemas.reservations import ReservationOut


class CustomerIn(BaseModel):
    """Request body for creating or editing a customer."""

    first_name: str = Field(alias="firstName", min_length=1)
    last_name: str = Field(alias="lastName", min_length=1)
    phone: str | None = None
    notes: str | None = None

    model_config = {"populate_by_name": True}


class CustomerOut(BaseModel):
    """A single customer."""

    id: int
    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")
    full_name: str = Field(alias="fullName")
    phone: str | None = None
    notes: str = ""

    model_config = {"populate_by_name": True}

    @classmethod
    def from_customer(cls, customer: Customer) -> "CustomerOut":
        return cls(
            id=customer.id,
            first_name=customer.first_name,
            last_name=customer.last_name,
            full_name=customer.full_name,
            phone=customer.phone,
            notes=customer.notes,
        )


class CustomerDetail(BaseModel):
    """Customer together with all of their reservations."""

    customer: CustomerOut
    reservations: list[ReservationOut] = Field(default_factory=list)


class TopCustomer(BaseModel):
    """Entry in the top customers ranking."""

    customer: CustomerOut
    reservation_count: int = Field(alias="reservationCount", ge=1)

    model_config = {"populate_by_name": True}

    @classmethod
    def from_entry(cls, entry: CustomerReservationCount) -> "TopCustomer":
        return cls(
            customer=CustomerOut.from_customer(entry.customer),
            reservation_count=entry.reservation_count,
        )
