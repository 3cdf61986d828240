"""Pydantic schemas for API request/response validation."""

from lunchly.schemas.common import ErrorDetail, ErrorResponse
from lunchly.schemas.reservations import ReservationIn, ReservationOut
from lunchly.schemas.customers import (
    CustomerDetail,
    CustomerIn,
    CustomerOut,
    TopCustomer,
)

__all__ = [
    "ErrorDetail",
    "ErrorResponse",
    "CustomerDetail",
    "CustomerIn",
    "CustomerOut",
    "ReservationIn",
    "ReservationOut",
    "TopCustomer",
]
