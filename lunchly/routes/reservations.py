"""Reservation endpoints.

GET /v1/reservations/{id} - single reservation
PUT /v1/reservations/{id} - edit start time, guest count and notes
"""

from fastapi import APIRouter, Depends, Path

from lunchly.routes.deps import MAX_ID, get_reservation_store
from lunchly.schemas import ReservationIn, ReservationOut
from lunchly.stores.reservations import ReservationStore

router = APIRouter()


@router.get("/{reservation_id}", response_model=ReservationOut)
async def get_reservation(
    reservation_id: int = Path(ge=1, le=MAX_ID),
    reservations: ReservationStore = Depends(get_reservation_store),
) -> ReservationOut:
    """Show a single reservation."""
    reservation = await reservations.get_by_id(reservation_id)
    return ReservationOut.from_reservation(reservation)


@router.put("/{reservation_id}", response_model=ReservationOut)
async def edit_reservation(
    body: ReservationIn,
    reservation_id: int = Path(ge=1, le=MAX_ID),
    reservations: ReservationStore = Depends(get_reservation_store),
) -> ReservationOut:
    """Edit a reservation. The owning customer cannot be changed."""
    reservation = await reservations.get_by_id(reservation_id)
    reservation.start_at = body.start_at
    reservation.num_guests = body.num_guests
    reservation.notes = body.notes
    await reservations.save(reservation)
    return ReservationOut.from_reservation(reservation)
