"""API routes."""

from fastapi import APIRouter

from lunchly.routes import customers, reservations

api_router = APIRouter()

# Customer pages (list, search, top-ten, detail, add/edit)
api_router.include_router(customers.router, prefix="/v1/customers", tags=["customers"])

# Reservation detail and edit
api_router.include_router(reservations.router, prefix="/v1/reservations", tags=["reservations"])
