"""Customer endpoints.

GET  /v1/customers                          - all customers, by last then first name
GET  /v1/customers/search?search=           - name search
GET  /v1/customers/top-ten                  - customers with most reservations
POST /v1/customers                          - add a customer
GET  /v1/customers/{id}                     - customer with reservations
PUT  /v1/customers/{id}                     - edit a customer
POST /v1/customers/{id}/reservations        - add a reservation for a customer

Routers are thin: call stores for data access.
"""

from fastapi import APIRouter, Depends, Path, Query, status

from lunchly.models import Customer, Reservation
from lunchly.routes.deps import MAX_ID, get_customer_store, get_reservation_store
from lunchly.schemas import (
    CustomerDetail,
    CustomerIn,
    CustomerOut,
    ReservationIn,
    ReservationOut,
    TopCustomer,
)
from lunchly.settings import get_settings
from lunchly.stores.customers import CustomerStore
from lunchly.stores.reservations import ReservationStore

router = APIRouter()


@router.get("", response_model=list[CustomerOut])
async def list_customers(
    customers: CustomerStore = Depends(get_customer_store),
) -> list[CustomerOut]:
    """List every customer."""
    return [CustomerOut.from_customer(c) for c in await customers.list_all()]


@router.get("/search", response_model=list[CustomerOut])
async def search_customers(
    search: str = Query(
        default="",
        description="Substring of the customer's full name (case-insensitive)",
        examples=["ada", "lovelace"],
    ),
    customers: CustomerStore = Depends(get_customer_store),
) -> list[CustomerOut]:
    """Search customers by name.

    Raises:
        NotFoundError (404): If no customer matches.
    """
    return [CustomerOut.from_customer(c) for c in await customers.search_by_name(search)]


@router.get("/top-ten", response_model=list[TopCustomer])
async def top_customers(
    customers: CustomerStore = Depends(get_customer_store),
) -> list[TopCustomer]:
    """Customers with the most reservations, highest count first."""
    limit = get_settings().top_customers_limit
    entries = await customers.top_by_reservation_count(limit=limit)
    return [TopCustomer.from_entry(entry) for entry in entries]


@router.post("", response_model=CustomerOut, status_code=status.HTTP_201_CREATED)
async def add_customer(
    body: CustomerIn,
    customers: CustomerStore = Depends(get_customer_store),
) -> CustomerOut:
    """Add a new customer."""
    customer = Customer(
        first_name=body.first_name,
        last_name=body.last_name,
        phone=body.phone,
        notes=body.notes,
    )
    await customers.save(customer)
    return CustomerOut.from_customer(customer)


@router.get("/{customer_id}", response_model=CustomerDetail)
async def get_customer(
    customer_id: int = Path(ge=1, le=MAX_ID),
    customers: CustomerStore = Depends(get_customer_store),
    reservations: ReservationStore = Depends(get_reservation_store),
) -> CustomerDetail:
    """Show a customer and their reservations."""
    customer = await customers.get_by_id(customer_id)
    customer_reservations = await reservations.get_for_customer(customer.id)

    return CustomerDetail(
        customer=CustomerOut.from_customer(customer),
        reservations=[ReservationOut.from_reservation(r) for r in customer_reservations],
    )


@router.put("/{customer_id}", response_model=CustomerOut)
async def edit_customer(
    body: CustomerIn,
    customer_id: int = Path(ge=1, le=MAX_ID),
    customers: CustomerStore = Depends(get_customer_store),
) -> CustomerOut:
    """Edit a customer. Every field is overwritten with the submitted value."""
    customer = await customers.get_by_id(customer_id)
    customer.first_name = body.first_name
    customer.last_name = body.last_name
    customer.phone = body.phone
    customer.notes = body.notes
    await customers.save(customer)
    return CustomerOut.from_customer(customer)


@router.post(
    "/{customer_id}/reservations",
    response_model=ReservationOut,
    status_code=status.HTTP_201_CREATED,
)
async def add_reservation(
    body: ReservationIn,
    customer_id: int = Path(ge=1, le=MAX_ID),
    customers: CustomerStore = Depends(get_customer_store),
    reservations: ReservationStore = Depends(get_reservation_store),
) -> ReservationOut:
    """Add a reservation for an existing customer."""
    customer = await customers.get_by_id(customer_id)

    reservation = Reservation(
        customer_id=customer.id,
        start_at=body.start_at,
        num_guests=body.num_guests,
        notes=body.notes,
    )
    await reservations.save(reservation)
    return ReservationOut.from_reservation(reservation)
