#!/usr/bin/env python3
"""Seed database with sample customers and reservations.

Creates:
- A handful of customers
- Reservations spread across them, so the top-ten ranking has an order

The script is idempotent: it does nothing when customers already exist.

Usage:
    python -m scripts.seed
"""

import asyncio
import os
import sys
from datetime import datetime, timedelta

# Add parent to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv

from lunchly.models import Customer, Reservation
from lunchly.stores.customers import CustomerStore
from lunchly.stores.postgres import close_db, create_tables, get_session_factory, init_db
from lunchly.stores.reservations import ReservationStore

load_dotenv()

# ============================================================
# Sample data
# ============================================================

CUSTOMERS = [
    {"first_name": "Ada", "last_name": "Lovelace", "phone": "555-0100", "notes": "Prefers a window table"},
    {"first_name": "Grace", "last_name": "Hopper", "phone": "555-0101", "notes": ""},
    {"first_name": "Alan", "last_name": "Turing", "phone": None, "notes": "Allergic to nuts"},
    {"first_name": "Katherine", "last_name": "Johnson", "phone": "555-0103", "notes": ""},
    {"first_name": "Edsger", "last_name": "Dijkstra", "phone": "555-0104", "notes": ""},
]

# Reservations per customer (index into CUSTOMERS -> count)
RESERVATION_COUNTS = {0: 4, 1: 2, 2: 3, 3: 1}


async def seed() -> None:
    await init_db()
    try:
        await create_tables()
        factory = get_session_factory()
        customers = CustomerStore(factory)
        reservations = ReservationStore(factory)

        if await customers.list_all():
            print("Customers already present, skipping seed")
            return

        saved: list[Customer] = []
        for data in CUSTOMERS:
            customer = Customer(**data)
            await customers.save(customer)
            saved.append(customer)
        print(f"Created {len(saved)} customers")

        base = datetime.now().replace(hour=19, minute=0, second=0, microsecond=0)
        created = 0
        for index, count in RESERVATION_COUNTS.items():
            for n in range(count):
                reservation = Reservation(
                    customer_id=saved[index].id,
                    start_at=base + timedelta(days=7 * n + index),
                    num_guests=2 + n,
                    notes="Birthday" if n == 0 else None,
                )
                await reservations.save(reservation)
                created += 1
        print(f"Created {created} reservations")
    finally:
        await close_db()


if __name__ == "__main__":
    asyncio.run(seed())
