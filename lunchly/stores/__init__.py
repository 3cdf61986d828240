"""Data stores for persistence.

Stores handle:
- PostgreSQL: engine, session factory, table lifecycle
- Customers: listing, lookup, name search, reservation-count ranking, save
- Reservations: per-customer listing, lookup, save

Each store receives its session factory through the constructor.
No business/presentation logic in stores - that belongs in routes.
"""
