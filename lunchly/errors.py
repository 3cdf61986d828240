"""Errors raised by the Lunchly stores.

Stores never swallow database errors: SQLAlchemy and driver exceptions
propagate to the caller unchanged. The classes below cover the cases the
stores detect themselves.
"""


class LunchlyError(RuntimeError):
    pass


class NotFoundError(LunchlyError):
    """No row matched a lookup (by id, or a name search with zero hits)."""


class RowMappingError(LunchlyError):
    """A result row is missing a column or carries a value of the wrong type."""
