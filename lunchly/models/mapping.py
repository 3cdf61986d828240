"""Strict row-to-object helpers shared by the record mappers."""

from collections.abc import Mapping
from typing import Any

from lunchly.errors import RowMappingError


def require_column(
    row: Mapping[str, Any],
    table: str,
    column: str,
    expected: type | tuple[type, ...],
    *,
    nullable: bool = False,
) -> Any:
    """Read `column` from a result row, failing fast on absence or a bad type."""
    if column not in row:
        raise RowMappingError(f"{table} row is missing column {column!r}")

    value = row[column]
    if value is None:
        if nullable:
            return None
        raise RowMappingError(f"{table}.{column} is NULL")
    if not isinstance(value, expected):
        raise RowMappingError(
            f"{table}.{column} has type {type(value).__name__}, expected {expected}"
        )
    return value
