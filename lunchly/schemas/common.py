"""Error schemas shared by every endpoint."""

from typing import Any

from pydantic import BaseModel


class ErrorDetail(BaseModel):
    """Structured error detail."""

    code: str
    message: str
    detail: dict[str, Any] | None = None


class ErrorResponse(BaseModel):
    """Standard error response format.

    Format: { "error": { "code": str, "message": str, "detail": object } }

    Codes in use: NOT_FOUND, INTERNAL_ERROR.
    """

    error: ErrorDetail

    @classmethod
    def of(cls, code: str, message: str) -> dict[str, Any]:
        """Build the JSON body for an error response."""
        return cls(error=ErrorDetail(code=code, message=message)).model_dump()
