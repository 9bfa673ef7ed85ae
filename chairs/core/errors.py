"""
Error types raised inside the service.

Route handlers and the chain computation never build error bodies
themselves; these exceptions bubble up to the handlers registered in
`chairs.main`, which render the uniform envelope.
"""
from typing import Optional


class ChairsError(Exception):
    """Base error carrying an HTTP status and a stable error code."""

    def __init__(self, message: str, status_code: int = 500, code: str = "INTERNAL", detail: Optional[str] = None):
        self.message = message
        self.status_code = status_code
        self.code = code
        self.detail = detail or message
        super().__init__(message)


class AuthenticationError(ChairsError):
    def __init__(self, message: str = "Invalid token"):
        super().__init__(message, status_code=401, code="UNAUTHENTICATED")


class PermissionDeniedError(ChairsError):
    def __init__(self, message: str = "Admin only"):
        super().__init__(message, status_code=403, code="FORBIDDEN")


class DataAccessError(ChairsError):
    """The relational store could not answer a query."""

    def __init__(self, operation: str, detail: Optional[str] = None):
        super().__init__(
            f"Data access failed: {operation}",
            status_code=500,
            code="DATA_ACCESS_FAILED",
            detail=detail,
        )
