"""
Error taxonomy for connection, lookup, query and close failures.

Every error carries the HTTP status it maps to and the fixed operation-level
message; the underlying driver message travels as ``error``.
"""
from fastapi import Request, status
from fastapi.responses import JSONResponse


class BrowserError(Exception):
    """Base class for failures reported to API clients."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Request failed"

    def __init__(self, error: str, message: str | None = None):
        super().__init__(error)
        self.error = error
        if message is not None:
            self.message = message

    def to_dict(self) -> dict:
        """Structured response body."""
        return {
            "success": False,
            "message": self.message,
            "error": self.error,
        }


class ConnectFailure(BrowserError):
    """Malformed target, auth failure, timeout or unreachable host."""

    status_code = status.HTTP_400_BAD_REQUEST
    message = "Connection failed"


class SessionNotFound(BrowserError):
    """Unknown or already closed connection identifier."""

    status_code = status.HTTP_404_NOT_FOUND
    message = "Connection not found"

    def __init__(self, session_id: str):
        super().__init__(f"No active connection with id '{session_id}'")
        self.session_id = session_id


class QueryFailure(BrowserError):
    """Listing or fetching failed against an otherwise valid session."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Failed to retrieve collection data"


class CloseFailure(BrowserError):
    """The driver raised while closing a handle."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Failed to close connection"


async def browser_error_handler(request: Request, exc: BrowserError) -> JSONResponse:
    """Render any BrowserError as ``{success: false, message, error}``."""
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())
