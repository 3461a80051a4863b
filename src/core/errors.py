"""
Custom exceptions and error handling for the Synergia Booking API.

Defines application-specific exceptions with error codes so every Lambda
handler maps failures to the same HTTP status and envelope message.

Usage:
    from core.errors import NotFoundError, ErrorCode

    raise NotFoundError(f"Booking with ID {booking_id} not found")
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Error codes for client-facing error messages."""

    # Request errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_REQUEST = "INVALID_REQUEST"

    # Lookup errors
    NOT_FOUND = "NOT_FOUND"
    MALFORMED_ID = "MALFORMED_ID"

    # Persistence errors
    PERSISTENCE_ERROR = "PERSISTENCE_ERROR"
    DB_CONNECTION_FAILED = "DB_CONNECTION_FAILED"

    # System errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


USER_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.VALIDATION_ERROR: "Please provide name, email, and event",
    ErrorCode.INVALID_REQUEST: "Request body must be a JSON object",
    ErrorCode.NOT_FOUND: "Booking not found",
    ErrorCode.MALFORMED_ID: "Booking not found",
    ErrorCode.PERSISTENCE_ERROR: "Server Error",
    ErrorCode.DB_CONNECTION_FAILED: "Database connection failed",
    ErrorCode.INTERNAL_ERROR: "Server Error",
}

HTTP_STATUS: dict[ErrorCode, int] = {
    ErrorCode.VALIDATION_ERROR: 400,
    ErrorCode.INVALID_REQUEST: 400,
    ErrorCode.NOT_FOUND: 404,
    ErrorCode.MALFORMED_ID: 404,
    ErrorCode.PERSISTENCE_ERROR: 500,
    ErrorCode.DB_CONNECTION_FAILED: 500,
    ErrorCode.INTERNAL_ERROR: 500,
}


class BookingApiError(Exception):
    """Base exception for all booking API errors."""

    default_code = ErrorCode.INTERNAL_ERROR

    def __init__(self, message: str, code: ErrorCode | None = None):
        self.message = message
        self.code = code or self.default_code
        super().__init__(message)

    @property
    def user_message(self) -> str:
        return USER_MESSAGES.get(self.code, USER_MESSAGES[ErrorCode.INTERNAL_ERROR])

    @property
    def status_code(self) -> int:
        return HTTP_STATUS.get(self.code, 500)


class ValidationError(BookingApiError):
    """Required input is missing, empty or unparseable."""

    default_code = ErrorCode.VALIDATION_ERROR


class NotFoundError(BookingApiError):
    """Identifier does not resolve to a live booking."""

    default_code = ErrorCode.NOT_FOUND


class MalformedIdError(NotFoundError):
    """Identifier fails the structural check; rendered as not found."""

    default_code = ErrorCode.MALFORMED_ID


class PersistenceError(BookingApiError):
    """The document store rejected or failed an operation."""

    default_code = ErrorCode.PERSISTENCE_ERROR


class DatabaseConnectionError(PersistenceError):
    """The document store could not be reached."""

    default_code = ErrorCode.DB_CONNECTION_FAILED
