"""
Response envelope helpers and the handler-boundary error mapping.

Every booking Lambda is wrapped in ``api_handler`` so that no exception
reaches the runtime: taxonomy errors render their own status, anything
else is logged and rendered as a 500 envelope.
"""

import json
import logging
from collections.abc import Callable
from functools import wraps
from typing import Any

from core.config import get_config
from core.errors import BookingApiError, ErrorCode, USER_MESSAGES
from core.logging_config import setup_logging
from core.models.booking import Booking
from core.models.envelope import Envelope

logger = logging.getLogger(__name__)

JSON_HEADERS = {"Content-Type": "application/json"}

Handler = Callable[[dict[str, Any], object], dict[str, Any]]


def respond(status_code: int, envelope: Envelope) -> dict[str, Any]:
    return {
        "statusCode": status_code,
        "headers": dict(JSON_HEADERS),
        "body": json.dumps(envelope.to_json()),
    }


def ok(booking: Booking, message: str | None = None, status_code: int = 200) -> dict[str, Any]:
    return respond(status_code, Envelope(success=True, message=message, data=booking.to_json()))


def ok_list(bookings: list[Booking]) -> dict[str, Any]:
    return respond(
        200,
        Envelope(success=True, count=len(bookings), data=[b.to_json() for b in bookings]),
    )


def error_response(error: BookingApiError) -> dict[str, Any]:
    if error.status_code >= 500:
        envelope = Envelope(success=False, message=error.user_message, error=error.message)
    else:
        envelope = Envelope(success=False, message=error.message)
    return respond(error.status_code, envelope)


def api_handler(func: Handler) -> Handler:
    @wraps(func)
    def wrapper(event: dict[str, Any], context: object) -> dict[str, Any]:
        try:
            return func(event, context)
        except BookingApiError as e:
            if e.status_code >= 500:
                logger.error("%s failed: %s", func.__module__, e.message)
            return error_response(e)
        except Exception as e:
            logger.exception("Unhandled error in %s", func.__module__)
            envelope = Envelope(
                success=False,
                message=USER_MESSAGES[ErrorCode.INTERNAL_ERROR],
                error=str(e),
            )
            return respond(500, envelope)

    return wrapper


setup_logging(get_config().log_level)
