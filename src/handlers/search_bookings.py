"""GET /api/bookings/search?email= — case-insensitive email substring search."""

from typing import Any

from core.clients import get_booking_store
from core.http import api_handler, ok_list
from core.services.query import require_query_param


@api_handler
def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    email = require_query_param(event, "email")
    return ok_list(get_booking_store().find_by_email_contains(email))
