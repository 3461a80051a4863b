"""GET /api/bookings/filter?event= — case-insensitive event substring filter."""

from typing import Any

from core.clients import get_booking_store
from core.http import api_handler, ok_list
from core.services.query import require_query_param


@api_handler
def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    event_name = require_query_param(event, "event")
    return ok_list(get_booking_store().find_by_event_contains(event_name))
