"""GET /api/bookings — list every booking."""

from typing import Any

from core.clients import get_booking_store
from core.http import api_handler, ok_list


@api_handler
def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    return ok_list(get_booking_store().list_all())
