"""PUT /api/bookings/{id} — update participant details.

Only fields supplied with a non-empty value are overwritten.
"""

from typing import Any

from core.clients import get_booking_store
from core.http import api_handler, ok
from core.services.query import booking_id, parse_update


@api_handler
def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    partial = parse_update(event)
    booking = get_booking_store().update(booking_id(event), partial)
    return ok(booking, message="Booking updated successfully")
