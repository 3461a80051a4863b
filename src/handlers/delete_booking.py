"""DELETE /api/bookings/{id} — cancel a booking, returning what was removed."""

from typing import Any

from core.clients import get_booking_store
from core.http import api_handler, ok
from core.services.query import booking_id


@api_handler
def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    booking = get_booking_store().delete(booking_id(event))
    return ok(booking, message="Booking cancelled successfully")
