"""GET /api/bookings/{id} — fetch one booking."""

from typing import Any

from core.clients import get_booking_store
from core.errors import NotFoundError
from core.http import api_handler, ok
from core.services.query import booking_id


@api_handler
def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    bid = booking_id(event)
    booking = get_booking_store().get_by_id(bid)
    if booking is None:
        raise NotFoundError(f"Booking with ID {bid} not found")
    return ok(booking)
