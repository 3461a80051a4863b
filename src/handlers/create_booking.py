"""POST /api/bookings — create a booking."""

import logging
from typing import Any

from core.clients import get_booking_store
from core.http import api_handler, ok
from core.services.query import parse_create

logger = logging.getLogger(__name__)


@api_handler
def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    fields = parse_create(event)
    logger.debug("Create booking request for event %r", fields.event)

    booking = get_booking_store().create(fields)
    return ok(booking, message="Booking created successfully", status_code=201)
