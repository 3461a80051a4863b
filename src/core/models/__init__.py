"""
Pydantic models for the Synergia Booking API.
"""

from core.models.booking import Booking, BookingCreate, BookingUpdate
from core.models.envelope import Envelope

__all__ = ["Booking", "BookingCreate", "BookingUpdate", "Envelope"]
