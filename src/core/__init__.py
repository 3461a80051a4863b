"""
Core business logic package for the Synergia Booking API.

All validation, data access, and response shaping live here.
Lambda handlers in src/handlers/ are thin wrappers that call into core/.
"""

__all__: list[str] = []
