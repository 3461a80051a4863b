"""
Business services for the Synergia Booking API.

- booking_store.py: DynamoDB persistence, identity assignment and substring search
- query.py: translation of gateway events into validated store inputs
"""

__all__: list[str] = []
