"""Shared test fixtures for the Synergia Booking API."""

import os
import sys
from pathlib import Path

import pytest
from dotenv import load_dotenv

# Load .env file for test configuration
load_dotenv()

# Unset AWS_PROFILE for local testing (DynamoDB Local doesn't need it)
if "AWS_PROFILE" in os.environ:
    del os.environ["AWS_PROFILE"]

# Add src directory to Python path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))


def _make_item(booking_id: str, name: str = "Ana", email: str = "ana@x.com", event: str = "Synergia", **extra):
    """Build a raw DynamoDB item the way BookingStore writes it."""
    item = {
        "bookingId": {"S": booking_id},
        "name": {"S": name},
        "email": {"S": email},
        "event": {"S": event},
        "emailLower": {"S": email.lower()},
        "eventLower": {"S": event.lower()},
        "createdAt": {"S": extra.pop("created_at", "2026-03-01T10:00:00+00:00")},
        "updatedAt": {"S": extra.pop("updated_at", "2026-03-01T10:00:00+00:00")},
    }
    if "ticket_type" in extra:
        item["ticketType"] = {"S": extra.pop("ticket_type")}
    return item


@pytest.fixture
def make_item():
    return _make_item


@pytest.fixture
def booking_id():
    return "0123456789abcdef0123456789abcdef"


@pytest.fixture
def api_event():
    """Factory for API Gateway proxy events."""

    def _event(body=None, path_id=None, query=None, base64=False):
        return {
            "body": body,
            "isBase64Encoded": base64,
            "pathParameters": {"id": path_id} if path_id is not None else None,
            "queryStringParameters": query,
        }

    return _event


# DynamoDB fixtures
@pytest.fixture
def dynamodb_client():
    """Provide a DynamoDB client for integration tests."""
    import boto3
    from core.config import get_config

    config = get_config()

    return boto3.client(
        "dynamodb",
        endpoint_url=config.dynamodb_endpoint or "http://localhost:8000",
        region_name=config.aws_region,
        aws_access_key_id="dummy",
        aws_secret_access_key="dummy",
    )


@pytest.fixture
def booking_store(dynamodb_client):
    """Provide a BookingStore over the local Bookings table, emptied afterwards."""
    from core.config import get_config
    from core.services.booking_store import BookingStore

    table_name = get_config().bookings_table
    store = BookingStore(dynamodb_client, table_name)
    yield store

    # Cleanup: scan and delete all items created during test
    response = dynamodb_client.scan(TableName=table_name, ProjectionExpression="bookingId")
    for item in response.get("Items", []):
        dynamodb_client.delete_item(TableName=table_name, Key={"bookingId": item["bookingId"]})
