"""Lazy-initialized boto3 clients — reused across warm Lambda invocations."""

from functools import lru_cache
from typing import Any

import boto3
from botocore.config import Config as BotoConfig
from botocore.exceptions import BotoCoreError

from core.config import get_config
from core.errors import DatabaseConnectionError
from core.services.booking_store import BookingStore


@lru_cache(maxsize=1)
def get_dynamo_client() -> Any:
    config = get_config()
    return boto3.client(
        "dynamodb",
        endpoint_url=config.dynamodb_endpoint,
        region_name=config.aws_region,
        config=BotoConfig(
            connect_timeout=config.dynamodb_connect_timeout,
            read_timeout=config.dynamodb_read_timeout,
            retries={"max_attempts": config.dynamodb_max_attempts, "mode": "standard"},
        ),
    )


def get_booking_store() -> BookingStore:
    """Return a store handle bound to the shared client and configured table."""
    try:
        client = get_dynamo_client()
    except BotoCoreError as e:
        raise DatabaseConnectionError(str(e)) from e
    return BookingStore(client, get_config().bookings_table)
