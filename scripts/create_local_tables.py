#!/usr/bin/env python3
"""Create the DynamoDB bookings table for local development.

This script creates the table the booking Lambdas read and write, configured
against DynamoDB Local. The key schema matches the deployed table.

Usage:
    python scripts/create_local_tables.py
"""

import sys
from pathlib import Path

import boto3
from botocore.exceptions import ClientError

# Add src to path for config import
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from core.config import get_config


def create_bookings_table(dynamodb, table_name: str) -> None:
    """Create the bookings table keyed by bookingId."""
    try:
        dynamodb.create_table(
            TableName=table_name,
            KeySchema=[
                {"AttributeName": "bookingId", "KeyType": "HASH"},
            ],
            AttributeDefinitions=[
                {"AttributeName": "bookingId", "AttributeType": "S"},
            ],
            BillingMode="PAY_PER_REQUEST",
        )
        print(f"✓ Created {table_name} table")
    except ClientError as e:
        if e.response["Error"]["Code"] == "ResourceInUseException":
            print(f"✓ {table_name} table already exists")
        else:
            raise


def main():
    config = get_config()

    endpoint_url = config.dynamodb_endpoint or "http://localhost:8000"

    print(f"Creating DynamoDB tables at {endpoint_url}...")
    print()

    # For DynamoDB Local, use dummy credentials
    dynamodb = boto3.client(
        "dynamodb",
        endpoint_url=endpoint_url,
        region_name=config.aws_region,
        aws_access_key_id="dummy",
        aws_secret_access_key="dummy",
    )

    create_bookings_table(dynamodb, config.bookings_table)

    print()
    print("✅ Bookings table ready")


if __name__ == "__main__":
    main()
