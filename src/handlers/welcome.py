from typing import Any

from core.config import get_config


def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    """Root route greeting. Stays up even when DynamoDB is unreachable."""
    return {
        "statusCode": 200,
        "headers": {"Content-Type": "text/plain; charset=utf-8"},
        "body": f"Welcome to {get_config().project_name}",
    }
