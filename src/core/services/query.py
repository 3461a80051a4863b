"""Translate API Gateway proxy events into validated booking store inputs."""

import base64
import json
from typing import Any

import pydantic

from core.errors import ErrorCode, ValidationError
from core.models.booking import BookingCreate, BookingUpdate


def json_body(event: dict[str, Any]) -> dict[str, Any]:
    """Decode the request body; an absent body is an empty object."""
    raw = event.get("body")
    if raw is None or raw == "":
        return {}

    try:
        if event.get("isBase64Encoded"):
            raw = base64.b64decode(raw).decode("utf-8")
        body = json.loads(raw)
    except (ValueError, UnicodeDecodeError) as e:
        raise ValidationError("Request body is not valid JSON", code=ErrorCode.INVALID_REQUEST) from e

    if not isinstance(body, dict):
        raise ValidationError("Request body must be a JSON object", code=ErrorCode.INVALID_REQUEST)
    return body


def parse_create(event: dict[str, Any]) -> BookingCreate:
    body = json_body(event)
    try:
        return BookingCreate.model_validate(body)
    except pydantic.ValidationError as e:
        raise ValidationError("Please provide name, email, and event") from e


def parse_update(event: dict[str, Any]) -> BookingUpdate:
    body = json_body(event)
    # Non-string values carry no usable update; treat them as absent.
    fields = {key: value for key, value in body.items() if isinstance(value, str)}
    return BookingUpdate.model_validate(fields)


def booking_id(event: dict[str, Any]) -> str:
    path_params = event.get("pathParameters") or {}
    return path_params.get("id", "")


def require_query_param(event: dict[str, Any], name: str) -> str:
    query_params = event.get("queryStringParameters") or {}
    value = query_params.get(name)
    if not value:
        raise ValidationError(f"Please provide {name} query parameter")
    return value
