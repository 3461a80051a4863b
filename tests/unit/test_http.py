"""Unit tests for response envelopes and the handler error boundary."""

import json

from core.errors import DatabaseConnectionError, NotFoundError, PersistenceError, ValidationError
from core.http import api_handler, ok, ok_list
from core.models import Booking

BOOKING = Booking(
    id="0123456789abcdef0123456789abcdef",
    name="Ana",
    email="ana@x.com",
    event="Synergia",
    created_at="2026-03-01T10:00:00+00:00",
    updated_at="2026-03-01T10:00:00+00:00",
)


def _raising(exc):
    @api_handler
    def handler(event, context):
        raise exc

    return handler


def test_ok_envelope():
    result = ok(BOOKING, message="Booking created successfully", status_code=201)

    assert result["statusCode"] == 201
    assert result["headers"]["Content-Type"] == "application/json"
    body = json.loads(result["body"])
    assert body["success"] is True
    assert body["message"] == "Booking created successfully"
    assert body["data"]["name"] == "Ana"
    assert "count" not in body


def test_ok_list_envelope():
    body = json.loads(ok_list([BOOKING, BOOKING])["body"])
    assert body["count"] == 2
    assert len(body["data"]) == 2


def test_validation_error_is_400():
    result = _raising(ValidationError("Please provide event query parameter"))({}, None)

    assert result["statusCode"] == 400
    assert json.loads(result["body"]) == {"success": False, "message": "Please provide event query parameter"}


def test_not_found_is_404():
    result = _raising(NotFoundError("Booking with ID abc not found"))({}, None)

    assert result["statusCode"] == 404
    assert json.loads(result["body"])["message"] == "Booking with ID abc not found"


def test_persistence_error_surfaces_message():
    result = _raising(PersistenceError("Throughput exceeded"))({}, None)

    assert result["statusCode"] == 500
    body = json.loads(result["body"])
    assert body == {"success": False, "message": "Server Error", "error": "Throughput exceeded"}


def test_connection_error_has_distinct_message():
    body = json.loads(_raising(DatabaseConnectionError("Could not connect"))({}, None)["body"])
    assert body["message"] == "Database connection failed"
    assert body["error"] == "Could not connect"


def test_unexpected_exception_never_propagates():
    result = _raising(RuntimeError("kaboom"))({}, None)

    assert result["statusCode"] == 500
    body = json.loads(result["body"])
    assert body["success"] is False
    assert body["error"] == "kaboom"
