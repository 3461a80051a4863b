"""DynamoDB-backed booking store — identity assignment, validation and queries."""

import logging
import re
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any
from uuid import uuid4

from botocore.exceptions import (
    BotoCoreError,
    ClientError,
    ConnectTimeoutError,
    EndpointConnectionError,
    NoCredentialsError,
    NoRegionError,
    ReadTimeoutError,
)
from pydantic import ValidationError as SchemaError

from core.errors import (
    DatabaseConnectionError,
    MalformedIdError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)
from core.models.booking import Booking, BookingCreate, BookingUpdate

logger = logging.getLogger(__name__)

BOOKING_ID_PATTERN = re.compile(r"[0-9a-f]{32}")

# Booking field -> DynamoDB attribute
_ATTRIBUTES = {
    "name": "name",
    "email": "email",
    "event": "event",
    "ticket_type": "ticketType",
}
# Lower-cased shadows backing the case-insensitive contains() filters
_SEARCH_SHADOWS = {"email": "emailLower", "event": "eventLower"}

_CONNECTION_ERRORS = (
    EndpointConnectionError,
    ConnectTimeoutError,
    ReadTimeoutError,
    NoCredentialsError,
    NoRegionError,
)


def new_booking_id() -> str:
    return uuid4().hex


def _now() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="microseconds")


@contextmanager
def _translate_errors(operation: str) -> Iterator[None]:
    """Map botocore failures onto the API error taxonomy."""
    try:
        yield
    except _CONNECTION_ERRORS as e:
        logger.error("DynamoDB unreachable during %s: %s", operation, e)
        raise DatabaseConnectionError(str(e)) from e
    except (ClientError, BotoCoreError) as e:
        logger.error("DynamoDB %s failed: %s", operation, e)
        raise PersistenceError(str(e)) from e


def _is_condition_failure(error: ClientError) -> bool:
    return error.response.get("Error", {}).get("Code") == "ConditionalCheckFailedException"


def _to_item(booking: Booking) -> dict[str, Any]:
    item: dict[str, Any] = {
        "bookingId": {"S": booking.id},
        "createdAt": {"S": booking.created_at},
        "updatedAt": {"S": booking.updated_at},
    }
    for field, attribute in _ATTRIBUTES.items():
        value = getattr(booking, field)
        if value is not None:
            item[attribute] = {"S": value}
    for field, shadow in _SEARCH_SHADOWS.items():
        item[shadow] = {"S": getattr(booking, field).lower()}
    return item


def _from_item(item: dict[str, Any]) -> Booking:
    fields = {
        field: item[attribute]["S"] for field, attribute in _ATTRIBUTES.items() if attribute in item
    }
    return Booking(
        id=item["bookingId"]["S"],
        created_at=item["createdAt"]["S"],
        updated_at=item["updatedAt"]["S"],
        **fields,
    )


def _ordered(bookings: list[Booking]) -> list[Booking]:
    return sorted(bookings, key=lambda b: (b.created_at, b.id))


class BookingStore:
    """Booking persistence over a single DynamoDB table keyed by ``bookingId``.

    Operations are independent; there are no cross-operation transactions and
    concurrent updates to the same booking are last-write-wins.
    """

    def __init__(self, dynamo_client: Any, table_name: str) -> None:
        self._client = dynamo_client
        self._table = table_name

    def list_all(self) -> list[Booking]:
        return _ordered(self._scan())

    def create(self, fields: BookingCreate | dict[str, Any]) -> Booking:
        if isinstance(fields, dict):
            try:
                fields = BookingCreate.model_validate(fields)
            except SchemaError as e:
                raise ValidationError("Please provide name, email, and event") from e

        now = _now()
        booking = Booking(
            id=new_booking_id(),
            name=fields.name,
            email=fields.email,
            event=fields.event,
            ticket_type=fields.ticket_type or None,
            created_at=now,
            updated_at=now,
        )
        with _translate_errors("create"):
            self._client.put_item(
                TableName=self._table,
                Item=_to_item(booking),
                ConditionExpression="attribute_not_exists(bookingId)",
            )
        logger.info("Created booking %s for event %r", booking.id, booking.event)
        return booking

    def get_by_id(self, booking_id: str) -> Booking | None:
        self._check_id(booking_id)
        with _translate_errors("get"):
            response = self._client.get_item(
                TableName=self._table,
                Key={"bookingId": {"S": booking_id}},
                ConsistentRead=True,
            )
        item = response.get("Item")
        return _from_item(item) if item else None

    def update(self, booking_id: str, partial: BookingUpdate) -> Booking:
        changes = partial.changes()
        if not changes:
            booking = self.get_by_id(booking_id)
            if booking is None:
                raise NotFoundError(f"Booking with ID {booking_id} not found")
            return booking

        self._check_id(booking_id)
        names: dict[str, str] = {"#updatedAt": "updatedAt"}
        values: dict[str, Any] = {":updatedAt": {"S": _now()}}
        assignments = ["#updatedAt = :updatedAt"]
        for field, value in changes.items():
            attribute = _ATTRIBUTES[field]
            names[f"#{attribute}"] = attribute
            values[f":{attribute}"] = {"S": value}
            assignments.append(f"#{attribute} = :{attribute}")
            shadow = _SEARCH_SHADOWS.get(field)
            if shadow:
                names[f"#{shadow}"] = shadow
                values[f":{shadow}"] = {"S": value.lower()}
                assignments.append(f"#{shadow} = :{shadow}")

        with _translate_errors("update"):
            try:
                response = self._client.update_item(
                    TableName=self._table,
                    Key={"bookingId": {"S": booking_id}},
                    UpdateExpression="SET " + ", ".join(assignments),
                    ConditionExpression="attribute_exists(bookingId)",
                    ExpressionAttributeNames=names,
                    ExpressionAttributeValues=values,
                    ReturnValues="ALL_NEW",
                )
            except ClientError as e:
                if _is_condition_failure(e):
                    raise NotFoundError(f"Booking with ID {booking_id} not found") from e
                raise

        logger.info("Updated booking %s fields %s", booking_id, sorted(changes))
        return _from_item(response["Attributes"])

    def delete(self, booking_id: str) -> Booking:
        self._check_id(booking_id)
        with _translate_errors("delete"):
            try:
                response = self._client.delete_item(
                    TableName=self._table,
                    Key={"bookingId": {"S": booking_id}},
                    ConditionExpression="attribute_exists(bookingId)",
                    ReturnValues="ALL_OLD",
                )
            except ClientError as e:
                if _is_condition_failure(e):
                    raise NotFoundError(f"Booking with ID {booking_id} not found") from e
                raise

        logger.info("Deleted booking %s", booking_id)
        return _from_item(response["Attributes"])

    def find_by_email_contains(self, substring: str) -> list[Booking]:
        return self._find_contains("email", substring)

    def find_by_event_contains(self, substring: str) -> list[Booking]:
        return self._find_contains("event", substring)

    def _find_contains(self, field: str, substring: str) -> list[Booking]:
        if not substring:
            raise ValidationError(f"Please provide {field} query parameter")
        shadow = _SEARCH_SHADOWS[field]
        bookings = self._scan(
            FilterExpression="contains(#shadow, :needle)",
            ExpressionAttributeNames={"#shadow": shadow},
            ExpressionAttributeValues={":needle": {"S": substring.lower()}},
        )
        return _ordered(bookings)

    def _scan(self, **filters: Any) -> list[Booking]:
        bookings: list[Booking] = []
        last_key = None

        while True:
            scan_kwargs: dict[str, Any] = {"TableName": self._table, **filters}
            if last_key:
                scan_kwargs["ExclusiveStartKey"] = last_key

            with _translate_errors("scan"):
                response = self._client.scan(**scan_kwargs)

            bookings.extend(_from_item(item) for item in response.get("Items", []))

            last_key = response.get("LastEvaluatedKey")
            if not last_key:
                break

        return bookings

    @staticmethod
    def _check_id(booking_id: str) -> None:
        if not isinstance(booking_id, str) or not BOOKING_ID_PATTERN.fullmatch(booking_id):
            raise MalformedIdError(f"Booking with ID {booking_id} not found")
