"""Pydantic model for the uniform JSON response envelope."""

from typing import Any

from pydantic import BaseModel


class Envelope(BaseModel):
    success: bool
    message: str | None = None
    count: int | None = None
    data: dict[str, Any] | list[dict[str, Any]] | None = None
    error: str | None = None

    def to_json(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)
