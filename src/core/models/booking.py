from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

_camel = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class BookingCreate(BaseModel):
    model_config = _camel

    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    event: str = Field(..., min_length=1)
    ticket_type: str | None = None


class BookingUpdate(BaseModel):
    model_config = _camel

    name: str | None = None
    email: str | None = None
    event: str | None = None
    ticket_type: str | None = None

    def changes(self) -> dict[str, str]:
        """Fields to overwrite; falsy values mean "leave unchanged"."""
        return {field: value for field, value in self.model_dump().items() if value}


class Booking(BaseModel):
    model_config = _camel

    id: str
    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    event: str = Field(..., min_length=1)
    ticket_type: str | None = None
    created_at: str
    updated_at: str

    def to_json(self) -> dict[str, str]:
        return self.model_dump(by_alias=True, exclude_none=True)
