from datetime import date
from pydantic import BaseModel, Field, field_validator

from app.schemas.validators import in_the_past, not_blank


class Client(BaseModel):
    """Transfer shape of a client. ``id`` is ignored on input."""

    id: int | None = None
    name: str = Field(..., min_length=2, max_length=50)
    date_of_birth: date
    address: str
    contact_information: str = Field(..., min_length=10, max_length=15)

    @field_validator("name", "address")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        return not_blank(v)

    @field_validator("date_of_birth")
    @classmethod
    def validate_date_of_birth(cls, v: date) -> date:
        return in_the_past(v)
