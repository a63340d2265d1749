from datetime import date
from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, Field, PlainSerializer, field_validator

from app.schemas.validators import not_blank, past_or_present

# Kept as Decimal in Python, written as a JSON number on the wire
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class Policy(BaseModel):
    """Transfer shape of a policy; the owning client is referenced by ``client_id``."""

    id: int | None = None
    policy_number: str = Field(..., min_length=5, max_length=20)
    type: str
    coverage_amount: Money = Field(
        ..., ge=Decimal("1000.00"), decimal_places=2, description="Coverage amount (>= 1000.00)"
    )
    premium: Money = Field(
        ..., ge=Decimal("100.00"), decimal_places=2, description="Premium (>= 100.00)"
    )
    start_date: date
    end_date: date
    client_id: int

    @field_validator("policy_number", "type")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        return not_blank(v)

    @field_validator("start_date")
    @classmethod
    def validate_start_date(cls, v: date) -> date:
        return past_or_present(v)
