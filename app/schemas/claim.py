from datetime import date
from pydantic import BaseModel, field_validator

from app.schemas.validators import not_blank, past_or_present


class Claim(BaseModel):
    """Transfer shape of a claim; the claimed policy is referenced by ``policy_id``."""

    id: int | None = None
    claim_number: str
    description: str
    claim_date: date
    status: str | None = None
    policy_id: int

    @field_validator("claim_number", "description")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        return not_blank(v)

    @field_validator("claim_date")
    @classmethod
    def validate_claim_date(cls, v: date) -> date:
        return past_or_present(v)
