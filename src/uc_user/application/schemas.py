"""Pydantic request/response schemas for the users API."""

from typing import Annotated

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator, BaseModel, Field

from src.uc_user.domain.models import User


def _check_email(value: str) -> str:
    """Validate the address but keep it exactly as sent (no case folding)."""
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as exc:
        raise ValueError(f"value is not a valid email address: {exc}") from exc
    return value


RawEmail = Annotated[str, AfterValidator(_check_email)]

# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------


class UserWriteRequest(BaseModel):
    """Body of POST and PUT: both fields required, name may be empty."""

    name: str = Field(..., max_length=255)
    email: RawEmail = Field(..., max_length=255)


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class UserResponse(BaseModel):
    id: int
    name: str
    email: str

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        return cls(id=user.id, name=user.name, email=user.email)
