"""
API request and response models for Cyber Kittens REST endpoints.

These Pydantic v2 models define the HTTP transport contract for the API layer.
They are intentionally separate from the dataclasses in auth/models.py and
kittens/models.py, which own the internal domain representation. Route
handlers map between the two.
"""

from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field, StringConstraints, field_validator

from kittens.models import Kitten

# ---------------------------------------------------------------------------
# Auth -- request/response models
# ---------------------------------------------------------------------------


class CredentialsRequest(BaseModel):
    """Request body for POST /register and POST /login.

    Only the username is stripped. The password is hashed exactly as sent, so
    leading or trailing spaces are part of it. The password limit matches
    bcrypt's 72-byte input so no part of it is silently ignored.
    """

    username: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=255)]
    password: str = Field(min_length=1, max_length=72)

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        """Reject passwords whose UTF-8 encoding exceeds bcrypt's 72-byte input."""
        if len(value.encode("utf-8")) > 72:
            raise ValueError("password must be at most 72 bytes when UTF-8 encoded")
        return value


class TokenResponse(BaseModel):
    """Response for a successful registration or login."""

    model_config = ConfigDict(frozen=True)

    message: str = "success"
    token: str


# ---------------------------------------------------------------------------
# Kittens -- request/response models
# ---------------------------------------------------------------------------


class KittenCreate(BaseModel):
    """Request body for POST /kittens. owner_id is never accepted from the client."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    name: str = Field(min_length=1, max_length=100)
    age: int = Field(ge=0, le=100)
    color: str = Field(min_length=1, max_length=100)


class KittenResponse(BaseModel):
    """A kitten as returned to its owner."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    age: int
    color: str

    @classmethod
    def from_kitten(cls, kitten: Kitten) -> "KittenResponse":
        return cls(id=kitten.id, name=kitten.name, age=kitten.age, color=kitten.color)


# ---------------------------------------------------------------------------
# Errors and health
# ---------------------------------------------------------------------------


class ErrorDetail(BaseModel):
    """Machine-readable error payload."""

    model_config = ConfigDict(frozen=True)

    code: str
    message: str
    detail: Optional[str] = None


class ErrorResponse(BaseModel):
    """Top-level error envelope returned on 4xx/5xx responses."""

    model_config = ConfigDict(frozen=True)

    error: ErrorDetail


class HealthResponse(BaseModel):
    """Response for GET /health."""

    model_config = ConfigDict(frozen=True)

    status: str = "healthy"
    version: str
    components: dict[str, str]
