"""Request/response schemas for auth endpoints."""

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from eshop.core.security import (
    PASSWORD_MAX_LEN,
    PASSWORD_MIN_LEN,
    ROLE_NAME_MAX_LEN,
    USERNAME_MAX_LEN,
    USERNAME_MIN_LEN,
)


class LoginRequest(BaseModel):
    """Credentials for login; the identifier may be a username or an email."""

    username_or_email: str = Field(
        ...,
        min_length=USERNAME_MIN_LEN,
        max_length=USERNAME_MAX_LEN,
        description="Username or email",
    )
    password: str = Field(
        ..., min_length=PASSWORD_MIN_LEN, max_length=PASSWORD_MAX_LEN, description="Password"
    )

    @field_validator("username_or_email")
    @classmethod
    def normalize_email_identifier(cls, v: str) -> str:
        """Emails are stored normalized at registration; compare against the same form."""
        if "@" not in v:
            return v
        try:
            return validate_email(v, check_deliverability=False).normalized
        except EmailNotValidError:
            return v


class RegisterRequest(BaseModel):
    """New account with one existing role assigned by name."""

    name: str = Field(..., min_length=1, max_length=USERNAME_MAX_LEN, description="Display name")
    username: str = Field(
        ...,
        min_length=USERNAME_MIN_LEN,
        max_length=USERNAME_MAX_LEN,
        description="Unique username",
    )
    email: EmailStr = Field(..., description="Unique email address")
    password: str = Field(
        ..., min_length=PASSWORD_MIN_LEN, max_length=PASSWORD_MAX_LEN, description="Password"
    )
    role_name: str = Field(
        ..., min_length=1, max_length=ROLE_NAME_MAX_LEN, description="Name of an existing role"
    )


class Principal(BaseModel):
    """Authenticated user attached to a request after token validation."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    email: str
    roles: list[str] = Field(default_factory=list)
