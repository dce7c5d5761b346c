"""User and authentication Pydantic schemas."""

import re
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from tweeble.models.user import DESCRIPTION_MAX_LENGTH, USERNAME_MAX_LENGTH

USERNAME_PATTERN = r"^[A-Za-z0-9]+$"
_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class RegisterRequest(BaseModel):
    """Schema for account registration."""

    email: str = Field(..., max_length=254, description="Unique email address")
    username: str = Field(
        ...,
        min_length=1,
        max_length=USERNAME_MAX_LENGTH,
        pattern=USERNAME_PATTERN,
        description="Letters and digits only",
    )
    password: str = Field(..., min_length=1)
    confirm_password: str = Field(..., min_length=1)
    description: str | None = Field(
        None,
        max_length=DESCRIPTION_MAX_LENGTH,
        description="Optional short profile description",
    )

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        """Validate the email address shape."""
        v = v.strip()
        if not _EMAIL_PATTERN.match(v):
            raise ValueError("Please enter a valid email address.")
        return v


class LoginRequest(BaseModel):
    """Schema for login submissions."""

    username_or_email: str = Field(..., min_length=1, description="Username or email")
    password: str = Field(..., min_length=1)
    remember_me: bool = Field(False, description="Keep the session cookie after the browser closes")


class UserResponse(BaseModel):
    """Public account information."""

    id: str
    username: str
    email: str
    description: str | None = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class AuthResponse(BaseModel):
    """Response returned after registration or login."""

    access_token: str = Field(..., description="JWT access token")
    token_type: str = Field("bearer", description="Token type (typically 'bearer')")
    user: UserResponse
