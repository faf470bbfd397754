"""
Daily Pause Backend — Auth Request/Response Schemas
====================================================

What:  Pydantic models for register, login, me and logout.
Why:   Input validation happens before any database access, and the response
       models guarantee the stored credential is never serialized.
"""

from typing import Optional

from pydantic import BaseModel, EmailStr, Field, field_validator

from daily_pause.config import settings


class LoginRequest(BaseModel):
    email: EmailStr = Field(description="Account email address")
    password: str = Field(description="Plaintext password")

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, v):
        """Emails are compared case-insensitively, so store them lowercased."""
        if isinstance(v, str):
            return v.strip().lower()
        return v


class RegisterRequest(LoginRequest):
    name: Optional[str] = Field(default=None, max_length=255, description="Display name")

    @field_validator("password")
    @classmethod
    def validate_password_length(cls, v: str) -> str:
        if len(v) < settings.password_min_length:
            raise ValueError(
                f"Password must be at least {settings.password_min_length} characters"
            )
        return v


class UserResponse(BaseModel):
    """Public view of a user: never includes the password credential."""

    id: str
    email: str
    name: Optional[str] = None

    model_config = {"from_attributes": True}


class AuthResponse(UserResponse):
    """
    Login/register response for clients that cannot use cookies.

    The edge variant always fills `token`; the server variant relies on
    the Set-Cookie header instead and returns a plain UserResponse.
    """

    token: Optional[str] = None


class MessageResponse(BaseModel):
    message: str
