"""Schemas for user registration, update and directory listing."""

import re

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, Field, field_validator
from pydantic_core import PydanticCustomError

USERNAME_MIN_LENGTH = 4
USERNAME_MAX_LENGTH = 32
PASSWORD_MIN_LENGTH = 6


def _validate_username(v: str | None) -> str:
    """Shared username validation logic."""
    if v is None:
        raise PydanticCustomError("username_null", "Username cannot be null")
    if not USERNAME_MIN_LENGTH <= len(v) <= USERNAME_MAX_LENGTH:
        raise PydanticCustomError("username_size", "Must have min 4 and max 32 characters")
    return v


def _validate_password_strength(v: str | None) -> str:
    if v is None:
        raise PydanticCustomError("password_null", "Password cannot be null")
    if len(v) < PASSWORD_MIN_LENGTH:
        raise PydanticCustomError("password_size", "Password must be at least 6 characters")
    if not (re.search(r"[a-z]", v) and re.search(r"[A-Z]", v) and re.search(r"\d", v)):
        raise PydanticCustomError(
            "password_pattern",
            "Password must have at least 1 uppercase, 1 lowercase letter and 1 number",
        )
    return v


class UserCreate(BaseModel):
    """Schema for user registration.

    Every field is checked so that one response reports all invalid fields.
    ``inactive`` is accepted for compatibility with older clients and ignored.
    """

    username: str | None = Field(default=None, validate_default=True)
    email: str | None = Field(default=None, validate_default=True)
    password: str | None = Field(default=None, validate_default=True)
    inactive: bool | None = None

    @field_validator("username")
    @classmethod
    def check_username(cls, v: str | None) -> str:
        return _validate_username(v)

    @field_validator("email")
    @classmethod
    def check_email(cls, v: str | None) -> str:
        if v is None:
            raise PydanticCustomError("email_null", "E-mail cannot be null")
        try:
            validate_email(v, check_deliverability=False)
        except EmailNotValidError:
            raise PydanticCustomError("email_invalid", "E-mail is not valid") from None
        return v

    @field_validator("password")
    @classmethod
    def check_password(cls, v: str | None) -> str:
        return _validate_password_strength(v)


class UserUpdate(BaseModel):
    """Schema for updating the caller's own profile."""

    username: str | None = Field(default=None, validate_default=True)

    @field_validator("username")
    @classmethod
    def check_username(cls, v: str | None) -> str:
        return _validate_username(v)


class UserView(BaseModel):
    """Public projection of a user. Never carries secrets or lifecycle state."""

    id: int
    username: str
    email: str

    model_config = {"from_attributes": True}


class UserPage(BaseModel):
    """One page of the user directory."""

    content: list[UserView]
    page: int
    size: int
    total_pages: int = Field(..., serialization_alias="totalPages")
