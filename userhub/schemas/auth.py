"""Schemas for authentication endpoints."""

from pydantic import BaseModel


class Credentials(BaseModel):
    """Schema for login."""

    email: str
    password: str


class AuthResponse(BaseModel):
    """Authenticated identity together with its bearer token."""

    id: int
    username: str
    token: str
