"""Pydantic schemas for request/response validation."""

from userhub.schemas.auth import AuthResponse, Credentials
from userhub.schemas.common import ErrorResponse, MessageResponse
from userhub.schemas.user import UserCreate, UserPage, UserUpdate, UserView

__all__ = [
    "AuthResponse",
    "Credentials",
    "ErrorResponse",
    "MessageResponse",
    "UserCreate",
    "UserPage",
    "UserUpdate",
    "UserView",
]
