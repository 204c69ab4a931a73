"""SQLAlchemy ORM models."""

from userhub.models.auth_token import AuthToken
from userhub.models.user import User

__all__ = [
    "AuthToken",
    "User",
]
