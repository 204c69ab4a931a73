"""Password hashing and opaque token helpers."""

import hashlib
import logging
import secrets

import bcrypt

from userhub.config import settings

logger = logging.getLogger(__name__)


class AuthService:
    """Service for credential and token primitives."""

    # Pre-computed bcrypt hash for timing-consistent password verification
    # Used when user doesn't exist to prevent email enumeration via timing attacks
    _DUMMY_HASH = "$2b$12$LQv3c1yqBWVHxkd0LHAkCOYz6TtxMQJqhN8/X4.VTtYA9dWQ6E3Ky"

    @staticmethod
    def get_dummy_hash() -> str:
        """Get a dummy password hash for timing-consistent verification."""
        return AuthService._DUMMY_HASH

    @staticmethod
    def hash_password(password: str) -> str:
        """Hash a password using bcrypt."""
        salt = bcrypt.gensalt(rounds=settings.bcrypt_rounds)
        hashed = bcrypt.hashpw(password.encode("utf-8"), salt)
        return hashed.decode("utf-8")

    @staticmethod
    def verify_password(password: str, hashed: str) -> bool:
        """Verify a password against its hash."""
        if not password or not hashed:
            return False
        try:
            return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
        except ValueError as e:
            logger.error(f"Password verification error: {e}")
            return False

    @staticmethod
    def generate_token(length: int) -> str:
        """Generate an unguessable URL-safe string of exactly ``length`` characters."""
        if length <= 0:
            raise ValueError("Token length must be positive")
        return secrets.token_urlsafe(length)[:length]

    @staticmethod
    def hash_token(token: str) -> str:
        """Hash a token using SHA-256 for storage and lookup."""
        return hashlib.sha256(token.encode("utf-8")).hexdigest()
