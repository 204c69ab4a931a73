"""Bearer token issuance and verification."""

import logging
from datetime import UTC, datetime, timedelta

from sqlalchemy.orm import Session

from userhub.config import settings
from userhub.models import AuthToken
from userhub.services.auth_service import AuthService

logger = logging.getLogger(__name__)


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


class TokenService:
    """Issues opaque bearer tokens and resolves them back to user ids.

    Tokens expire after ``ttl`` without use; every successful verification
    pushes the expiry forward. Only the SHA-256 digest of a token is stored.
    """

    def __init__(self, db: Session, ttl: timedelta | None = None) -> None:
        self._db = db
        self._ttl = ttl if ttl is not None else timedelta(hours=settings.token_ttl_hours)

    def issue(self, user_id: int) -> str:
        """Create and persist a fresh token for ``user_id``."""
        self.purge_expired()

        token = AuthService.generate_token(settings.session_token_length)
        now = datetime.now(UTC)
        self._db.add(
            AuthToken(
                user_id=user_id,
                token_hash=AuthService.hash_token(token),
                created_at=now,
                last_used_at=now,
            )
        )
        self._db.commit()
        return token

    def verify(self, token: str | None) -> int | None:
        """Return the user id bound to ``token``, or None if it does not resolve."""
        if not token:
            return None

        record = (
            self._db.query(AuthToken)
            .filter(AuthToken.token_hash == AuthService.hash_token(token))
            .first()
        )
        if record is None:
            logger.debug("Unknown bearer token")
            return None

        now = datetime.now(UTC)
        if _as_utc(record.last_used_at) <= now - self._ttl:
            logger.debug(f"Expired bearer token for user {record.user_id}")
            return None

        record.last_used_at = now
        self._db.commit()
        return record.user_id

    def purge_expired(self) -> int:
        """Delete tokens that have not been used within the TTL."""
        cutoff = datetime.now(UTC) - self._ttl
        deleted = (
            self._db.query(AuthToken)
            .filter(AuthToken.last_used_at <= cutoff)
            .delete(synchronize_session=False)
        )
        if deleted:
            logger.info(f"Purged {deleted} expired tokens")
        return deleted
