"""User data access layer."""

import logging
from typing import TYPE_CHECKING

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from userhub.constants import AccountStatus
from userhub.models import AuthToken, User

from .exceptions import DuplicateError

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    """Canonical form used for storage and lookup."""
    return email.strip().lower()


class UserRepository:
    """Centralized user data access.

    Naming conventions:
    - find_* : Query that may return None or empty list
    - count_* : Aggregate query
    """

    def __init__(self, db: Session) -> None:
        self._db = db

    def find_by_id(self, user_id: int) -> User | None:
        """Find user by primary key."""
        return self._db.query(User).filter(User.id == user_id).first()

    def find_by_email(self, email: str) -> User | None:
        """Find user by email (case-insensitive)."""
        return (
            self._db.query(User)
            .filter(func.lower(User.email) == normalize_email(email))
            .first()
        )

    def find_by_username(self, username: str) -> User | None:
        return self._db.query(User).filter(User.username == username).first()

    def find_active_by_id(self, user_id: int) -> User | None:
        """Find active user by ID."""
        return (
            self._db.query(User)
            .filter(User.id == user_id, User.status == AccountStatus.ACTIVE)
            .first()
        )

    def _active_query(self, exclude_id: int | None):
        query = self._db.query(User).filter(User.status == AccountStatus.ACTIVE)
        if exclude_id is not None:
            query = query.filter(User.id != exclude_id)
        return query

    def count_active(self, exclude_id: int | None = None) -> int:
        """Count active users, optionally leaving one out."""
        return self._active_query(exclude_id).count()

    def find_active_page(
        self, offset: int, limit: int, exclude_id: int | None = None
    ) -> "Sequence[User]":
        """Find a window of active users in creation order."""
        return (
            self._active_query(exclude_id)
            .order_by(User.id)
            .offset(offset)
            .limit(limit)
            .all()
        )

    def create(
        self,
        username: str,
        email: str,
        password_hash: str,
        activation_token: str | None,
        status: str = AccountStatus.PENDING,
    ) -> User:
        """Insert a user and flush so the store assigns its id.

        Raises:
            DuplicateError: If the email or username is already taken. The
                session is rolled back before raising.
            IntegrityError: Any other constraint violation, after rollback.
        """
        user = User(
            username=username,
            email=normalize_email(email),
            password_hash=password_hash,
            status=status,
            activation_token=activation_token,
        )
        self._db.add(user)
        try:
            self._db.flush()
        except IntegrityError:
            self._db.rollback()
            field = self._conflicting_field(username, email)
            if field is None:
                raise
            value = normalize_email(email) if field == "email" else username
            raise DuplicateError("User", field, value) from None
        return user

    def activate_by_token(self, token: str) -> bool:
        """Activate the pending user holding ``token`` in one conditional UPDATE.

        Returns True only if a row matched, so concurrent callers racing on
        the same token cannot both succeed.
        """
        updated = (
            self._db.query(User)
            .filter(User.activation_token == token, User.status == AccountStatus.PENDING)
            .update(
                {User.status: AccountStatus.ACTIVE, User.activation_token: None},
                synchronize_session=False,
            )
        )
        return updated == 1

    def update_username(self, user: User, username: str) -> User:
        """Rename a user.

        Raises:
            DuplicateError: If another user already has ``username``.
        """
        user.username = username
        try:
            self._db.flush()
        except IntegrityError:
            self._db.rollback()
            raise DuplicateError("User", "username", username) from None
        return user

    def delete_all(self) -> int:
        """Remove every user and token. Only used to reset test databases."""
        self._db.query(AuthToken).delete(synchronize_session=False)
        deleted = self._db.query(User).delete(synchronize_session=False)
        logger.info(f"Deleted {deleted} users")
        return deleted

    def _conflicting_field(self, username: str, email: str) -> str | None:
        if self.find_by_email(email) is not None:
            return "email"
        if self.find_by_username(username) is not None:
            return "username"
        return None
