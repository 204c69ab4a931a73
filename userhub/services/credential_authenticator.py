"""Email and password verification."""

import logging
from dataclasses import dataclass

from sqlalchemy.orm import Session

from userhub.services.auth_service import AuthService
from userhub.services.exceptions import AccountInactiveError, InvalidCredentialsError
from userhub.services.repositories import UserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuthenticatedIdentity:
    """Who the caller is. Deliberately carries no secrets."""

    id: int
    username: str


class CredentialAuthenticator:
    """Checks an email/password pair against the stored bcrypt hash."""

    def __init__(self, db: Session) -> None:
        self._users = UserRepository(db)

    def authenticate(self, email: str | None, password: str | None) -> AuthenticatedIdentity:
        """Resolve credentials to an identity.

        Raises:
            InvalidCredentialsError: Unknown email or wrong password.
            AccountInactiveError: Correct credentials for a pending account.
        """
        user = self._users.find_by_email(email) if email else None
        if user is None:
            # Perform dummy password verification to prevent timing-based email enumeration
            AuthService.verify_password(password or "", AuthService.get_dummy_hash())
            raise InvalidCredentialsError()

        if not AuthService.verify_password(password or "", user.password_hash):
            raise InvalidCredentialsError()

        if not user.is_active:
            raise AccountInactiveError()

        logger.info(f"User authenticated: {user.email}")
        return AuthenticatedIdentity(id=user.id, username=user.username)
