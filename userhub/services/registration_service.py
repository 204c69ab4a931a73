"""Account registration."""

import logging

from sqlalchemy.orm import Session

from userhub.config import settings
from userhub.models import User
from userhub.services.auth_service import AuthService
from userhub.services.email_service import EmailService
from userhub.services.exceptions import (
    EmailDispatchError,
    EmailInUseError,
    ServiceError,
    UsernameInUseError,
)
from userhub.services.repositories import DuplicateError, UserRepository, normalize_email

logger = logging.getLogger(__name__)


def duplicate_to_service_error(error: DuplicateError) -> ServiceError:
    """Translate a unique-constraint violation into the matching failure kind."""
    if error.field == "email":
        return EmailInUseError(error.value)
    return UsernameInUseError(error.value)


class RegistrationService:
    """Creates pending accounts and sends their activation email.

    The insert and the email are one unit: the row is committed only after
    the email was handed off, and rolled back if sending fails.
    """

    def __init__(self, db: Session, mailer: type[EmailService] = EmailService) -> None:
        self._db = db
        self._users = UserRepository(db)
        self._mailer = mailer

    def register(
        self,
        username: str,
        email: str,
        password: str,
        inactive: bool | None = None,
    ) -> User:
        """Register a new pending user.

        ``inactive`` is accepted from clients but never honoured: new accounts
        always start pending.

        Raises:
            EmailInUseError: Email already registered.
            UsernameInUseError: Username already taken.
            EmailDispatchError: Activation email failed; nothing was persisted.
        """
        email = normalize_email(email)
        if inactive is not None:
            logger.debug(f"Ignoring client supplied inactive={inactive} for {email}")

        # Early exit only; the unique index on users.email is authoritative
        if self._users.find_by_email(email) is not None:
            raise EmailInUseError(email)

        token = AuthService.generate_token(settings.activation_token_length)
        try:
            user = self._users.create(
                username=username,
                email=email,
                password_hash=AuthService.hash_password(password),
                activation_token=token,
            )
        except DuplicateError as e:
            logger.warning(f"Registration conflict on {e.field}: {e.value}")
            raise duplicate_to_service_error(e) from e

        try:
            self._mailer.send_account_activation(email, token)
        except EmailDispatchError:
            self._db.rollback()
            logger.warning(f"Activation email to {email} failed, registration rolled back")
            raise

        self._db.commit()
        logger.info(f"User registered (pending activation): {email}")
        return user
