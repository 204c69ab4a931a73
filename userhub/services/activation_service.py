"""Account activation via one-time token."""

import logging

from sqlalchemy.orm import Session

from userhub.services.exceptions import InvalidTokenError
from userhub.services.repositories import UserRepository

logger = logging.getLogger(__name__)


class ActivationService:
    """Consumes activation tokens."""

    def __init__(self, db: Session) -> None:
        self._db = db
        self._users = UserRepository(db)

    def activate(self, token: str | None) -> None:
        """Flip the pending account holding ``token`` to active and clear the token.

        Raises:
            InvalidTokenError: The token is empty, unknown or already used.
        """
        if not token:
            raise InvalidTokenError()

        if not self._users.activate_by_token(token):
            self._db.rollback()
            raise InvalidTokenError()

        self._db.commit()
        logger.info("Account activated")
