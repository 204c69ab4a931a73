"""Self-service profile updates."""

import logging

from sqlalchemy.orm import Session

from userhub.schemas.user import UserView
from userhub.services.exceptions import NotFoundError
from userhub.services.registration_service import duplicate_to_service_error
from userhub.services.repositories import DuplicateError, UserRepository

logger = logging.getLogger(__name__)


class ProfileService:
    """Applies changes a user makes to their own account.

    Callers must have already checked that the acting identity owns
    ``user_id`` (see ``userhub.dependencies.auth.ensure_self``).
    """

    def __init__(self, db: Session) -> None:
        self._db = db
        self._users = UserRepository(db)

    def update_username(self, user_id: int, username: str) -> UserView:
        user = self._users.find_active_by_id(user_id)
        if user is None:
            raise NotFoundError(str(user_id))

        try:
            self._users.update_username(user, username)
        except DuplicateError as e:
            raise duplicate_to_service_error(e) from e

        self._db.commit()
        logger.info(f"User {user_id} changed username to {username}")
        return UserView.model_validate(user)
