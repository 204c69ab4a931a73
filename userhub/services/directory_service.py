"""Paginated, privacy-filtered user directory."""

import logging
import math

from sqlalchemy.orm import Session

from userhub.config import settings
from userhub.schemas.user import UserPage, UserView
from userhub.services.exceptions import NotFoundError
from userhub.services.repositories import UserRepository

logger = logging.getLogger(__name__)


def _parse_int(raw: int | str | None) -> int | None:
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    try:
        return int(raw.strip())
    except ValueError:
        return None


class DirectoryService:
    """Read-only listing of active users.

    Pending users never appear, whether listed or looked up by id.
    """

    def __init__(self, db: Session) -> None:
        self._users = UserRepository(db)

    @staticmethod
    def normalize_size(raw_size: int | str | None) -> int:
        """Clamp rather than reject: anything outside 1..max becomes the default."""
        size = _parse_int(raw_size)
        if size is None or size <= 0 or size > settings.max_page_size:
            return settings.default_page_size
        return size

    @staticmethod
    def normalize_page(raw_page: int | str | None) -> int:
        page = _parse_int(raw_page)
        if page is None or page < 0:
            return 0
        return page

    def list_users(
        self,
        raw_page: int | str | None,
        raw_size: int | str | None,
        exclude_id: int | None = None,
    ) -> UserPage:
        """Return one page of active users, leaving out ``exclude_id``."""
        page = self.normalize_page(raw_page)
        size = self.normalize_size(raw_size)

        count = self._users.count_active(exclude_id)
        # Pages past the end never reach the store, so huge offsets cannot overflow it
        offset = page * size
        users = self._users.find_active_page(offset, size, exclude_id) if offset < count else []

        return UserPage(
            content=[UserView.model_validate(user) for user in users],
            page=page,
            size=size,
            total_pages=math.ceil(count / size),
        )

    def get_user(self, user_id: int) -> UserView:
        """Look up one active user.

        Raises:
            NotFoundError: The user does not exist or is still pending.
        """
        user = self._users.find_active_by_id(user_id)
        if user is None:
            raise NotFoundError(str(user_id))
        return UserView.model_validate(user)
