"""Repository layer - data access abstraction.

Repositories handle all database queries, providing a clean interface
for services. Repositories flush but never commit: the calling service
owns the transaction.

Dependency direction: Services -> Repositories -> Models
"""

from .exceptions import DuplicateError, RepositoryError
from .user_repository import UserRepository, normalize_email

__all__ = [
    "DuplicateError",
    "RepositoryError",
    "UserRepository",
    "normalize_email",
]
