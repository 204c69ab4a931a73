"""Authentication dependencies for protected routes.

Two credential schemes are accepted in the ``Authorization`` header:

- ``Bearer <token>``: a token issued by ``POST /api/1.0/auth``
- ``Basic <base64(email:password)>``

Resolution never fails: anything that does not produce an active user is
treated as anonymous (``None``). Routes that need an identity add
``require_identity``; self-only mutations additionally call ``ensure_self``.
"""

import base64
import binascii
import logging

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from fastapi.security.utils import get_authorization_scheme_param
from sqlalchemy.orm import Session

from userhub.database import get_db
from userhub.services.credential_authenticator import (
    AuthenticatedIdentity,
    CredentialAuthenticator,
)
from userhub.services.exceptions import ForbiddenError, ServiceError
from userhub.services.repositories import UserRepository
from userhub.services.token_service import TokenService

logger = logging.getLogger(__name__)

# auto_error=False: a missing or non-Bearer header falls through to Basic or anonymous
bearer_security = HTTPBearer(auto_error=False)


def _identity_from_bearer(db: Session, token: str) -> AuthenticatedIdentity | None:
    user_id = TokenService(db).verify(token)
    if user_id is None:
        return None
    user = UserRepository(db).find_active_by_id(user_id)
    if user is None:
        return None
    return AuthenticatedIdentity(id=user.id, username=user.username)


def _identity_from_basic(db: Session, encoded: str) -> AuthenticatedIdentity | None:
    try:
        decoded = base64.b64decode(encoded, validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError):
        logger.debug("Malformed basic credentials")
        return None

    email, separator, password = decoded.partition(":")
    if not separator:
        return None

    try:
        return CredentialAuthenticator(db).authenticate(email, password)
    except ServiceError as e:
        logger.debug(f"Basic authentication rejected: {e.code}")
        return None


def get_current_identity(
    request: Request,
    bearer: HTTPAuthorizationCredentials | None = Depends(bearer_security),
    db: Session = Depends(get_db),
) -> AuthenticatedIdentity | None:
    """
    Get the caller's identity if the request carries valid credentials.

    Usage:
        @router.get("/users")
        def list_users(identity: AuthenticatedIdentity | None = Depends(get_current_identity)):
            ...
    """
    if bearer:
        return _identity_from_bearer(db, bearer.credentials)

    scheme, credentials = get_authorization_scheme_param(request.headers.get("Authorization"))
    if scheme.lower() == "basic" and credentials:
        return _identity_from_basic(db, credentials.strip())
    return None


def require_identity(
    identity: AuthenticatedIdentity | None = Depends(get_current_identity),
) -> AuthenticatedIdentity:
    """Require an authenticated caller.

    Raises:
        ForbiddenError: If the request is anonymous.
    """
    if identity is None:
        raise ForbiddenError()
    return identity


def ensure_self(identity: AuthenticatedIdentity, target_id: int) -> None:
    """Allow a mutation only when the caller is the target user.

    Raises:
        ForbiddenError: If ``identity`` is someone else.
    """
    if identity.id != target_id:
        logger.info(f"User {identity.id} tried to modify user {target_id}")
        raise ForbiddenError()
