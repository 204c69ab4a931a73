"""User registration, activation, directory and profile router."""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from userhub.database import get_db
from userhub.dependencies.auth import ensure_self, get_current_identity, require_identity
from userhub.schemas.common import MessageResponse
from userhub.schemas.user import UserCreate, UserPage, UserUpdate, UserView
from userhub.services.activation_service import ActivationService
from userhub.services.credential_authenticator import AuthenticatedIdentity
from userhub.services.directory_service import DirectoryService
from userhub.services.profile_service import ProfileService
from userhub.services.registration_service import RegistrationService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", response_model=MessageResponse)
def register(data: UserCreate, db: Session = Depends(get_db)) -> dict:
    """Register a new user and send the activation email."""
    RegistrationService(db).register(
        username=data.username,
        email=data.email,
        password=data.password,
        inactive=data.inactive,
    )
    return {"message": "User Created"}


@router.post("/token/{token}", response_model=MessageResponse)
def activate(token: str, db: Session = Depends(get_db)) -> dict:
    """Activate an account with the token from the activation email."""
    ActivationService(db).activate(token)
    return {"message": "Account is activated"}


@router.get("", response_model=UserPage)
def list_users(
    page: str | None = None,
    size: str | None = None,
    db: Session = Depends(get_db),
    identity: AuthenticatedIdentity | None = Depends(get_current_identity),
) -> UserPage:
    """List active users. An authenticated caller does not see themselves.

    ``page`` and ``size`` are taken as raw strings: out-of-range or
    non-numeric values fall back to defaults instead of failing.
    """
    exclude_id = identity.id if identity else None
    return DirectoryService(db).list_users(page, size, exclude_id=exclude_id)


@router.get("/{user_id}", response_model=UserView)
def get_user(user_id: int, db: Session = Depends(get_db)) -> UserView:
    """Get one active user."""
    return DirectoryService(db).get_user(user_id)


@router.put("/{user_id}", response_model=UserView)
def update_user(
    user_id: int,
    data: UserUpdate,
    db: Session = Depends(get_db),
    identity: AuthenticatedIdentity = Depends(require_identity),
) -> UserView:
    """Update the caller's own username."""
    ensure_self(identity, user_id)
    return ProfileService(db).update_username(user_id, data.username)
