"""Authentication router."""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from userhub.database import get_db
from userhub.schemas.auth import AuthResponse, Credentials
from userhub.services.credential_authenticator import CredentialAuthenticator
from userhub.services.token_service import TokenService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["authentication"])


@router.post("", response_model=AuthResponse)
def login(data: Credentials, db: Session = Depends(get_db)) -> dict:
    """Check credentials and issue a bearer token."""
    identity = CredentialAuthenticator(db).authenticate(data.email, data.password)
    token = TokenService(db).issue(identity.id)

    logger.info(f"Token issued for user {identity.id}")
    return {"id": identity.id, "username": identity.username, "token": token}
