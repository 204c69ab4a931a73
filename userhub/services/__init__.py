"""Account lifecycle and access-control services."""

from .activation_service import ActivationService
from .auth_service import AuthService
from .credential_authenticator import AuthenticatedIdentity, CredentialAuthenticator
from .directory_service import DirectoryService
from .email_service import EmailService
from .profile_service import ProfileService
from .registration_service import RegistrationService
from .token_service import TokenService

__all__ = [
    "ActivationService",
    "AuthService",
    "AuthenticatedIdentity",
    "CredentialAuthenticator",
    "DirectoryService",
    "EmailService",
    "ProfileService",
    "RegistrationService",
    "TokenService",
]
