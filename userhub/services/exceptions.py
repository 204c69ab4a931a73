"""Failure kinds raised by the account services.

Each kind carries a stable ``code``; mapping codes to HTTP statuses and
user-facing messages is the job of the web layer (see
``userhub.error_handlers``).
"""


class ServiceError(Exception):
    """Base exception for account service operations."""

    code = "service_error"
    field: str | None = None

    def __init__(self, detail: str | None = None):
        self.detail = detail
        super().__init__(detail or self.code)


class InvalidCredentialsError(ServiceError):
    """Unknown email or wrong password. The two cases are never distinguished."""

    code = "invalid_credentials"


class AccountInactiveError(ServiceError):
    """Credentials are correct but the account has not been activated."""

    code = "account_inactive"


class InvalidTokenError(ServiceError):
    """Activation token missing, wrong or already consumed."""

    code = "invalid_token"


class EmailInUseError(ServiceError):
    """Another account already uses this email."""

    code = "email_in_use"
    field = "email"


class UsernameInUseError(ServiceError):
    """Another account already uses this username."""

    code = "username_in_use"
    field = "username"


class EmailDispatchError(ServiceError):
    """The activation email could not be delivered."""

    code = "email_failure"


class NotFoundError(ServiceError):
    """User does not exist or is not active."""

    code = "user_not_found"


class ForbiddenError(ServiceError):
    """Caller is anonymous or is not the owner of the target resource."""

    code = "unauthorized_update"
