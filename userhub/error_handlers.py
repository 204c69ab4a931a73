"""Map service failures and validation errors to HTTP responses."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from userhub.schemas.common import ErrorResponse
from userhub.services.exceptions import ServiceError

logger = logging.getLogger(__name__)

VALIDATION_FAILURE = "Validation Failure"

# code -> (status, message)
ERROR_RESPONSES: dict[str, tuple[int, str]] = {
    "invalid_credentials": (status.HTTP_401_UNAUTHORIZED, "Incorrect credentials"),
    "account_inactive": (status.HTTP_403_FORBIDDEN, "Account is inactive"),
    "invalid_token": (
        status.HTTP_400_BAD_REQUEST,
        "This account is either active or the token is invalid",
    ),
    "email_in_use": (status.HTTP_400_BAD_REQUEST, "E-mail in use"),
    "username_in_use": (status.HTTP_400_BAD_REQUEST, "Username in use"),
    "email_failure": (status.HTTP_502_BAD_GATEWAY, "E-mail Failure"),
    "user_not_found": (status.HTTP_404_NOT_FOUND, "User not found"),
    "unauthorized_update": (
        status.HTTP_403_FORBIDDEN,
        "You are not authorized to update user",
    ),
}


def _error_json(status_code: int, body: ErrorResponse) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(by_alias=True, exclude_none=True),
    )


async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    status_code, message = ERROR_RESPONSES.get(
        exc.code, (status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error")
    )
    if exc.field:
        body = ErrorResponse(
            message=VALIDATION_FAILURE,
            path=request.url.path,
            validation_errors={exc.field: message},
        )
    else:
        body = ErrorResponse(message=message, path=request.url.path)
    return _error_json(status_code, body)


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    validation_errors: dict[str, str] = {}
    for error in exc.errors():
        field = str(error["loc"][-1]) if error.get("loc") else "body"
        validation_errors.setdefault(field, error["msg"])

    body = ErrorResponse(
        message=VALIDATION_FAILURE,
        path=request.url.path,
        validation_errors=validation_errors,
    )
    return _error_json(status.HTTP_400_BAD_REQUEST, body)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
