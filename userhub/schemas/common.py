"""Common response schemas used across the API."""

import time

from pydantic import BaseModel, Field


def _now_millis() -> int:
    return int(time.time() * 1000)


class ErrorResponse(BaseModel):
    """Standard error response format for API errors.

    Attributes:
        message: Human-readable error message
        path: Request path that caused the error
        timestamp: Epoch milliseconds when the error occurred
        validation_errors: Per-field messages, only present for invalid input
    """

    message: str = Field(..., description="Human-readable error message")
    path: str = Field(..., description="Request path that caused the error")
    timestamp: int = Field(default_factory=_now_millis)
    validation_errors: dict[str, str] | None = Field(
        None, serialization_alias="validationErrors", description="Field errors"
    )


class MessageResponse(BaseModel):
    """Simple message response for operations that return only a message.

    Attributes:
        message: The response message
    """

    message: str
