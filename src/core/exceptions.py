"""Custom exceptions and error codes."""

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes for the API."""

    # Not found errors (404)
    USER_NOT_FOUND = "USER_NOT_FOUND"
    NO_CURRENT_USER = "NO_CURRENT_USER"

    # Validation errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # Conflict errors (409)
    FLOW_COMPLETED = "FLOW_COMPLETED"

    # Rate limiting (429)
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"

    # Server errors (500)
    INTERNAL_ERROR = "INTERNAL_ERROR"


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Any | None = None,
    ) -> None:
        self.error_code = error_code
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class ValidationError(AppException):
    """Profile input rejected."""

    def __init__(self, message: str = "name required", field: str = "name") -> None:
        super().__init__(
            error_code=ErrorCode.VALIDATION_ERROR,
            message=message,
            status_code=400,
            details={"field": field},
        )


class UserNotFoundError(AppException):
    """User profile not found in the directory."""

    def __init__(self, user_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.USER_NOT_FOUND,
            message=f"User not found: {user_id}",
            status_code=404,
            details={"user_id": user_id},
        )


class NoCurrentUserError(AppException):
    """No profile has been marked as the current user yet."""

    def __init__(self) -> None:
        super().__init__(
            error_code=ErrorCode.NO_CURRENT_USER,
            message="No current user has been set",
            status_code=404,
        )


class FlowCompletedError(AppException):
    """A profile flow was used after it already submitted."""

    def __init__(self, flow: str) -> None:
        super().__init__(
            error_code=ErrorCode.FLOW_COMPLETED,
            message=f"The {flow} flow has already been submitted",
            status_code=409,
            details={"flow": flow},
        )
