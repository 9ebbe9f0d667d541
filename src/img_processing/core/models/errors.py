"""Custom exception classes for the IMG Processing client."""

from http import HTTPStatus
from typing import Any

from pydantic import BaseModel, Field, StrictInt, StrictStr

from img_processing.core.utils.constants import (
    ERROR_CODE_API,
    ERROR_CODE_AUTHENTICATION_FAILED,
    ERROR_CODE_CONFIGURATION,
    ERROR_CODE_RATE_LIMITED,
    ERROR_CODE_RESOURCE_NOT_FOUND,
    ERROR_CODE_UNEXPECTED,
    ERROR_CODE_VALIDATION_FAILED,
    UNEXPECTED_ERROR_MESSAGE,
)


class ErrorResponse(BaseModel):
    """Error body returned by the IMG Processing API on non-2xx responses."""

    type: StrictStr = Field(..., description="Machine-readable error classifier (URI-like)")
    error: StrictStr = Field(..., description="Short error title")
    status: StrictInt = Field(..., description="HTTP status code of the failure")
    message: StrictStr | None = Field(None, description="Optional human readable message")
    errors: list[StrictStr] | None = Field(
        None,
        description="Optional ordered list of field validation messages",
    )


class ImgProcessingError(Exception):
    """
    Base exception for all IMG Processing client errors.

    All custom errors must inherit from this class.
    Callers must explicitly provide a message and error code.
    Optional contextual information can be supplied via `details`.
    """

    message: str | None
    error_code: str
    details: dict[str, Any]

    def __init__(
        self,
        *,
        message: str,
        error_code: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.error_code = error_code
        self.details = details or {}

        super().__init__(message)


class ConfigurationError(ImgProcessingError):
    """Raised when the client is misconfigured, before any network call."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_CONFIGURATION,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class UnexpectedError(ImgProcessingError):
    """Raised when a request fails without a structured error body.

    Network failures, timeouts and malformed responses end up here. The
    original exception is always available as ``__cause__``.
    """

    def __init__(
        self,
        *,
        message: str = UNEXPECTED_ERROR_MESSAGE,
        error_code: str = ERROR_CODE_UNEXPECTED,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class APIError(ImgProcessingError):
    """Raised when the API rejects a request with a structured error body."""

    default_error_code: str = ERROR_CODE_API

    type: str
    error: str
    status: int
    errors: list[str] | None

    def __init__(
        self,
        *,
        type: str | None = None,
        error: str,
        status: int,
        message: str | None = None,
        errors: list[str] | None = None,
    ) -> None:
        self.type = type or self.default_error_code
        self.error = error
        self.status = status
        self.errors = errors

        super().__init__(
            message=message or error,
            error_code=self.type,
            details={"status": status, "errors": errors or []},
        )
        # `message` is optional on the wire, keep it as received
        self.message = message

    def __str__(self) -> str:
        summary = f"{self.status} {self.error}"
        if self.message:
            summary = f"{summary}: {self.message}"
        return summary

    @classmethod
    def from_response(cls, body: ErrorResponse) -> "APIError":
        """Build the most specific APIError subclass for an error body."""
        error_cls = _ERRORS_BY_STATUS.get(body.status, APIError)
        return error_cls(
            type=body.type,
            error=body.error,
            status=body.status,
            message=body.message,
            errors=body.errors,
        )


class ValidationError(APIError):
    """Raised when the API rejects the request payload (400/422)."""

    default_error_code = ERROR_CODE_VALIDATION_FAILED


class AuthenticationError(APIError):
    """Raised when the API key is missing, invalid or lacks permission (401/403)."""

    default_error_code = ERROR_CODE_AUTHENTICATION_FAILED


class NotFoundError(APIError):
    """Raised when the requested image does not exist (404)."""

    default_error_code = ERROR_CODE_RESOURCE_NOT_FOUND


class RateLimitError(APIError):
    """Raised when the account exceeded its request quota (429)."""

    default_error_code = ERROR_CODE_RATE_LIMITED


_ERRORS_BY_STATUS: dict[int, type[APIError]] = {
    HTTPStatus.BAD_REQUEST: ValidationError,
    HTTPStatus.UNPROCESSABLE_ENTITY: ValidationError,
    HTTPStatus.UNAUTHORIZED: AuthenticationError,
    HTTPStatus.FORBIDDEN: AuthenticationError,
    HTTPStatus.NOT_FOUND: NotFoundError,
    HTTPStatus.TOO_MANY_REQUESTS: RateLimitError,
}
