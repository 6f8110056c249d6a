"""Error handling module for al-ramy.

This module defines error codes, exception classes, and the error envelope
returned by the applications.

Error Response Format:
{
    "success": false,
    "error": "Validation failed",
    "code": "VALIDATION_FAILED",
    "details": {"issues": [...]}
}

Usage:
    from alramy.core.errors import NotFoundError, SchemaValidationError

    # Raise with default message
    raise NotFoundError()

    # Raise with custom message
    raise UnauthorizedError("Session expired")
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel

from alramy.core.models.api import ApiError


class ErrorCode(str, Enum):
    """Error codes."""

    VALIDATION_FAILED = "VALIDATION_FAILED"
    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"
    NOT_FOUND = "NOT_FOUND"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class ValidationIssue(BaseModel):
    """A single rule violation.

    Attributes:
        path: Field path using wire (camelCase) names, e.g. ["pageSize"]
        rule: Violated constraint, e.g. "too_short", "missing", "not_nullable"
        message: Human-readable description
        value: Offending input value (None when the field was missing)
    """

    path: list[str | int]
    rule: str
    message: str
    value: Any = None


class AlRamyError(Exception):
    """Base exception for al-ramy.

    All al-ramy specific exceptions should inherit from this class.
    This enables centralized exception handling in FastAPI.

    Attributes:
        code: The error code from ErrorCode enum
        message: Human-readable error message
        status_code: HTTP status code to return
    """

    def __init__(self, code: ErrorCode, message: str, status_code: int) -> None:
        self.code = code
        self.message = message
        self.status_code = status_code
        super().__init__(message)

    def details(self) -> dict[str, Any] | None:
        """Structured details for the error envelope."""
        return None

    def to_response(self) -> ApiError:
        """Convert exception to ApiError envelope."""
        return ApiError(error=self.message, code=self.code.value, details=self.details())


class SchemaValidationError(AlRamyError):
    """422 Unprocessable Entity - Input rejected by a schema."""

    def __init__(
        self,
        issues: list[ValidationIssue],
        schema: str | None = None,
        message: str = "Validation failed",
    ) -> None:
        self.issues = issues
        self.schema = schema
        super().__init__(ErrorCode.VALIDATION_FAILED, message, 422)

    def details(self) -> dict[str, Any]:
        return {"issues": [issue.model_dump(mode="json") for issue in self.issues]}

    def rules(self) -> dict[str, str]:
        """Map dotted field path to violated rule (first issue per path wins)."""
        result: dict[str, str] = {}
        for issue in self.issues:
            key = ".".join(str(part) for part in issue.path)
            result.setdefault(key, issue.rule)
        return result


class UnauthorizedError(AlRamyError):
    """401 Unauthorized - Authentication required."""

    def __init__(self, message: str = "Authentication required") -> None:
        super().__init__(ErrorCode.UNAUTHORIZED, message, 401)


class ForbiddenError(AlRamyError):
    """403 Forbidden - Permission denied."""

    def __init__(self, message: str = "Permission denied") -> None:
        super().__init__(ErrorCode.FORBIDDEN, message, 403)


class NotFoundError(AlRamyError):
    """404 Not Found - Resource not found."""

    def __init__(self, message: str = "Resource not found") -> None:
        super().__init__(ErrorCode.NOT_FOUND, message, 404)


class InternalError(AlRamyError):
    """500 Internal Server Error - Unexpected error."""

    def __init__(self, message: str = "Internal server error") -> None:
        super().__init__(ErrorCode.INTERNAL_ERROR, message, 500)
