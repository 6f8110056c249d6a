"""Tests for error handling classes."""

import pytest

from alramy.core.errors import (
    AlRamyError,
    ErrorCode,
    ForbiddenError,
    InternalError,
    NotFoundError,
    SchemaValidationError,
    UnauthorizedError,
    ValidationIssue,
)
from alramy.core.models import ApiError


class TestErrorCode:
    """Tests for ErrorCode enum."""

    def test_all_error_codes(self) -> None:
        """All expected error codes should exist."""
        expected = {
            "VALIDATION_FAILED",
            "UNAUTHORIZED",
            "FORBIDDEN",
            "NOT_FOUND",
            "INTERNAL_ERROR",
        }
        assert {code.value for code in ErrorCode} == expected

    def test_error_codes_are_strings(self) -> None:
        """Error codes should compare equal to their string values."""
        assert ErrorCode.VALIDATION_FAILED == "VALIDATION_FAILED"


class TestAlRamyError:
    """Tests for AlRamyError base class."""

    def test_base_error_attributes(self) -> None:
        """AlRamyError should have code, message, and status_code."""
        error = AlRamyError(ErrorCode.FORBIDDEN, "Test message", 403)
        assert error.code == ErrorCode.FORBIDDEN
        assert error.message == "Test message"
        assert error.status_code == 403
        assert str(error) == "Test message"

    def test_to_response(self) -> None:
        """to_response should return the ApiError envelope."""
        error = AlRamyError(ErrorCode.FORBIDDEN, "Access denied", 403)
        response = error.to_response()
        assert isinstance(response, ApiError)
        assert response.to_wire() == {
            "success": False,
            "error": "Access denied",
            "code": "FORBIDDEN",
        }


class TestSchemaValidationError:
    """Tests for SchemaValidationError."""

    @pytest.fixture
    def error(self) -> SchemaValidationError:
        return SchemaValidationError(
            [
                ValidationIssue(
                    path=["pageSize"],
                    rule="less_than_equal",
                    message="Input should be less than or equal to 100",
                    value=101,
                ),
                ValidationIssue(
                    path=["pageSize"], rule="other", message="second issue", value=101
                ),
                ValidationIssue(
                    path=["title"], rule="missing", message="Field required"
                ),
            ],
            schema="PaginationQuery",
        )

    def test_defaults(self, error: SchemaValidationError) -> None:
        """Should be a 422 VALIDATION_FAILED error."""
        assert isinstance(error, AlRamyError)
        assert error.code == ErrorCode.VALIDATION_FAILED
        assert error.status_code == 422
        assert error.message == "Validation failed"
        assert error.schema == "PaginationQuery"

    def test_rules_first_issue_per_path(self, error: SchemaValidationError) -> None:
        """rules() maps each path to its first violated rule."""
        assert error.rules() == {"pageSize": "less_than_equal", "title": "missing"}

    def test_details_in_response(self, error: SchemaValidationError) -> None:
        """Issues are carried in the envelope details."""
        wire = error.to_response().to_wire()
        assert wire["code"] == "VALIDATION_FAILED"
        issues = wire["details"]["issues"]
        assert issues[0] == {
            "path": ["pageSize"],
            "rule": "less_than_equal",
            "message": "Input should be less than or equal to 100",
            "value": 101,
        }
        assert error.details()["issues"][2]["value"] is None


class TestOtherErrors:
    """Tests for other error classes to ensure consistency."""

    @pytest.mark.parametrize(
        "error_class,expected_code,expected_status,default_message",
        [
            (UnauthorizedError, ErrorCode.UNAUTHORIZED, 401, "Authentication required"),
            (ForbiddenError, ErrorCode.FORBIDDEN, 403, "Permission denied"),
            (NotFoundError, ErrorCode.NOT_FOUND, 404, "Resource not found"),
            (InternalError, ErrorCode.INTERNAL_ERROR, 500, "Internal server error"),
        ],
    )
    def test_error_defaults(
        self, error_class, expected_code, expected_status, default_message
    ) -> None:
        """Each error class should have correct defaults."""
        error = error_class()
        assert error.code == expected_code
        assert error.status_code == expected_status
        assert error.message == default_message

    def test_custom_message(self) -> None:
        """Should accept custom message."""
        assert UnauthorizedError("Session expired").message == "Session expired"
