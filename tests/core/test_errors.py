"""Error Hierarchy — envelopes and status codes of every error type."""

from munreg.core.errors import (
    AuthenticationError,
    ConflictError,
    DatabaseError,
    DuplicateApplicationError,
    ErrorCategory,
    RequestValidationFailedError,
    ResourceNotFoundError,
)
from munreg.core.validation_issues import ValidationReport, custom_issue


def test_validation_error_envelope_is_bad_request_422():
    reports = [
        ValidationReport("body", [custom_issue("passwordConfirm", "Passwords do not match")]),
        ValidationReport("query", [custom_issue("limit", "too big")]),
    ]
    exc = RequestValidationFailedError(reports)
    response = exc.to_response()
    assert exc.http_status == 422
    assert response["statusCode"] == 422
    assert response["message"] == "Bad Request"
    assert [d["source"] for d in response["description"]] == ["body", "query"]
    assert exc.category == ErrorCategory.VALIDATION


def test_duplicate_application_is_forbidden():
    response = DuplicateApplicationError("delegate").to_response()
    assert response["statusCode"] == 403
    assert response["message"] == "Forbidden"
    assert "only one allowed per user" in response["description"]


def test_not_found_and_conflict_and_auth():
    assert ResourceNotFoundError("Committee", "9").to_response()["statusCode"] == 404
    assert ConflictError("taken").to_response()["message"] == "Conflict"
    assert AuthenticationError("nope").http_status == 401


def test_database_error_is_service_unavailable():
    exc = DatabaseError("boom", "commit")
    assert exc.http_status == 503
    assert exc.code == "DATABASE_ERROR"
    assert exc.to_response()["description"] == "Database commit failed: boom"
