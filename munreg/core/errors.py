"""Error Hierarchy — typed, categorized exceptions for all registration failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the API error envelope:
      {"statusCode", "message", "description", "code"}
    - Validation failures always carry message "Bad Request" and a list of reports
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with MunRegError base: FastAPI global handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging framework
    - Titles looked up per status instead of http.HTTPStatus.phrase: the phrase for
      422 differs between Python releases and the envelope must stay stable
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, TYPE_CHECKING
from datetime import datetime, timezone

if TYPE_CHECKING:
    from munreg.core.validation_issues import ValidationReport


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    AUTHENTICATION = "authentication"
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"
    CONFLICT = "conflict"


STATUS_TITLES: dict[int, str] = {
    400: "Bad Request",
    401: "Unauthorized",
    403: "Forbidden",
    404: "Not Found",
    409: "Conflict",
    422: "Bad Request",
    500: "Internal Server Error",
    503: "Service Unavailable",
}


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    user_id: int | None = None
    path: str | None = None
    debug_info: dict[str, Any] | None = None


class MunRegError(Exception):
    """Base exception for all registration backend errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
        description: Any = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status
        self.description = description if description is not None else message

    @property
    def title(self) -> str:
        return STATUS_TITLES.get(self.http_status, "Error")

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "statusCode": self.http_status,
            "message": self.title,
            "description": self.description,
            "code": self.code,
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class RequestValidationFailedError(MunRegError):
    """Body and/or query failed validation. One report per failed part."""
    def __init__(
        self, reports: list["ValidationReport"], context: ErrorContext | None = None,
    ):
        issue_count = sum(len(r.issues) for r in reports)
        super().__init__(
            f"Request validation failed with {issue_count} issue(s)",
            "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 422,
            description=[r.to_dict() for r in reports],
        )
        self.reports = reports


class AuthenticationError(MunRegError):
    """Missing, invalid or expired credentials."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "AUTHENTICATION_FAILED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )


class DuplicateApplicationError(MunRegError):
    """User already holds an application of this role."""
    def __init__(self, role: str, context: ErrorContext | None = None):
        super().__init__(
            "You have already submitted an application, "
            "there is only one allowed per user",
            "DUPLICATE_APPLICATION", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.ERROR, context, 403,
        )
        self.role = role


class ResourceNotFoundError(MunRegError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )


class ConflictError(MunRegError):
    """Write collides with existing data (e.g. email already registered)."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "CONFLICT", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, context, 409,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(MunRegError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
