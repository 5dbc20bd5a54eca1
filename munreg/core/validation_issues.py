"""Validation Issues — library-neutral representation of every validation failure.

Invariants:
    - Every issue has a kind tag, a field path, and a human-readable message
    - options is set only for enumeration/reference violations (the valid values
      at the time of checking), None otherwise
    - ValidationReport groups the issues of ONE request part (body or query)
    - Issue order is preserved: shape issues in field order, then refinement issues

Design Decisions:
    - Frozen dataclasses: issues are values, safe to share between reports
    - Shape issues keep the pydantic error type as their kind (string_too_short,
      missing, ...) so clients can match on them; refinement issues use IssueKind
    - fieldErrors keyed by the top-level field name, mirroring how forms render
      one message list per input
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class IssueKind(str, Enum):
    """Kinds emitted by refinements (shape kinds come from the schema layer)."""
    INVALID_ENUM_VALUE = "invalid_enum_value"
    CUSTOM = "custom"


PathItem = str | int


@dataclass(frozen=True)
class ValidationIssue:
    """One field-scoped violation."""
    kind: str
    path: tuple[PathItem, ...]
    message: str
    options: tuple[Any, ...] | None = None

    @property
    def field(self) -> str | None:
        """Top-level field name, or None for whole-object issues."""
        return str(self.path[0]) if self.path else None

    def to_dict(self) -> dict:
        data: dict[str, Any] = {
            "kind": self.kind,
            "path": list(self.path),
            "message": self.message,
        }
        if self.options is not None:
            data["options"] = list(self.options)
        return data


def reference_issue(
    field_name: str, message: str, options: list[Any],
) -> ValidationIssue:
    """Issue for an id/value that is not in the current reference snapshot."""
    return ValidationIssue(
        kind=IssueKind.INVALID_ENUM_VALUE.value,
        path=(field_name,),
        message=message,
        options=tuple(options),
    )


def custom_issue(field_name: str, message: str) -> ValidationIssue:
    """Issue for a cross-field inconsistency."""
    return ValidationIssue(
        kind=IssueKind.CUSTOM.value, path=(field_name,), message=message,
    )


@dataclass
class ValidationReport:
    """All issues found in one request part."""
    source: str
    issues: list[ValidationIssue] = field(default_factory=list)

    @property
    def field_errors(self) -> dict[str, list[str]]:
        errors: dict[str, list[str]] = {}
        for issue in self.issues:
            if issue.field is not None:
                errors.setdefault(issue.field, []).append(issue.message)
        return errors

    @property
    def form_errors(self) -> list[str]:
        return [issue.message for issue in self.issues if not issue.path]

    def to_dict(self) -> dict:
        return {
            "source": self.source,
            "issues": [issue.to_dict() for issue in self.issues],
            "fieldErrors": self.field_errors,
            "formErrors": self.form_errors,
        }


@dataclass(frozen=True)
class ParseResult:
    """Outcome of validating one value: the normalized value or the issues."""
    value: Any = None
    issues: tuple[ValidationIssue, ...] = ()

    @property
    def success(self) -> bool:
        return not self.issues

    def report(self, source: str) -> ValidationReport:
        return ValidationReport(source=source, issues=list(self.issues))
