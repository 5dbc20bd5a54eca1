"""Validation Issues — serialization and grouping of issues into reports."""

from munreg.core.validation_issues import (
    ParseResult,
    ValidationIssue,
    ValidationReport,
    custom_issue,
    reference_issue,
)


def test_issue_without_options_omits_key():
    issue = ValidationIssue(kind="missing", path=("email",), message="Field required")
    assert issue.to_dict() == {
        "kind": "missing", "path": ["email"], "message": "Field required",
    }


def test_reference_issue_carries_options():
    issue = reference_issue("choice1committee", "not found", [1, 2])
    assert issue.to_dict()["options"] == [1, 2]
    assert issue.kind == "invalid_enum_value"


def test_report_groups_messages_by_top_level_field():
    report = ValidationReport(source="body", issues=[
        custom_issue("passwordConfirm", "Passwords do not match"),
        ValidationIssue(kind="missing", path=("email",), message="Field required"),
        ValidationIssue(kind="x", path=("email",), message="second"),
        ValidationIssue(kind="model_type", path=(), message="Input should be an object"),
    ])
    assert report.field_errors == {
        "passwordConfirm": ["Passwords do not match"],
        "email": ["Field required", "second"],
    }
    assert report.form_errors == ["Input should be an object"]
    assert report.to_dict()["source"] == "body"
    assert len(report.to_dict()["issues"]) == 4


def test_parse_result_success_and_report():
    ok = ParseResult(value={"a": 1})
    assert ok.success
    failed = ParseResult(issues=(custom_issue("a", "bad"),))
    assert not failed.success
    assert failed.report("query").source == "query"
