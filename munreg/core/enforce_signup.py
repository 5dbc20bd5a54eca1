"""Signup Enforcement — cross-field rules of the signup form.

Invariants:
    - Mismatch is attached to passwordConfirm (the second field), never password
    - Runs only after both fields passed their own shape rules
"""

from munreg.core.validation_issues import ValidationIssue, custom_issue


PASSWORDS_DO_NOT_MATCH = "Passwords do not match"


def check_password_confirmation(form: object) -> list[ValidationIssue]:
    if form.password != form.password_confirm:
        return [custom_issue("passwordConfirm", PASSWORDS_DO_NOT_MATCH)]
    return []
