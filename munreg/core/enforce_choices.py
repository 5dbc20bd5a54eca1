"""Committee Choice Enforcement — cross-checks ranked choices against reference data.

Invariants:
    - Every slot (1..3) is checked independently; issues from all slots aggregate
    - A committee id not in the snapshot yields one invalid_enum_value issue on
      choiceNcommittee listing every committee id
    - The country of a slot is checked ONLY when its committee exists, so an
      unknown committee never produces a second, confusing country issue
    - Duplicate committees across slots are accepted
    - A non-null delegation id must name an existing delegation; null (no
      delegation) is always accepted
    - PURE: reads the form and the snapshot, never mutates either

Design Decisions:
    - Functions take any object exposing choiceNcommittee/choiceNcountry
      attributes: the pydantic forms satisfy it, and so do plain test doubles
"""

from munreg.core.reference_data import ReferenceSnapshot
from munreg.core.validation_issues import ValidationIssue, reference_issue


CHOICE_SLOTS: tuple[int, ...] = (1, 2, 3)

COMMITTEE_NOT_FOUND = "The committee with the given ID was not found"
INVALID_COUNTRY_COMBINATION = "Invalid country and committee combination"
DELEGATION_NOT_FOUND = "The delegation with the given ID was not found"


def _committee_field(slot: int) -> str:
    return f"choice{slot}committee"


def _country_field(slot: int) -> str:
    return f"choice{slot}country"


def check_committee_exists(
    form: object, slot: int, snapshot: ReferenceSnapshot,
) -> ValidationIssue | None:
    """Issue when the slot's committee id is unknown, else None."""
    committee_id = getattr(form, _committee_field(slot))
    if snapshot.has_committee(committee_id):
        return None
    return reference_issue(
        _committee_field(slot), COMMITTEE_NOT_FOUND, snapshot.committee_ids(),
    )


def check_country_in_committee(
    form: object, slot: int, snapshot: ReferenceSnapshot,
) -> ValidationIssue | None:
    """Issue when the slot's country is not offered by its committee, else None."""
    committee_id = getattr(form, _committee_field(slot))
    country = getattr(form, _country_field(slot))
    if snapshot.has_country(committee_id, country):
        return None
    return reference_issue(
        _country_field(slot),
        INVALID_COUNTRY_COMBINATION,
        snapshot.countries_for(committee_id),
    )


def check_chair_choices(
    form: object, snapshot: ReferenceSnapshot,
) -> list[ValidationIssue]:
    """Chair applications: committee existence only."""
    issues = []
    for slot in CHOICE_SLOTS:
        issue = check_committee_exists(form, slot, snapshot)
        if issue:
            issues.append(issue)
    return issues


def check_delegate_choices(
    form: object, snapshot: ReferenceSnapshot,
) -> list[ValidationIssue]:
    """Delegate applications: committee existence, then country per valid committee.

    Committee issues for all slots come first, then country issues, matching
    the order a reader scans the form top to bottom per concern.
    """
    committee_issues: list[ValidationIssue] = []
    country_issues: list[ValidationIssue] = []
    for slot in CHOICE_SLOTS:
        committee_issue = check_committee_exists(form, slot, snapshot)
        if committee_issue:
            committee_issues.append(committee_issue)
            continue
        country_issue = check_country_in_committee(form, slot, snapshot)
        if country_issue:
            country_issues.append(country_issue)
    return committee_issues + country_issues


def check_delegation_choice(
    form: object, snapshot: ReferenceSnapshot,
) -> list[ValidationIssue]:
    """Delegate and chair applications: the named delegation must exist."""
    delegation_id = getattr(form, "delegation_id", None)
    if delegation_id is None or snapshot.has_delegation(delegation_id):
        return []
    return [reference_issue(
        "delegationId", DELEGATION_NOT_FOUND, snapshot.delegation_ids(),
    )]
