"""Root conftest — shared test configuration and reference data.

Invariants:
    - Environment points at SQLite and a fixed JWT secret BEFORE munreg imports
    - reference_snapshot is the same committee layout the route tests seed:
      committee 1 seats US/CN/RU, committee 2 seats US/FR, committee 3 seats DE/BR;
      delegation 4 is the only delegation
"""

import os

import pytest

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("JWT_SECRET", "test-secret-not-for-production")
os.environ.setdefault("LOG_FORMAT", "text")

from munreg.core.reference_data import (  # noqa: E402
    CommitteeCountryRef, CommitteeRef, DelegationRef, ReferenceSnapshot,
)

COMMITTEE_COUNTRIES = {
    1: ["US", "CN", "RU"],
    2: ["US", "FR"],
    3: ["DE", "BR"],
}


@pytest.fixture
def reference_snapshot() -> ReferenceSnapshot:
    return ReferenceSnapshot(
        committees=(
            CommitteeRef(id=1, name="unsc", displayname="Security Council", difficulty="Advanced"),
            CommitteeRef(id=2, name="who", displayname="World Health Organization", difficulty="Beginner"),
            CommitteeRef(id=3, name="ecosoc", displayname="Economic and Social Council", difficulty="Intermediate"),
        ),
        committee_countries=tuple(
            CommitteeCountryRef(committee_id=cid, country=country)
            for cid, countries in COMMITTEE_COUNTRIES.items()
            for country in countries
        ),
        delegations=(DelegationRef(id=4, name="Springfield High School"),),
    )


@pytest.fixture
def delegate_payload() -> dict:
    """A delegate application that passes every check against reference_snapshot."""
    return {
        "motivation": "I want to debate global health policy.",
        "experience": "Two conferences as a delegate.",
        "delegationId": -1,
        "choice1committee": 1,
        "choice1country": "US",
        "choice2committee": 2,
        "choice2country": "FR",
        "choice3committee": 3,
        "choice3country": "DE",
        "shirtSize": "M",
    }


@pytest.fixture
def chair_payload() -> dict:
    return {
        "motivation": "I have chaired committees before.",
        "experience": "Chaired WHO twice at regional events.",
        "delegationId": -1,
        "choice1committee": 2,
        "choice2committee": 1,
        "choice3committee": 3,
        "shirtSize": None,
    }


@pytest.fixture
def signup_payload() -> dict:
    return {
        "email": "ada@example.org",
        "password": "longenough1",
        "passwordConfirm": "longenough1",
        "firstname": "Ada",
        "lastname": "Lovelace",
        "phone": "+447400123456",
        "birthdate": "2005-04-01",
        "nationality": "gb",
        "schoolname": "Analytical School",
        "dietary": "Vegetarian",
        "otherInfo": None,
    }
