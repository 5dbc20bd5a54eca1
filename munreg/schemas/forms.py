"""Form Schemas — every user-submitted form and the refinements it runs.

Invariants:
    - Signup: password >= 8 chars, passwordConfirm must equal password
      (mismatch reported on passwordConfirm only after both pass shape)
    - DelegateApply: 3 (committee, country) slots, committee ids >= 0,
      countries >= 2 chars, motivation/experience 10-4000 chars,
      delegationId -1 -> None, shirtSize in ShirtSize or None
    - ChairApply: DelegateApply without the country half of each slot
    - DelegationApply: name 10-100 chars, ISO alpha-2 country, estimatedDelegates >= 1
    - The user id is NEVER read from the body; routes take it from the bearer token
    - Committee ids, delegation ids and delegate counts are JSON numbers only
    - Signup birthdate accepts a date or an ISO timestamp (date part kept)

Design Decisions:
    - Module-level FormSchema instances (SIGNUP, DELEGATE_APPLY, ...) are the
      single source of truth handed to the request validator
    - error_messages keep the wording the registration forms display
"""

from datetime import date, datetime, timezone
from typing import Annotated

from pydantic import EmailStr, Field, StrictInt

from munreg.core.domain_types import (
    CommitteeDifficulty, DietaryOption, ShirtSize,
)
from munreg.core.enforce_choices import (
    check_chair_choices, check_delegate_choices, check_delegation_choice,
)
from munreg.core.enforce_signup import check_password_confirmation
from munreg.schemas.fields import (
    BirthDate, CountryCode, MobilePhone, OptionalDelegationId, StrictCountryCode,
    one_of,
)
from munreg.schemas.form_schema import FormModel, FormSchema


CommitteeChoice = Annotated[StrictInt, Field(ge=0)]
CountryChoice = Annotated[str, Field(min_length=2)]
Statement = Annotated[str, Field(min_length=10, max_length=4000)]
OptionalShirtSize = Annotated[
    ShirtSize | None, one_of(ShirtSize, "Please select a valid shirt size"),
]

_COMMITTEE_MESSAGE = {"*": "Please choose a committee"}
_COUNTRY_MESSAGE = {"*": "Please choose a country"}


def _statement_messages(label: str) -> dict[str, str]:
    return {
        "string_too_long": f"Your {label} is too long",
        "string_too_short": f"Please enter a short {label}",
        "missing": f"Please enter a short {label}",
    }


def _today() -> date:
    return datetime.now(timezone.utc).date()


# --- Account forms -------------------------------------------------------------

class SignupForm(FormModel):
    """New account registration."""
    email: EmailStr
    password: str = Field(min_length=8)
    password_confirm: str = Field(alias="passwordConfirm")
    firstname: str = Field(min_length=1)
    lastname: str = Field(min_length=1)
    phone: MobilePhone = None
    birthdate: BirthDate = Field(default_factory=_today)
    nationality: CountryCode
    schoolname: str | None = None
    dietary: Annotated[
        DietaryOption | None, one_of(DietaryOption, "Please select a dietary option"),
    ] = None
    other_info: str | None = Field(None, max_length=400, alias="otherInfo")

    error_messages = {
        "password": {"string_too_short": "Password must be at least 8 characters"},
        "firstname": {"*": "Please enter first name"},
        "lastname": {"*": "Please enter last name"},
    }


class LoginForm(FormModel):
    email: EmailStr
    password: str


# --- Application forms ---------------------------------------------------------

class ApplicationForm(FormModel):
    """Fields shared by delegate and chair applications."""
    motivation: Statement
    experience: Statement
    delegation_id: OptionalDelegationId = Field(None, alias="delegationId")
    shirt_size: OptionalShirtSize = Field(None, alias="shirtSize")

    error_messages = {
        "motivation": _statement_messages("motivation"),
        "experience": _statement_messages("experience"),
        "choice1committee": _COMMITTEE_MESSAGE,
        "choice2committee": _COMMITTEE_MESSAGE,
        "choice3committee": _COMMITTEE_MESSAGE,
        "choice1country": _COUNTRY_MESSAGE,
        "choice2country": _COUNTRY_MESSAGE,
        "choice3country": _COUNTRY_MESSAGE,
    }


class ChairApplyForm(ApplicationForm):
    choice1committee: CommitteeChoice
    choice2committee: CommitteeChoice
    choice3committee: CommitteeChoice


class DelegateApplyForm(ApplicationForm):
    choice1committee: CommitteeChoice
    choice1country: CountryChoice
    choice2committee: CommitteeChoice
    choice2country: CountryChoice
    choice3committee: CommitteeChoice
    choice3country: CountryChoice


class DelegationApplyForm(FormModel):
    """A user applying to lead a school/country delegation."""
    name: str = Field(min_length=10, max_length=100)
    country: StrictCountryCode
    estimated_delegates: StrictInt = Field(ge=1, alias="estimatedDelegates")
    delegates: StrictInt | None = None

    error_messages = {
        "name": {
            "string_too_long": "Your name is too long",
            "string_too_short": "Please input a name",
        },
        "country": {
            "string_too_short": "Please enter a valid country code",
            "string_too_long": "Please enter a valid country code",
        },
        "estimatedDelegates": {"*": "Please enter a valid number"},
    }


# --- Query schemas -------------------------------------------------------------

class CommitteeListQuery(FormModel):
    limit: int = Field(50, ge=1, le=100)
    offset: int = Field(0, ge=0)
    difficulty: Annotated[
        CommitteeDifficulty | None, one_of(CommitteeDifficulty),
    ] = None


SIGNUP = FormSchema(SignupForm, refinements=[check_password_confirmation])
LOGIN = FormSchema(LoginForm)
DELEGATE_APPLY = FormSchema(
    DelegateApplyForm,
    reference_refinements=[check_delegate_choices, check_delegation_choice],
)
CHAIR_APPLY = FormSchema(
    ChairApplyForm,
    reference_refinements=[check_chair_choices, check_delegation_choice],
)
DELEGATION_APPLY = FormSchema(DelegationApplyForm)
COMMITTEE_LIST_QUERY = FormSchema(CommitteeListQuery)
