"""Field Types — reusable annotated types for form fields.

Invariants:
    - Enumeration violations raise invalid_enum_value with ctx["options"] set to
      every accepted value, so clients can offer "did you mean one of"
    - Country codes are normalized to upper case ISO 3166-1 alpha-2
    - Phone numbers are normalized to E.164; empty strings become None
    - Delegation id -1 is normalized to None before type validation
    - Birthdates accept a plain date or an ISO timestamp; a timestamp keeps its
      calendar date as written, time and offset are dropped
    - Ids and counts are strict ints: "5" and true are rejected, not coerced

Design Decisions:
    - PydanticCustomError over ValueError: keeps a stable error type and lets us
      attach the option list in ctx
    - phonenumbers + pycountry for phone/country checks instead of hand-written
      regexes or code tables
"""

from datetime import date, datetime
from enum import Enum
from typing import Annotated, Any

import phonenumbers
import pycountry
from pydantic import (
    AfterValidator, BeforeValidator, Field, StrictInt, TypeAdapter, ValidationError,
)
from pydantic_core import PydanticCustomError

from munreg.core.domain_types import NO_DELEGATION, enum_values


MOBILE_NUMBER_TYPES = (
    phonenumbers.PhoneNumberType.MOBILE,
    phonenumbers.PhoneNumberType.FIXED_LINE_OR_MOBILE,
)

_TIMESTAMP = TypeAdapter(datetime)


def one_of(enum_cls: type[Enum], message: str | None = None) -> BeforeValidator:
    """Reject values outside enum_cls, reporting every accepted value."""
    options = enum_values(enum_cls)

    def _check(value: Any) -> Any:
        if value is None or isinstance(value, enum_cls):
            return value
        if value not in options:
            raise PydanticCustomError(
                "invalid_enum_value",
                message or "Invalid option",
                {"options": options},
            )
        return value

    return BeforeValidator(_check)


def check_country_code(value: str) -> str:
    code = value.strip().upper()
    if len(code) != 2 or pycountry.countries.get(alpha_2=code) is None:
        raise PydanticCustomError("invalid_country", "You must pick a valid country")
    return code


def _normalize_mobile_phone(value: str | None) -> str | None:
    if value is None or not value.strip():
        return None
    try:
        parsed = phonenumbers.parse(value, None)
    except phonenumbers.NumberParseException:
        raise PydanticCustomError("invalid_phone", "Invalid phone number")
    if (
        not phonenumbers.is_valid_number(parsed)
        or phonenumbers.number_type(parsed) not in MOBILE_NUMBER_TYPES
    ):
        raise PydanticCustomError("invalid_phone", "Invalid phone number")
    return phonenumbers.format_number(parsed, phonenumbers.PhoneNumberFormat.E164)


def _date_from_timestamp(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, str) and "T" in value:
        try:
            return _TIMESTAMP.validate_python(value).date()
        except ValidationError:
            raise PydanticCustomError("date_parsing", "Please enter a valid date")
    return value


def _drop_no_delegation(value: Any) -> Any:
    if isinstance(value, int) and not isinstance(value, bool) and value == NO_DELEGATION:
        return None
    return value


CountryCode = Annotated[str, AfterValidator(check_country_code)]
StrictCountryCode = Annotated[
    str, Field(min_length=2, max_length=2), AfterValidator(check_country_code),
]
MobilePhone = Annotated[str | None, AfterValidator(_normalize_mobile_phone)]
OptionalDelegationId = Annotated[
    StrictInt | None, BeforeValidator(_drop_no_delegation),
]
BirthDate = Annotated[date, BeforeValidator(_date_from_timestamp)]
