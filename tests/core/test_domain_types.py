"""Domain Types — enum wire values stay stable."""

from munreg.core.domain_types import (
    DietaryOption, NO_DELEGATION, PaymentStatus, ShirtSize, enum_values,
)


def test_shirt_sizes_in_order():
    assert enum_values(ShirtSize) == ["XS", "S", "M", "L", "XL", "XXL"]


def test_dietary_options_match_signup_form():
    assert enum_values(DietaryOption) == [
        "None", "Vegetarian", "Vegan", "Other (please specify below)",
    ]


def test_new_applications_start_pending():
    assert PaymentStatus.PENDING.value == "pending"


def test_no_delegation_sentinel():
    assert NO_DELEGATION == -1
