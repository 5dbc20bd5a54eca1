"""Domain Types — identity types and closed value sets used across the codebase.

Invariants:
    - UserId, CommitteeId, DelegationId wrap int primary keys
    - Every closed set of accepted values is an Enum (no raw string matching)
    - Enum values are the exact strings accepted on the wire and stored in the DB

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", int)
CommitteeId = NewType("CommitteeId", int)
DelegationId = NewType("DelegationId", int)

# Sentinel the apply forms send for "not part of a delegation"
NO_DELEGATION: int = -1


# ─── Enums ───────────────────────────────────────────────────────

class ShirtSize(str, Enum):
    """Conference shirt sizes. Absent (None) means no shirt wanted."""
    XS = "XS"
    S = "S"
    M = "M"
    L = "L"
    XL = "XL"
    XXL = "XXL"


class DietaryOption(str, Enum):
    """Dietary preference offered on signup."""
    NONE = "None"
    VEGETARIAN = "Vegetarian"
    VEGAN = "Vegan"
    OTHER = "Other (please specify below)"


class PaymentStatus(str, Enum):
    """Application fee state — every new application starts as pending."""
    PENDING = "pending"
    PAID = "paid"
    WAIVED = "waived"


class CommitteeDifficulty(str, Enum):
    """Difficulty rating shown next to each committee."""
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"


class ApplicationRole(str, Enum):
    """Role a user applies for. Used for logging and error context."""
    DELEGATE = "delegate"
    CHAIR = "chair"
    DELEGATION = "delegation"


def enum_values(enum_cls: type[Enum]) -> list[str]:
    """Accepted wire values of a str Enum, in declaration order."""
    return [member.value for member in enum_cls]
