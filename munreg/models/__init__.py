"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Committee, CommitteeCountry and StaffMember are read-only reference data
    - Applications are one-per-user per role (unique user_id)

Design Decisions:
    - One file per entity group for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from munreg.models.user import User  # noqa: F401
from munreg.models.committee import Committee, CommitteeCountry  # noqa: F401
from munreg.models.delegation import Delegation  # noqa: F401
from munreg.models.application import DelegateApplication, ChairApplication  # noqa: F401
from munreg.models.staff_member import StaffMember  # noqa: F401
