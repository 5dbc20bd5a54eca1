"""Application ORM — delegate and chair applications.

Invariants:
    - user_id is unique per table: one delegate and one chair application per user
    - payment_status starts as "pending"
    - Rows are never updated by the API once created

Design Decisions:
    - Delegate table keeps the historical name "applied_users"
    - Committee choices stored as plain integers, not FKs: committees may be
      renamed or merged between conference editions without rewriting applications
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from munreg.core.domain_types import PaymentStatus
from munreg.db.base import Base


class _ApplicationColumns:
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id"), nullable=False, unique=True,
    )
    motivation: Mapped[str] = mapped_column(Text, nullable=False)
    experience: Mapped[str] = mapped_column(Text, nullable=False)
    delegation_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("delegations.id"), nullable=True,
    )
    choice1committee: Mapped[int] = mapped_column(Integer, nullable=False)
    choice2committee: Mapped[int] = mapped_column(Integer, nullable=False)
    choice3committee: Mapped[int] = mapped_column(Integer, nullable=False)
    shirt_size: Mapped[str | None] = mapped_column(String(3), nullable=True)
    payment_status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=PaymentStatus.PENDING.value,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )


class DelegateApplication(_ApplicationColumns, Base):
    __tablename__ = "applied_users"

    choice1country: Mapped[str] = mapped_column(String(60), nullable=False)
    choice2country: Mapped[str] = mapped_column(String(60), nullable=False)
    choice3country: Mapped[str] = mapped_column(String(60), nullable=False)


class ChairApplication(_ApplicationColumns, Base):
    __tablename__ = "chair_applications"
