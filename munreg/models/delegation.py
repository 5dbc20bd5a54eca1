"""Delegation ORM — a group of delegates (usually one school) led by one user."""

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from munreg.db.base import Base


class Delegation(Base):
    __tablename__ = "delegations"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    country: Mapped[str] = mapped_column(String(2), nullable=False)
    estimated_delegates: Mapped[int] = mapped_column(Integer, nullable=False)
    delegates: Mapped[int | None] = mapped_column(Integer, nullable=True)
    leader_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id"), nullable=False,
    )
