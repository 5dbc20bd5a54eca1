"""Committee ORM — committees and the countries each one seats.

Invariants:
    - (committee_id, country) is unique: a country sits at most once per committee
    - Deleting a committee deletes its country rows

Design Decisions:
    - countries loaded with selectin: the committee detail page always shows them
"""

from sqlalchemy import ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from munreg.db.base import Base


class Committee(Base):
    __tablename__ = "committees"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    displayname: Mapped[str] = mapped_column(String(200), nullable=False)
    difficulty: Mapped[str] = mapped_column(String(20), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    countries: Mapped[list["CommitteeCountry"]] = relationship(
        "CommitteeCountry", back_populates="committee",
        cascade="all, delete-orphan", lazy="selectin",
        order_by="CommitteeCountry.id",
    )


class CommitteeCountry(Base):
    __tablename__ = "committee_countries"
    __table_args__ = (
        UniqueConstraint("committee_id", "country", name="uq_committee_country"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    committee_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("committees.id", ondelete="CASCADE"), nullable=False,
    )
    country: Mapped[str] = mapped_column(String(60), nullable=False)

    committee: Mapped["Committee"] = relationship(
        "Committee", back_populates="countries",
    )
