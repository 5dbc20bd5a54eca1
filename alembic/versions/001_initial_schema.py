"""Initial schema — users, committees, delegations, applications, staff.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _application_columns() -> list[sa.Column]:
    return [
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("user_id", sa.Integer, sa.ForeignKey("users.id"), nullable=False, unique=True),
        sa.Column("motivation", sa.Text, nullable=False),
        sa.Column("experience", sa.Text, nullable=False),
        sa.Column("delegation_id", sa.Integer, sa.ForeignKey("delegations.id"), nullable=True),
        sa.Column("choice1committee", sa.Integer, nullable=False),
        sa.Column("choice2committee", sa.Integer, nullable=False),
        sa.Column("choice3committee", sa.Integer, nullable=False),
        sa.Column("shirt_size", sa.String(3), nullable=True),
        sa.Column("payment_status", sa.String(20), nullable=False, server_default="pending"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    ]


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("email", sa.String(320), nullable=False, unique=True),
        sa.Column("password_hash", sa.String(100), nullable=False),
        sa.Column("firstname", sa.String(100), nullable=False),
        sa.Column("lastname", sa.String(100), nullable=False),
        sa.Column("phone", sa.String(20), nullable=True),
        sa.Column("birthdate", sa.Date, nullable=False),
        sa.Column("nationality", sa.String(2), nullable=False),
        sa.Column("schoolname", sa.String(200), nullable=True),
        sa.Column("dietary", sa.String(40), nullable=True),
        sa.Column("other_info", sa.Text, nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        "committees",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(100), nullable=False, unique=True),
        sa.Column("displayname", sa.String(200), nullable=False),
        sa.Column("difficulty", sa.String(20), nullable=False),
        sa.Column("description", sa.Text, nullable=True),
    )

    op.create_table(
        "committee_countries",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column(
            "committee_id", sa.Integer,
            sa.ForeignKey("committees.id", ondelete="CASCADE"), nullable=False,
        ),
        sa.Column("country", sa.String(60), nullable=False),
        sa.UniqueConstraint("committee_id", "country", name="uq_committee_country"),
    )

    op.create_table(
        "delegations",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("country", sa.String(2), nullable=False),
        sa.Column("estimated_delegates", sa.Integer, nullable=False),
        sa.Column("delegates", sa.Integer, nullable=True),
        sa.Column("leader_id", sa.Integer, sa.ForeignKey("users.id"), nullable=False),
    )

    op.create_table(
        "applied_users",
        *_application_columns(),
        sa.Column("choice1country", sa.String(60), nullable=False),
        sa.Column("choice2country", sa.String(60), nullable=False),
        sa.Column("choice3country", sa.String(60), nullable=False),
    )

    op.create_table("chair_applications", *_application_columns())

    op.create_table(
        "staff_members",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("position", sa.String(100), nullable=False),
        sa.Column("image", sa.String(500), nullable=False),
        sa.Column("bio", sa.Text, nullable=True),
    )


def downgrade() -> None:
    op.drop_table("staff_members")
    op.drop_table("chair_applications")
    op.drop_table("applied_users")
    op.drop_table("delegations")
    op.drop_table("committee_countries")
    op.drop_table("committees")
    op.drop_table("users")
