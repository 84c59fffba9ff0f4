"""Create menu item review, recommendation request and organization tables

Revision ID: 001
Revises: None
Create Date: 2026-10-18 00:00:00.000000+00:00

What:  Creates one table per resource; see ucsb_api/models for column docs.
Rollback: downgrade() drops all three tables (destructive).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "ucsbmenuitemreviews",
        sa.Column("id", sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column(
            "item_id",
            sa.BigInteger(),
            nullable=False,
            comment="Id of the menu item being reviewed",
        ),
        sa.Column(
            "reviewer_email",
            sa.String(255),
            nullable=False,
            comment="Email address of the person who submitted the review",
        ),
        sa.Column("stars", sa.Integer(), nullable=False),
        sa.Column("date_reviewed", sa.DateTime(timezone=False), nullable=False),
        sa.Column("comments", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "recommendationrequests",
        sa.Column("id", sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column("requester_email", sa.String(255), nullable=False),
        sa.Column("professor_email", sa.String(255), nullable=False),
        sa.Column("explanation", sa.Text(), nullable=False),
        sa.Column("date_requested", sa.DateTime(timezone=False), nullable=False),
        sa.Column("date_needed", sa.DateTime(timezone=False), nullable=False),
        sa.Column("done", sa.Boolean(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )

    # Natural key: org_code is supplied by the caller
    op.create_table(
        "ucsborganization",
        sa.Column(
            "org_code",
            sa.String(50),
            nullable=False,
            comment="Organization code, e.g. ZPR",
        ),
        sa.Column("org_translation_short", sa.String(255), nullable=False),
        sa.Column("org_translation", sa.String(255), nullable=False),
        sa.Column("inactive", sa.Boolean(), nullable=False),
        sa.PrimaryKeyConstraint("org_code"),
    )


def downgrade() -> None:
    op.drop_table("ucsborganization")
    op.drop_table("recommendationrequests")
    op.drop_table("ucsbmenuitemreviews")
