"""
UCSB Resources API — UCSBMenuItemReview SQLAlchemy Model
=========================================================

What:  ORM model representing the `ucsbmenuitemreviews` table.
Who:   Used by UCSBMenuItemReviewRepository and by Alembic.

Table Design:
    - id: auto-increment primary key assigned by the database on insert
    - item_id: the dining-commons menu item being reviewed
    - date_reviewed: naive timestamp, stored exactly as the client sent it
"""

from datetime import datetime

from sqlalchemy import BigInteger, DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from ucsb_api.database import AutoIncrementId, Base


class UCSBMenuItemReview(Base):
    """
    A review of a dining-commons menu item.

    Lifecycle:
        1. Created by an admin via POST /api/ucsbmenuitemreview/post
        2. Optionally replaced field-by-field via PUT (id preserved)
        3. Never deleted
    """

    __tablename__ = "ucsbmenuitemreviews"

    id: Mapped[int] = mapped_column(
        AutoIncrementId,
        primary_key=True,
        autoincrement=True,
    )

    item_id: Mapped[int] = mapped_column(
        BigInteger,
        nullable=False,
        comment="Id of the menu item being reviewed",
    )

    reviewer_email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Email address of the person who submitted the review",
    )

    stars: Mapped[int] = mapped_column(Integer, nullable=False)

    date_reviewed: Mapped[datetime] = mapped_column(
        DateTime(timezone=False),
        nullable=False,
    )

    comments: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return (
            f"<UCSBMenuItemReview(id={self.id}, item_id={self.item_id}, "
            f"stars={self.stars})>"
        )
