"""
UCSB Resources API — RecommendationRequest SQLAlchemy Model
============================================================

What:  ORM model representing the `recommendationrequests` table.
Who:   Used by RecommendationRequestRepository and by Alembic.
"""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from ucsb_api.database import AutoIncrementId, Base


class RecommendationRequest(Base):
    """A student's request for a letter of recommendation from a professor."""

    __tablename__ = "recommendationrequests"

    id: Mapped[int] = mapped_column(
        AutoIncrementId,
        primary_key=True,
        autoincrement=True,
    )

    requester_email: Mapped[str] = mapped_column(String(255), nullable=False)
    professor_email: Mapped[str] = mapped_column(String(255), nullable=False)
    explanation: Mapped[str] = mapped_column(Text, nullable=False)
    date_requested: Mapped[datetime] = mapped_column(DateTime(timezone=False), nullable=False)
    date_needed: Mapped[datetime] = mapped_column(DateTime(timezone=False), nullable=False)

    # True once the letter has been sent
    done: Mapped[bool] = mapped_column(Boolean, nullable=False)

    def __repr__(self) -> str:
        return (
            f"<RecommendationRequest(id={self.id}, "
            f"requester_email='{self.requester_email}', done={self.done})>"
        )
