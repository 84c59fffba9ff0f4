"""
UCSB Resources API — UCSBOrganization SQLAlchemy Model
=======================================================

What:  ORM model representing the `ucsborganization` table.
Who:   Used by UCSBOrganizationRepository and by Alembic.

Table Design:
    - org_code: natural primary key supplied by the caller (e.g. "ZPR").
      Saving an organization whose code already exists overwrites that row.
"""

from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column

from ucsb_api.database import Base


class UCSBOrganization(Base):
    """A registered student organization, keyed by its organization code."""

    __tablename__ = "ucsborganization"

    org_code: Mapped[str] = mapped_column(
        String(50),
        primary_key=True,
        comment="Organization code, e.g. ZPR",
    )

    org_translation_short: Mapped[str] = mapped_column(String(255), nullable=False)
    org_translation: Mapped[str] = mapped_column(String(255), nullable=False)
    inactive: Mapped[bool] = mapped_column(Boolean, nullable=False)

    def __repr__(self) -> str:
        return f"<UCSBOrganization(org_code='{self.org_code}', inactive={self.inactive})>"
