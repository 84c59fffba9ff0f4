"""Schemas for /api/ucsbmenuitemreview."""

from datetime import datetime
from typing import Optional

from pydantic import Field, NaiveDatetime

from ucsb_api.schemas.common import CamelModel


class UCSBMenuItemReviewResponse(CamelModel):
    id: Optional[int] = Field(default=None, description="Generated review id")
    item_id: int = Field(description="Id of the menu item being reviewed")
    reviewer_email: str = Field(description="Email address of the reviewer")
    stars: int
    date_reviewed: datetime = Field(description="When the review was written (ISO 8601)")
    comments: str


class UCSBMenuItemReviewUpdate(CamelModel):
    """PUT body; every mutable field is replaced, the id is never taken from here."""
    item_id: int
    reviewer_email: str
    stars: int
    date_reviewed: NaiveDatetime
    comments: str
