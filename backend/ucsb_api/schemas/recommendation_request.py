"""Schemas for /api/recommendationrequests."""

from datetime import datetime
from typing import Optional

from pydantic import Field, NaiveDatetime

from ucsb_api.schemas.common import CamelModel


class RecommendationRequestResponse(CamelModel):
    id: Optional[int] = Field(default=None, description="Generated request id")
    requester_email: str
    professor_email: str
    explanation: str
    date_requested: datetime
    date_needed: datetime
    done: bool


class RecommendationRequestUpdate(CamelModel):
    requester_email: str
    professor_email: str
    explanation: str
    date_requested: NaiveDatetime
    date_needed: NaiveDatetime
    done: bool
