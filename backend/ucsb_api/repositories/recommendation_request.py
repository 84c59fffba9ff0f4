"""Repository for RecommendationRequest rows."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ucsb_api.database import get_db_session
from ucsb_api.models.recommendation_request import RecommendationRequest
from ucsb_api.repositories.base import SQLAlchemyRepository


class RecommendationRequestRepository(SQLAlchemyRepository[RecommendationRequest]):
    model = RecommendationRequest
    order_by = "id"


async def get_recommendation_request_repository(
    session: AsyncSession = Depends(get_db_session),
) -> RecommendationRequestRepository:
    return RecommendationRequestRepository(session)
