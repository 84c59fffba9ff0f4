"""Repository for UCSBMenuItemReview rows."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ucsb_api.database import get_db_session
from ucsb_api.models.menu_item_review import UCSBMenuItemReview
from ucsb_api.repositories.base import SQLAlchemyRepository


class UCSBMenuItemReviewRepository(SQLAlchemyRepository[UCSBMenuItemReview]):
    model = UCSBMenuItemReview
    order_by = "id"


async def get_menu_item_review_repository(
    session: AsyncSession = Depends(get_db_session),
) -> UCSBMenuItemReviewRepository:
    return UCSBMenuItemReviewRepository(session)
