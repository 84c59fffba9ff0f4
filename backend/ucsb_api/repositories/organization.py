"""
Repository for UCSBOrganization rows.

Keyed by the natural organization code, so `find_by_id("ZPR")` is a lookup
on `org_code`. find_all keeps storage order.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ucsb_api.database import get_db_session
from ucsb_api.models.organization import UCSBOrganization
from ucsb_api.repositories.base import SQLAlchemyRepository


class UCSBOrganizationRepository(SQLAlchemyRepository[UCSBOrganization]):
    model = UCSBOrganization


async def get_organization_repository(
    session: AsyncSession = Depends(get_db_session),
) -> UCSBOrganizationRepository:
    return UCSBOrganizationRepository(session)
