"""
UCSB Resources API — Repositories
==================================

What:  Thin persistence-access layer, one repository per resource.
How:   Every repository exposes the same async contract (find_all,
       find_by_id, save) on top of a request-scoped AsyncSession.
       Routes receive them through the `get_*_repository` dependencies,
       which tests replace via `app.dependency_overrides`.
"""

from ucsb_api.repositories.base import Repository, SQLAlchemyRepository
from ucsb_api.repositories.menu_item_review import (
    UCSBMenuItemReviewRepository,
    get_menu_item_review_repository,
)
from ucsb_api.repositories.organization import (
    UCSBOrganizationRepository,
    get_organization_repository,
)
from ucsb_api.repositories.recommendation_request import (
    RecommendationRequestRepository,
    get_recommendation_request_repository,
)

__all__ = [
    "Repository",
    "SQLAlchemyRepository",
    "UCSBMenuItemReviewRepository",
    "RecommendationRequestRepository",
    "UCSBOrganizationRepository",
    "get_menu_item_review_repository",
    "get_recommendation_request_repository",
    "get_organization_repository",
]
