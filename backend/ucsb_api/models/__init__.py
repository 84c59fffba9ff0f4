"""
UCSB Resources API — ORM Models
================================

One SQLAlchemy model per resource. Importing this package registers every
table with `Base.metadata` (Alembic relies on that for --autogenerate).
"""

from ucsb_api.models.menu_item_review import UCSBMenuItemReview
from ucsb_api.models.organization import UCSBOrganization
from ucsb_api.models.recommendation_request import RecommendationRequest

__all__ = ["UCSBMenuItemReview", "RecommendationRequest", "UCSBOrganization"]
