"""
UCSB Resources API — Menu Item Review Route Handlers
=====================================================

What:  CRUD endpoints for dining-commons menu item reviews.
How:   Role guard → parameter binding → one repository call → JSON.

Route Inventory:
    POST /api/ucsbmenuitemreview/post?itemId=&stars=&reviewerEmail=&dateReviewed=&comments=
                                        (ADMIN)  create
    GET  /api/ucsbmenuitemreview/all    (USER)   list all
    GET  /api/ucsbmenuitemreview?id=    (USER)   get one, 404 if absent
    PUT  /api/ucsbmenuitemreview?id=    (ADMIN)  replace fields, 404 if absent
"""

import logging
from typing import List

from fastapi import APIRouter, Body, Depends, Query
from pydantic import NaiveDatetime

from ucsb_api.exceptions import EntityNotFoundError
from ucsb_api.models.menu_item_review import UCSBMenuItemReview
from ucsb_api.repositories.base import Repository
from ucsb_api.repositories.menu_item_review import get_menu_item_review_repository
from ucsb_api.schemas.common import ErrorResponse
from ucsb_api.schemas.menu_item_review import (
    UCSBMenuItemReviewResponse,
    UCSBMenuItemReviewUpdate,
)
from ucsb_api.security import require_admin, require_user

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/ucsbmenuitemreview", tags=["UCSBMenuItemReview"])

ERROR_RESPONSES = {
    400: {"description": "Malformed parameter", "model": ErrorResponse},
    403: {"description": "Not logged in or missing role", "model": ErrorResponse},
}


@router.post(
    "/post",
    response_model=UCSBMenuItemReviewResponse,
    dependencies=[Depends(require_admin)],
    responses=ERROR_RESPONSES,
    summary="Create a new menu item review",
)
async def create_menu_item_review(
    item_id: int = Query(..., alias="itemId", description="Id for item being reviewed"),
    stars: int = Query(...),
    reviewer_email: str = Query(
        ..., alias="reviewerEmail",
        description="Email address of person who submitted review",
    ),
    date_reviewed: NaiveDatetime = Query(
        ..., alias="dateReviewed",
        description="Date of review in iso format, e.g. YYYY-mm-ddTHH:MM:SS",
    ),
    comments: str = Query(...),
    repository: Repository[UCSBMenuItemReview] = Depends(get_menu_item_review_repository),
) -> UCSBMenuItemReviewResponse:
    review = UCSBMenuItemReview(
        item_id=item_id,
        stars=stars,
        reviewer_email=reviewer_email,
        date_reviewed=date_reviewed,
        comments=comments,
    )
    saved = await repository.save(review)
    logger.info("Created UCSBMenuItemReview %s for item %s", saved.id, saved.item_id)
    return UCSBMenuItemReviewResponse.model_validate(saved)


@router.get(
    "/all",
    response_model=List[UCSBMenuItemReviewResponse],
    dependencies=[Depends(require_user)],
    responses=ERROR_RESPONSES,
    summary="List all menu item reviews",
)
async def list_menu_item_reviews(
    repository: Repository[UCSBMenuItemReview] = Depends(get_menu_item_review_repository),
) -> List[UCSBMenuItemReviewResponse]:
    reviews = await repository.find_all()
    return [UCSBMenuItemReviewResponse.model_validate(r) for r in reviews]


@router.get(
    "",
    response_model=UCSBMenuItemReviewResponse,
    dependencies=[Depends(require_user)],
    responses={**ERROR_RESPONSES, 404: {"description": "No such review", "model": ErrorResponse}},
    summary="Get a single menu item review by id",
)
async def get_menu_item_review(
    review_id: int = Query(..., alias="id"),
    repository: Repository[UCSBMenuItemReview] = Depends(get_menu_item_review_repository),
) -> UCSBMenuItemReviewResponse:
    review = await repository.find_by_id(review_id)
    if review is None:
        raise EntityNotFoundError(UCSBMenuItemReview, review_id)
    return UCSBMenuItemReviewResponse.model_validate(review)


@router.put(
    "",
    response_model=UCSBMenuItemReviewResponse,
    dependencies=[Depends(require_admin)],
    responses={**ERROR_RESPONSES, 404: {"description": "No such review", "model": ErrorResponse}},
    summary="Update a single menu item review",
)
async def update_menu_item_review(
    review_id: int = Query(..., alias="id"),
    incoming: UCSBMenuItemReviewUpdate = Body(...),
    repository: Repository[UCSBMenuItemReview] = Depends(get_menu_item_review_repository),
) -> UCSBMenuItemReviewResponse:
    review = await repository.find_by_id(review_id)
    if review is None:
        raise EntityNotFoundError(UCSBMenuItemReview, review_id)

    review.item_id = incoming.item_id
    review.stars = incoming.stars
    review.reviewer_email = incoming.reviewer_email
    review.date_reviewed = incoming.date_reviewed
    review.comments = incoming.comments

    saved = await repository.save(review)
    logger.info("Updated UCSBMenuItemReview %s", review_id)
    return UCSBMenuItemReviewResponse.model_validate(saved)
