"""
UCSB Resources API — Recommendation Request Route Handlers
===========================================================

What:  CRUD endpoints for letter-of-recommendation requests.

Route Inventory:
    POST /api/recommendationrequests/post?requestorEmail=&professorEmail=&explanation=
                                              &dateRequested=&dateNeeded=&done=   (ADMIN)
    GET  /api/recommendationrequests/all      (USER)
    GET  /api/recommendationrequests?id=      (USER)
    PUT  /api/recommendationrequests?id=      (ADMIN)

The creator is bound from `requestorEmail`; `requesterEmail` (the JSON field
name) is accepted as a fallback on POST.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Body, Depends, Query
from pydantic import NaiveDatetime

from ucsb_api.exceptions import EntityNotFoundError, ValidationError
from ucsb_api.models.recommendation_request import RecommendationRequest
from ucsb_api.repositories.base import Repository
from ucsb_api.repositories.recommendation_request import (
    get_recommendation_request_repository,
)
from ucsb_api.schemas.common import ErrorResponse
from ucsb_api.schemas.recommendation_request import (
    RecommendationRequestResponse,
    RecommendationRequestUpdate,
)
from ucsb_api.security import require_admin, require_user

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/recommendationrequests", tags=["RecommendationRequests"])

ERROR_RESPONSES = {
    400: {"description": "Malformed parameter", "model": ErrorResponse},
    403: {"description": "Not logged in or missing role", "model": ErrorResponse},
}
NOT_FOUND_RESPONSE = {404: {"description": "No such request", "model": ErrorResponse}}


@router.post(
    "/post",
    response_model=RecommendationRequestResponse,
    dependencies=[Depends(require_admin)],
    responses=ERROR_RESPONSES,
    summary="Create a new recommendation request",
)
async def create_recommendation_request(
    requestor_email: Optional[str] = Query(
        None, alias="requestorEmail", description="Email of the student asking for the letter",
    ),
    requester_email: Optional[str] = Query(None, alias="requesterEmail", include_in_schema=False),
    professor_email: str = Query(..., alias="professorEmail"),
    explanation: str = Query(...),
    date_requested: NaiveDatetime = Query(
        ..., alias="dateRequested", description="ISO format, e.g. YYYY-mm-ddTHH:MM:SS",
    ),
    date_needed: NaiveDatetime = Query(
        ..., alias="dateNeeded", description="ISO format, e.g. YYYY-mm-ddTHH:MM:SS",
    ),
    done: bool = Query(...),
    repository: Repository[RecommendationRequest] = Depends(get_recommendation_request_repository),
) -> RecommendationRequestResponse:
    requester = requestor_email if requestor_email is not None else requester_email
    if requester is None:
        raise ValidationError("requestorEmail: Field required", field="requestorEmail")

    request = RecommendationRequest(
        requester_email=requester,
        professor_email=professor_email,
        explanation=explanation,
        date_requested=date_requested,
        date_needed=date_needed,
        done=done,
    )
    saved = await repository.save(request)
    logger.info("Created RecommendationRequest %s for %s", saved.id, saved.requester_email)
    return RecommendationRequestResponse.model_validate(saved)


@router.get(
    "/all",
    response_model=List[RecommendationRequestResponse],
    dependencies=[Depends(require_user)],
    responses=ERROR_RESPONSES,
    summary="List all recommendation requests",
)
async def list_recommendation_requests(
    repository: Repository[RecommendationRequest] = Depends(get_recommendation_request_repository),
) -> List[RecommendationRequestResponse]:
    requests = await repository.find_all()
    return [RecommendationRequestResponse.model_validate(r) for r in requests]


@router.get(
    "",
    response_model=RecommendationRequestResponse,
    dependencies=[Depends(require_user)],
    responses={**ERROR_RESPONSES, **NOT_FOUND_RESPONSE},
    summary="Get a single recommendation request by id",
)
async def get_recommendation_request(
    request_id: int = Query(..., alias="id"),
    repository: Repository[RecommendationRequest] = Depends(get_recommendation_request_repository),
) -> RecommendationRequestResponse:
    request = await repository.find_by_id(request_id)
    if request is None:
        raise EntityNotFoundError(RecommendationRequest, request_id)
    return RecommendationRequestResponse.model_validate(request)


@router.put(
    "",
    response_model=RecommendationRequestResponse,
    dependencies=[Depends(require_admin)],
    responses={**ERROR_RESPONSES, **NOT_FOUND_RESPONSE},
    summary="Update a single recommendation request",
)
async def update_recommendation_request(
    request_id: int = Query(..., alias="id"),
    incoming: RecommendationRequestUpdate = Body(...),
    repository: Repository[RecommendationRequest] = Depends(get_recommendation_request_repository),
) -> RecommendationRequestResponse:
    request = await repository.find_by_id(request_id)
    if request is None:
        raise EntityNotFoundError(RecommendationRequest, request_id)

    request.requester_email = incoming.requester_email
    request.professor_email = incoming.professor_email
    request.explanation = incoming.explanation
    request.date_requested = incoming.date_requested
    request.date_needed = incoming.date_needed
    request.done = incoming.done

    saved = await repository.save(request)
    logger.info("Updated RecommendationRequest %s (done=%s)", request_id, saved.done)
    return RecommendationRequestResponse.model_validate(saved)
