"""
UCSB Resources API — Current User Route
========================================

What:  GET /api/currentUser returns the caller's email and resolved roles.
Who:   Called by the frontend to decide which admin controls to show.
"""

from fastapi import APIRouter, Depends

from ucsb_api.schemas.common import CurrentUserResponse, ErrorResponse
from ucsb_api.security import CurrentUser, get_current_user

router = APIRouter(prefix="/api", tags=["Current User"])


@router.get(
    "/currentUser",
    response_model=CurrentUserResponse,
    responses={403: {"description": "Not logged in", "model": ErrorResponse}},
    summary="Get the logged-in user and roles",
)
async def current_user(user: CurrentUser = Depends(get_current_user)) -> CurrentUserResponse:
    return CurrentUserResponse(email=user.email, roles=user.roles)
