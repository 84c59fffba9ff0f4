"""
UCSB Resources API — Student Organization Route Handlers
=========================================================

What:  CRUD endpoints for student organizations, keyed by organization code.

Route Inventory:
    POST /api/ucsborganization/post?orgCode=&orgTranslationShort=&orgTranslation=&inactive=
                                        (ADMIN)
    GET  /api/ucsborganization/all      (USER)
    GET  /api/ucsborganization?orgCode= (USER)
    PUT  /api/ucsborganization?orgCode= (ADMIN)

Unlike the other resources there is no generated id: the caller supplies
`orgCode` on create and it never changes afterwards.
"""

import logging
from typing import List

from fastapi import APIRouter, Body, Depends, Query

from ucsb_api.exceptions import EntityNotFoundError
from ucsb_api.models.organization import UCSBOrganization
from ucsb_api.repositories.base import Repository
from ucsb_api.repositories.organization import get_organization_repository
from ucsb_api.schemas.common import ErrorResponse
from ucsb_api.schemas.organization import UCSBOrganizationResponse, UCSBOrganizationUpdate
from ucsb_api.security import require_admin, require_user

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/ucsborganization", tags=["UCSBOrganization"])

ERROR_RESPONSES = {
    400: {"description": "Malformed parameter", "model": ErrorResponse},
    403: {"description": "Not logged in or missing role", "model": ErrorResponse},
}
NOT_FOUND_RESPONSE = {404: {"description": "No such organization", "model": ErrorResponse}}


@router.post(
    "/post",
    response_model=UCSBOrganizationResponse,
    dependencies=[Depends(require_admin)],
    responses=ERROR_RESPONSES,
    summary="Create a new organization",
)
async def create_organization(
    org_code: str = Query(..., alias="orgCode"),
    org_translation_short: str = Query(..., alias="orgTranslationShort"),
    org_translation: str = Query(..., alias="orgTranslation"),
    inactive: bool = Query(...),
    repository: Repository[UCSBOrganization] = Depends(get_organization_repository),
) -> UCSBOrganizationResponse:
    organization = UCSBOrganization(
        org_code=org_code,
        org_translation_short=org_translation_short,
        org_translation=org_translation,
        inactive=inactive,
    )
    saved = await repository.save(organization)
    logger.info("Created UCSBOrganization %s", saved.org_code)
    return UCSBOrganizationResponse.model_validate(saved)


@router.get(
    "/all",
    response_model=List[UCSBOrganizationResponse],
    dependencies=[Depends(require_user)],
    responses=ERROR_RESPONSES,
    summary="List all organizations",
)
async def list_organizations(
    repository: Repository[UCSBOrganization] = Depends(get_organization_repository),
) -> List[UCSBOrganizationResponse]:
    organizations = await repository.find_all()
    return [UCSBOrganizationResponse.model_validate(o) for o in organizations]


@router.get(
    "",
    response_model=UCSBOrganizationResponse,
    dependencies=[Depends(require_user)],
    responses={**ERROR_RESPONSES, **NOT_FOUND_RESPONSE},
    summary="Get a single organization by code",
)
async def get_organization(
    org_code: str = Query(..., alias="orgCode"),
    repository: Repository[UCSBOrganization] = Depends(get_organization_repository),
) -> UCSBOrganizationResponse:
    organization = await repository.find_by_id(org_code)
    if organization is None:
        raise EntityNotFoundError(UCSBOrganization, org_code)
    return UCSBOrganizationResponse.model_validate(organization)


@router.put(
    "",
    response_model=UCSBOrganizationResponse,
    dependencies=[Depends(require_admin)],
    responses={**ERROR_RESPONSES, **NOT_FOUND_RESPONSE},
    summary="Update a single organization",
)
async def update_organization(
    org_code: str = Query(..., alias="orgCode"),
    incoming: UCSBOrganizationUpdate = Body(...),
    repository: Repository[UCSBOrganization] = Depends(get_organization_repository),
) -> UCSBOrganizationResponse:
    organization = await repository.find_by_id(org_code)
    if organization is None:
        raise EntityNotFoundError(UCSBOrganization, org_code)

    # org_code stays as looked up; a code in the body is ignored
    organization.org_translation_short = incoming.org_translation_short
    organization.org_translation = incoming.org_translation
    organization.inactive = incoming.inactive

    saved = await repository.save(organization)
    logger.info("Updated UCSBOrganization %s", org_code)
    return UCSBOrganizationResponse.model_validate(saved)
