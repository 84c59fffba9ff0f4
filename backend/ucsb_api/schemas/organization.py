"""Schemas for /api/ucsborganization."""

from pydantic import Field

from ucsb_api.schemas.common import CamelModel


class UCSBOrganizationResponse(CamelModel):
    org_code: str = Field(description="Organization code (natural key)")
    org_translation_short: str
    org_translation: str
    inactive: bool


class UCSBOrganizationUpdate(CamelModel):
    """
    PUT body. `orgCode` may be present (clients echo the whole entity) but is
    ignored: the code from the query string is authoritative.
    """
    org_code: str | None = None
    org_translation_short: str
    org_translation: str
    inactive: bool
