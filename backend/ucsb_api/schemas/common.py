"""
UCSB Resources API — Shared Schemas
====================================

What:  The camelCase base model plus the schemas shared by every resource
       (error body, health, current user).
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    Base for resource schemas.

    Serializes with camelCase aliases (`itemId`), accepts either camelCase
    JSON or snake_case attributes (ORM objects) on validation.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ErrorResponse(BaseModel):
    """
    Error body for every failed request.

    Example:
        {
            "type": "EntityNotFoundException",
            "message": "UCSBMenuItemReview with id 7 not found"
        }
    """
    type: str = Field(description="Error kind, e.g. EntityNotFoundException")
    message: str = Field(description="Human-readable error description")


class CurrentUserResponse(BaseModel):
    """The authenticated caller as the API sees it, after role resolution."""
    email: str = Field(description="Email taken from the token subject")
    roles: List[str] = Field(description="Granted roles, e.g. ROLE_USER, ROLE_ADMIN")


class HealthResponse(BaseModel):
    """Returned by GET /health for monitoring and load balancer probes."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
