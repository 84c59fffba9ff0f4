"""
UCSB Resources API — Custom Exception Hierarchy
================================================

What:  Application-specific exceptions for the error scenarios of the API.
How:   Each exception carries a message, an error type name and an optional
       context dict. Global exception handlers (registered in main.py) turn
       them into `{"type": ..., "message": ...}` JSON with the right status.
Who:   Raised by routes, the role guard and repositories.

Exception Hierarchy:
    UCSBApiError (base)
    ├── EntityNotFoundError  → 404 Not Found           (EntityNotFoundException)
    ├── ForbiddenError       → 403 Forbidden           (AccessDeniedException)
    ├── ValidationError      → 400 Bad Request         (ValidationError)
    └── DatabaseError        → 500 Internal Server Error
"""

from typing import Any, Dict, Optional, Type, Union


class UCSBApiError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:     User-facing error description (safe to return in API response)
        error_type:  Value of the `type` field in the JSON error body
        status_code: HTTP status the global handler responds with
        context:     Additional debug info (logged but NOT returned to client)
    """

    error_type: str = "InternalServerError"
    status_code: int = 500

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class EntityNotFoundError(UCSBApiError):
    """
    Raised when a lookup key has no matching row.

    The message names the resource and the key exactly as the client sent it:
        EntityNotFoundError("UCSBOrganization", "TPR").message
        == "UCSBOrganization with id TPR not found"

    `resource` may be a model class, in which case its class name is used.
    """

    error_type = "EntityNotFoundException"
    status_code = 404

    def __init__(
        self,
        resource: Union[str, Type[Any]],
        resource_id: Any,
        context: Optional[Dict[str, Any]] = None,
    ):
        name = resource if isinstance(resource, str) else resource.__name__
        ctx = context or {}
        ctx["resource"] = name
        ctx["resource_id"] = str(resource_id)
        super().__init__(message=f"{name} with id {resource_id} not found", context=ctx)
        self.resource = name
        self.resource_id = resource_id


class ForbiddenError(UCSBApiError):
    """
    Raised when the caller is unauthenticated or lacks the required role.

    Both cases answer 403 with the same body; the reason only goes to the log
    via `context`.
    """

    error_type = "AccessDeniedException"
    status_code = 403

    def __init__(
        self,
        message: str = "Access is denied",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class ValidationError(UCSBApiError):
    """Raised when a request parameter or body cannot be bound."""

    error_type = "ValidationError"
    status_code = 400

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class DatabaseError(UCSBApiError):
    """
    Raised when a repository call fails unexpectedly.

    The message returned to the client is always generic; the driver error
    is logged server-side only.
    """

    error_type = "DatabaseError"
    status_code = 500

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
