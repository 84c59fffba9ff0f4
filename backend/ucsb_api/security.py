"""
UCSB Resources API — Authentication & Role Guards
==================================================

What:  Bearer-token authentication and role-based access control.
How:   Callers send `Authorization: Bearer <JWT>`. The token is an HS256 JWT
       (python-jose) with `sub` (email) and `roles` claims. Route handlers
       declare the role they need with `Depends(require_user)` or
       `Depends(require_admin)`; the guard runs before any repository call.

Role model:
    ROLE_USER   every authenticated caller
    ROLE_ADMIN  granted by the token, or by listing the email in ADMIN_EMAILS;
                implies ROLE_USER

Failure semantics:
    No token, bad signature, expired token, or missing role all raise
    ForbiddenError (HTTP 403, AccessDeniedException). The reason is logged,
    never returned.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Awaitable, Callable, Dict, Iterable, List, Optional, Set

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import ExpiredSignatureError, JWTError, jwt
from pydantic import BaseModel

from ucsb_api.config import settings
from ucsb_api.exceptions import ForbiddenError

logger = logging.getLogger(__name__)

ROLE_USER = "ROLE_USER"
ROLE_ADMIN = "ROLE_ADMIN"

# Order here is the order roles are reported in
KNOWN_ROLES = (ROLE_USER, ROLE_ADMIN)

# role -> roles it implies
ROLE_HIERARCHY: Dict[str, Set[str]] = {
    ROLE_ADMIN: {ROLE_USER},
    ROLE_USER: set(),
}

bearer_scheme = HTTPBearer(auto_error=False)


class CurrentUser(BaseModel):
    """The authenticated principal for one request."""

    email: str
    roles: List[str]

    def has_role(self, role: str) -> bool:
        role = normalize_role(role)
        return any(
            granted == role or role in ROLE_HIERARCHY.get(granted, set())
            for granted in self.roles
        )


def normalize_role(role: str) -> str:
    """Accepts both `ADMIN` and `ROLE_ADMIN` spellings."""
    role = role.strip().upper()
    return role if role.startswith("ROLE_") else f"ROLE_{role}"


def resolve_roles(email: str, claimed: Iterable[str]) -> List[str]:
    """
    Final role list for a caller.

    Every authenticated caller is a user; admins come from the token or from
    the configured admin email list. Unknown roles are dropped.
    """
    granted = {normalize_role(r) for r in claimed}
    granted.add(ROLE_USER)
    if email.lower() in settings.admin_emails_list:
        granted.add(ROLE_ADMIN)
    return [role for role in KNOWN_ROLES if role in granted]


# ── Token Encoding ────────────────────────────────────────────────────────

def create_access_token(
    email: str,
    roles: Iterable[str] = (ROLE_USER,),
    expires_delta: Optional[timedelta] = None,
) -> str:
    """
    Sign a bearer token for `email`.

    Tokens are normally minted by the identity provider in front of this
    service; this helper uses the same claims for operators and tests.
    """
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.jwt_expire_minutes)

    now = datetime.now(timezone.utc)
    payload = {
        "sub": email,
        "roles": [normalize_role(r) for r in roles],
        "iat": int(now.timestamp()),
        "exp": int((now + expires_delta).timestamp()),
    }
    return jwt.encode(payload, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> CurrentUser:
    """
    Validate `token` and build the principal.

    Raises:
        ForbiddenError: signature invalid, token expired, or no subject.
    """
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret_key,
            algorithms=[settings.jwt_algorithm],
        )
    except ExpiredSignatureError:
        raise ForbiddenError(context={"reason": "token_expired"})
    except JWTError as e:
        raise ForbiddenError(context={"reason": "token_invalid", "error": str(e)})

    email = payload.get("sub")
    if not email:
        raise ForbiddenError(context={"reason": "token_missing_subject"})

    roles = payload.get("roles") or []
    if isinstance(roles, str):
        roles = [roles]

    return CurrentUser(email=email, roles=resolve_roles(email, roles))


# ── FastAPI Dependencies ──────────────────────────────────────────────────

async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> CurrentUser:
    """
    Resolve the caller from the Authorization header.

    Example:
        @router.get("/api/currentUser")
        async def current_user(user: CurrentUser = Depends(get_current_user)):
            return user
    """
    if credentials is None:
        logger.warning("Rejected request without bearer credentials")
        raise ForbiddenError(context={"reason": "missing_credentials"})

    try:
        user = decode_access_token(credentials.credentials)
    except ForbiddenError as e:
        logger.warning("Rejected bearer token: %s", e.context.get("reason"))
        raise

    logger.debug("Authenticated %s with roles %s", user.email, user.roles)
    return user


def require_role(role: str) -> Callable[..., Awaitable[CurrentUser]]:
    """
    Build a guard dependency that admits callers holding `role`.

    Usage:
        @router.post("/post", dependencies=[Depends(require_role(ROLE_ADMIN))])
    """
    required = normalize_role(role)

    async def guard(user: CurrentUser = Depends(get_current_user)) -> CurrentUser:
        if not user.has_role(required):
            logger.warning(
                "Access denied for %s: %s required, has %s",
                user.email,
                required,
                user.roles,
            )
            raise ForbiddenError(
                context={"reason": "missing_role", "required_role": required}
            )
        return user

    guard.__name__ = f"require_{required.lower()}"
    return guard


require_user = require_role(ROLE_USER)
require_admin = require_role(ROLE_ADMIN)
