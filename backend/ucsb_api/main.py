"""
UCSB Resources API — FastAPI Application Factory
=================================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn to start the server (uvicorn ucsb_api.main:app).

Application Architecture:
    ┌─────────────────────────────────────────────────────────┐
    │                     FastAPI App                         │
    │                                                         │
    │  Middleware Chain:                                      │
    │  ┌──────────┐ ┌────────────┐ ┌──────┐ ┌──────┐          │
    │  │  Req ID  │→│ Access Log │→│ GZip │→│ CORS │          │
    │  └──────────┘ └────────────┘ └──────┘ └──────┘          │
    │                                                         │
    │  Routes:                                                │
    │  /api/ucsbmenuitemreview   /api/recommendationrequests  │
    │  /api/ucsborganization     /api/currentUser   /health   │
    │                                                         │
    │  Exception Handlers:                                    │
    │  Validation→400 │ Forbidden→403 │ NotFound→404 │ DB→500 │
    └─────────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  configure logging, validate security settings, log readiness
    Shutdown: dispose database engine
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from ucsb_api import __version__
from ucsb_api.config import settings
from ucsb_api.database import dispose_engine
from ucsb_api.exceptions import (
    DatabaseError,
    EntityNotFoundError,
    ForbiddenError,
    UCSBApiError,
    ValidationError,
)
from ucsb_api.middleware.logging import RequestLoggingMiddleware
from ucsb_api.middleware.request_id import RequestIDMiddleware, request_id_var
from ucsb_api.routes import (
    current_user,
    health,
    menu_item_reviews,
    organizations,
    recommendation_requests,
)

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Called once during app startup, before any other initialization.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Third-party libraries log every operation at INFO/DEBUG
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging()
    logger.info("=" * 60)
    logger.info("UCSB Resources API %s starting up...", __version__)

    try:
        settings.validate_required_for_production()
    except ValueError as e:
        # Non-fatal: the API still serves reads with the default settings
        logger.error("Configuration error: %s", str(e))

    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)
    logger.info("API docs: http://%s:%d/docs", settings.backend_host, settings.backend_port)
    logger.info("=" * 60)

    yield

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("UCSB Resources API shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _error_body(error_type: str, message: str) -> dict:
    return {"type": error_type, "message": message}


def _describe_validation_errors(exc: RequestValidationError) -> str:
    """Flatten FastAPI's error list into one line, e.g. 'dateReviewed: Input should be ...'."""
    parts = []
    for error in exc.errors():
        loc = [str(p) for p in error.get("loc", ()) if p not in ("query", "body")]
        field = ".".join(loc) or "request"
        parts.append(f"{field}: {error.get('msg', 'invalid value')}")
    return "; ".join(parts) or "Validation failed"


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers for consistent error responses.

    Handler hierarchy:
        RequestValidationError → 400 ValidationError (binding layer)
        ValidationError        → 400 ValidationError
        ForbiddenError         → 403 AccessDeniedException
        EntityNotFoundError    → 404 EntityNotFoundException
        DatabaseError          → 500 DatabaseError (generic message)
        UCSBApiError (base)    → its own status_code / error_type
        Exception (fallback)   → 500 InternalServerError

    Every body has the shape {"type": ..., "message": ...}.
    """

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        message = _describe_validation_errors(exc)
        logger.warning("[%s] Request validation failed: %s", request_id_var.get(""), message)
        return JSONResponse(
            status_code=ValidationError.status_code,
            content=_error_body(ValidationError.error_type, message),
        )

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        logger.warning("[%s] Validation error: %s", request_id_var.get(""), exc.message)
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(exc.error_type, exc.message),
        )

    @app.exception_handler(ForbiddenError)
    async def handle_forbidden(request: Request, exc: ForbiddenError):
        logger.info(
            "[%s] Forbidden %s %s: %s",
            request_id_var.get(""),
            request.method,
            request.url.path,
            exc.context.get("reason", "unspecified"),
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(exc.error_type, exc.message),
        )

    @app.exception_handler(EntityNotFoundError)
    async def handle_not_found(request: Request, exc: EntityNotFoundError):
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(exc.error_type, exc.message),
        )

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        """Generic message to the client; context only in the server log."""
        logger.error(
            "[%s] Database error: %s | Context: %s",
            request_id_var.get(""),
            exc.message,
            exc.context,
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(
                exc.error_type,
                "An internal error occurred. Please try again later.",
            ),
        )

    @app.exception_handler(UCSBApiError)
    async def handle_app_error(request: Request, exc: UCSBApiError):
        logger.error("[%s] %s: %s", request_id_var.get(""), exc.error_type, exc.message)
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(exc.error_type, exc.message),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.error(
            "[%s] Unexpected error: %s",
            request_id_var.get(""),
            str(exc),
            exc_info=True,
        )
        return JSONResponse(
            status_code=500,
            content=_error_body(
                "InternalServerError",
                "An unexpected error occurred. Please try again or contact support.",
            ),
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns a fresh instance on every call, so tests can build isolated apps
    and attach their own dependency_overrides.
    """
    app = FastAPI(
        title="UCSB Resources API",
        description=(
            "Menu item reviews, recommendation requests and student organizations. "
            "Reads require ROLE_USER; writes require ROLE_ADMIN."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added runs first: RequestID → Logging → GZip → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(menu_item_reviews.router)
    app.include_router(recommendation_requests.router)
    app.include_router(organizations.router)
    app.include_router(current_user.router)
    app.include_router(health.router)

    return app


app = create_app()
