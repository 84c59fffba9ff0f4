"""
UCSB Resources API — Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── *_repository:       AsyncMock repositories (no real DB needed)
    ├── test_app:           FastAPI app with the mock repositories injected
    ├── test_client:        HTTPX AsyncClient for API endpoint testing
    ├── user_headers /
    │   admin_headers:      Authorization headers carrying signed JWTs
    └── db_session:         AsyncSession on a fresh in-memory SQLite database
"""

import os
import tempfile
from typing import AsyncGenerator
from unittest.mock import AsyncMock, MagicMock

# ══════════════════════════════════════════════════════════════════════════
# Environment Setup
# ══════════════════════════════════════════════════════════════════════════

# Must run before any ucsb_api import: settings are read once at import time
os.environ["DATABASE_URL"] = (
    "sqlite+aiosqlite:///" + os.path.join(tempfile.mkdtemp(prefix="ucsb_api_test_"), "test.db")
)
os.environ["JWT_SECRET_KEY"] = "test-secret-not-real"
os.environ["ADMIN_EMAILS"] = "phtcon@ucsb.edu"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

from ucsb_api.database import Base  # noqa: E402
from ucsb_api.main import create_app  # noqa: E402
from ucsb_api.repositories import (  # noqa: E402
    get_menu_item_review_repository,
    get_organization_repository,
    get_recommendation_request_repository,
)
from ucsb_api.security import ROLE_ADMIN, ROLE_USER, create_access_token  # noqa: E402


def make_mock_repository() -> MagicMock:
    """
    A repository double honouring the find_all / find_by_id / save contract.

    Defaults: empty store, every lookup misses, save echoes its argument.
    Tests configure return values and assert on the awaited calls.
    """
    repository = MagicMock()
    repository.find_all = AsyncMock(return_value=[])
    repository.find_by_id = AsyncMock(return_value=None)
    repository.save = AsyncMock(side_effect=lambda entity: entity)
    return repository


# ══════════════════════════════════════════════════════════════════════════
# Repository Doubles
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def menu_item_review_repository():
    return make_mock_repository()


@pytest.fixture
def recommendation_request_repository():
    return make_mock_repository()


@pytest.fixture
def organization_repository():
    return make_mock_repository()


# ══════════════════════════════════════════════════════════════════════════
# Application & HTTP Client
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def test_app(
    menu_item_review_repository,
    recommendation_request_repository,
    organization_repository,
):
    """A fresh app whose repositories are the mock doubles above."""
    app = create_app()
    app.dependency_overrides[get_menu_item_review_repository] = (
        lambda: menu_item_review_repository
    )
    app.dependency_overrides[get_recommendation_request_repository] = (
        lambda: recommendation_request_repository
    )
    app.dependency_overrides[get_organization_repository] = lambda: organization_repository
    return app


@pytest_asyncio.fixture
async def test_client(test_app) -> AsyncGenerator[AsyncClient, None]:
    """
    HTTPX AsyncClient routed straight into the ASGI app.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


# ══════════════════════════════════════════════════════════════════════════
# Authentication
# ══════════════════════════════════════════════════════════════════════════

def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def user_headers():
    """A logged-in student: ROLE_USER only."""
    return bearer(create_access_token("student@ucsb.edu", roles=[ROLE_USER]))


@pytest.fixture
def admin_headers():
    """An administrator whose token carries ROLE_ADMIN and ROLE_USER."""
    return bearer(create_access_token("admin@ucsb.edu", roles=[ROLE_ADMIN, ROLE_USER]))


# ══════════════════════════════════════════════════════════════════════════
# Real Database
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    AsyncSession bound to a brand-new in-memory SQLite database.

    StaticPool keeps a single connection so every statement sees the same
    in-memory database.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session

    await engine.dispose()
