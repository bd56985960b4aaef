"""
Pytest fixtures for the contacts/messages API.

Provides fixtures for:
- An in-memory SQLite database built from the ORM metadata
- Sessions bound to that database
- An HTTP client against the FastAPI app with the session dependency overridden
- Access-token headers for arbitrary accounts
"""

import os

os.environ.setdefault("RUN_MIGRATIONS_ON_STARTUP", "false")

from collections.abc import Callable

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from mailshrimp_api.api.main import app
from mailshrimp_api.core.security import create_access_token
from mailshrimp_api.db import Base, make_session_maker
from mailshrimp_api.db.session import get_async_session

ACCOUNT_A = 1
ACCOUNT_B = 2


@pytest.fixture
async def engine():
    """Fresh in-memory database per test."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(engine):
    return make_session_maker(engine)


@pytest.fixture
async def session(session_maker):
    async with session_maker() as s:
        yield s


@pytest.fixture
async def client(session_maker):
    """HTTP client whose requests use the test database."""

    async def _override_session():
        async with session_maker() as s:
            yield s

    app.dependency_overrides[get_async_session] = _override_session
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers() -> Callable[[int], dict[str, str]]:
    """Build token headers for an account."""

    def _headers(account_id: int = ACCOUNT_A) -> dict[str, str]:
        return {"x-access-token": create_access_token(account_id)}

    return _headers
