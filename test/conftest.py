from __future__ import annotations

import os
from typing import AsyncGenerator, Awaitable, Callable, Dict
from unittest.mock import patch

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlmodel.pool import StaticPool

# Use in-memory SQLite for testing
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

# Set test environment before importing the application
os.environ["DATABASE_URL"] = TEST_DATABASE_URL
os.environ["RUN_MIGRATIONS_ON_STARTUP"] = "false"
os.environ["JWT_SECRET"] = "test-secret-key-with-enough-length-for-hs256"
os.environ["ENABLE_FILE_LOGGING"] = "false"
os.environ.pop("ADMIN_EMAIL", None)
os.environ.pop("ADMIN_PASSWORD", None)

API = "/api/v1"


@pytest.fixture
def product_payload() -> Callable[..., Dict]:
    """Builder for a valid ``ProductDetails`` body."""

    def _payload(**overrides) -> Dict:
        payload = {
            "title": "Road bike",
            "description": "Aluminium frame, 54cm, recently serviced",
            "price": "349.99",
            "country": "Germany",
            "state": "Berlin",
            "city": "Berlin",
            "zip": "10115",
            "latitude": "52.532000",
            "longitude": "13.384900",
        }
        payload.update(overrides)
        return payload

    return _payload


@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """In-memory SQLite engine with the full schema created."""
    from marketplace.core.database.utils import create_all

    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await create_all(engine)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest.fixture
def repos(session: AsyncSession):
    from marketplace.core.database.repositories.bundle import build_sql_repos_from_session

    return build_sql_repos_from_session(session=session)


@pytest_asyncio.fixture
async def client(session_factory) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client against the app; every request gets its own session."""
    from marketplace.core.database import get_session
    from marketplace.server.main import app

    async def get_session_override() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_session] = get_session_override

    # Mock the lifespan to prevent migrations and seeding during tests
    async def mock_lifespan(app):
        yield

    with patch("marketplace.server.main.lifespan", mock_lifespan):
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://localhost") as client:
            yield client

    app.dependency_overrides.clear()


@pytest.fixture
def register_and_login(client: AsyncClient) -> Callable[..., Awaitable[Dict]]:
    """Register an account through the API and return its id and auth headers."""

    async def _register(username: str, password: str = "s3cret-pass", email: str | None = None) -> Dict:
        email = email or f"{username}@example.com"
        response = await client.post(
            f"{API}/auth/register", json={"username": username, "email": email, "password": password}
        )
        assert response.status_code == 201, response.text
        user_id = response.json()["id"]

        response = await client.post(f"{API}/auth/login", json={"username": username, "password": password})
        assert response.status_code == 200, response.text
        token = response.json()["accessToken"]
        return {"id": user_id, "headers": {"Authorization": f"Bearer {token}"}}

    return _register


@pytest_asyncio.fixture
async def admin_headers(session_factory, register_and_login) -> Dict[str, str]:
    """Auth headers of a freshly promoted admin account."""
    from marketplace.core.database.repositories.users import UserRepository
    from marketplace.core.models.domain.enums import Role

    admin = await register_and_login("site-admin")
    async with session_factory() as session:
        repo = UserRepository(session)
        user = await repo.get_by_id(admin["id"])
        user.role = Role.admin.value
        await repo.update(user)
    return admin["headers"]
