"""
Shared test fixtures.

Every test gets a fresh in-memory SQLite database. The API is exercised
in-process through httpx with the get_db dependency pointed at that
database.
"""
import os
import tempfile

# Set environment variables FIRST, before any socialfeed module reads settings
UPLOAD_DIR = tempfile.mkdtemp(prefix="socialfeed-uploads-")
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["UPLOAD_DIR"] = UPLOAD_DIR
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["SECRET_KEY"] = "test-secret-key-for-testing-only"
os.environ["APP_ENV"] = "test"
os.environ["LOG_LEVEL"] = "WARNING"

from uuid import uuid4

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from socialfeed.api.dependencies.database import get_db
from socialfeed.api.main import app
from socialfeed.shared.models import Base


@pytest.fixture
async def engine():
    """In-memory database with all tables created."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)


@pytest.fixture
async def db(session_factory):
    """Session for repository-level tests."""
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(session_factory):
    """HTTP client bound to the app, one committed transaction per request."""

    async def override_get_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def register(client):
    """Sign up a user; returns (user json, auth headers)."""

    async def _register(
        first_name: str = "Ada",
        last_name: str = "Smith",
        email: str = None,
        password: str = "password123",
    ):
        response = await client.post(
            "/auth/signup",
            json={
                "firstName": first_name,
                "lastName": last_name,
                "email": email or f"{uuid4().hex[:12]}@example.com",
                "password": password,
            },
        )
        assert response.status_code == 201, response.text
        body = response.json()
        return body["user"], bearer(body["token"])

    return _register


@pytest.fixture
def create_post(client):
    """Create a text post; returns the post json."""

    async def _create_post(headers: dict, text: str = "hello", **form):
        response = await client.post("/posts", data={"text": text, **form}, headers=headers)
        assert response.status_code == 201, response.text
        return response.json()["post"]

    return _create_post
