# tests/conftest.py
"""Root pytest configuration and shared fixtures."""

import os

# Must happen before learng is imported anywhere
os.environ["JWT_SECRET"] = "test-secret-do-not-use-in-production"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["PASSWORD_SECURITY_LEVEL"] = "low"
os.environ["LOG_TO_FILE"] = "false"

from collections.abc import AsyncGenerator, Awaitable, Callable  # noqa: E402
from typing import Any  # noqa: E402

from fastapi import FastAPI  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from pytest import fixture  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession  # noqa: E402

from learng.db import async_session_maker, close_db, drop_db, init_db  # noqa: E402
from learng.main import create_app  # noqa: E402

type RegisterUser = Callable[..., Awaitable[dict[str, Any]]]


@fixture
async def db() -> AsyncGenerator[None]:
    """Fresh schema per test on a private in-memory database."""
    await init_db()
    yield
    await drop_db()
    await close_db()


@fixture
async def session(db: None) -> AsyncGenerator[AsyncSession]:
    """Session for tests that talk to repositories directly."""
    async with async_session_maker() as session:
        yield session
        await session.rollback()


@fixture
def app(db: None) -> FastAPI:
    return create_app()


@fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    """
    HTTP client bound to the application, without a network.

    Relative URLs resolve under the API prefix, so ``client.get("/journeys")``
    hits ``/api/v1/journeys``.
    """
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test/api/v1",
    ) as ac:
        yield ac


@fixture
def register_user(client: AsyncClient) -> RegisterUser:
    """
    Register accounts through the API.

    The returned body carries ``user`` and ``token`` plus a ready-made
    ``headers`` dict with the bearer token.
    """

    async def _register(
        email: str,
        password: str = "Passw0rd",
        role: str = "admin",
        display_name: str = "",
    ) -> dict[str, Any]:
        response = await client.post(
            "/auth/register",
            json={
                "email": email,
                "password": password,
                "role": role,
                "displayName": display_name,
            },
        )
        assert response.status_code == 201, response.text
        body = response.json()
        body["headers"] = {"Authorization": f"Bearer {body['token']}"}
        return body

    return _register


@fixture
async def alice(register_user: RegisterUser) -> dict[str, Any]:
    return await register_user("alice@example.com", display_name="Alice")


@fixture
async def bob(register_user: RegisterUser) -> dict[str, Any]:
    return await register_user("bob@example.com", role="learner", display_name="Bob")
