"""Tests for registration, login and the current-user endpoint."""

from typing import Any

import pytest
from fastapi import FastAPI
from httpx import AsyncClient

from learng.managers import TokenCodec


class TestRegister:
    """Test cases for POST /auth/register."""

    async def test_register_returns_user_and_token(self, client: AsyncClient) -> None:
        response = await client.post(
            "/auth/register",
            json={
                "email": "a@x.com",
                "password": "Passw0rd",
                "displayName": "Alice",
                "role": "admin",
            },
        )

        assert response.status_code == 201
        body = response.json()
        assert body["token"]
        user = body["user"]
        assert user["email"] == "a@x.com"
        assert user["role"] == "admin"
        assert user["displayName"] == "Alice"
        assert {"id", "createdAt", "updatedAt"} <= user.keys()
        assert "password" not in user
        assert "passwordHash" not in user
        assert "password_hash" not in user

    @pytest.mark.parametrize(
        ("payload", "message"),
        [
            (
                {"email": "not-an-email", "password": "Passw0rd", "role": "admin"},
                "invalid email format",
            ),
            (
                {"email": "a@x.com", "password": "Pass0", "role": "admin"},
                "Password must be at least 8 characters long",
            ),
            (
                {"email": "a@x.com", "password": "Password", "role": "admin"},
                "Password must contain at least one number",
            ),
            (
                {"email": "a@x.com", "password": "Passw0rd", "role": "superuser"},
                "invalid role",
            ),
        ],
    )
    async def test_register_rejects_bad_input(
        self,
        client: AsyncClient,
        payload: dict[str, str],
        message: str,
    ) -> None:
        response = await client.post("/auth/register", json=payload)

        assert response.status_code == 400
        assert response.json() == {"error": message}

    async def test_duplicate_email_is_rejected(
        self,
        client: AsyncClient,
        alice: dict[str, Any],
    ) -> None:
        response = await client.post(
            "/auth/register",
            json={"email": "alice@example.com", "password": "An0therOne", "role": "learner"},
        )

        assert response.status_code == 400
        assert response.json() == {"error": "user with this email already exists"}

    async def test_trailing_newline_does_not_register_a_twin(
        self,
        client: AsyncClient,
        alice: dict[str, Any],
    ) -> None:
        response = await client.post(
            "/auth/register",
            json={"email": "alice@example.com\n", "password": "An0therOne", "role": "learner"},
        )

        assert response.status_code == 400
        assert response.json() == {"error": "invalid email format"}

    async def test_unreadable_body_is_rejected(self, client: AsyncClient) -> None:
        response = await client.post(
            "/auth/register",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid request body"


class TestLogin:
    """Test cases for POST /auth/login."""

    async def test_login_returns_fresh_token(
        self,
        client: AsyncClient,
        alice: dict[str, Any],
    ) -> None:
        response = await client.post(
            "/auth/login",
            json={"email": "alice@example.com", "password": "Passw0rd"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["user"]["id"] == alice["user"]["id"]
        assert body["token"]

    @pytest.mark.parametrize(
        "credentials",
        [
            {"email": "alice@example.com", "password": "wrong-pass1"},
            {"email": "nobody@example.com", "password": "Passw0rd"},
            {"email": "not-an-email", "password": "Passw0rd"},
            {"email": "alice@example.com", "password": ""},
        ],
    )
    async def test_failures_are_indistinguishable(
        self,
        client: AsyncClient,
        alice: dict[str, Any],
        credentials: dict[str, str],
    ) -> None:
        response = await client.post("/auth/login", json=credentials)

        assert response.status_code == 401
        assert response.json() == {"error": "invalid email or password"}


class TestMe:
    """Test cases for GET /auth/me."""

    async def test_me_returns_caller(self, client: AsyncClient, bob: dict[str, Any]) -> None:
        response = await client.get("/auth/me", headers=bob["headers"])

        assert response.status_code == 200
        assert response.json()["email"] == "bob@example.com"
        assert response.json()["role"] == "learner"

    async def test_me_requires_header(self, client: AsyncClient, db: None) -> None:
        response = await client.get("/auth/me")

        assert response.status_code == 401
        assert response.json() == {"error": "Missing authorization header"}

    async def test_me_rejects_wrong_scheme(self, client: AsyncClient, db: None) -> None:
        response = await client.get("/auth/me", headers={"Authorization": "Token abc"})

        assert response.status_code == 401
        assert response.json() == {"error": "Invalid authorization header format"}

    async def test_me_rejects_bad_token(self, client: AsyncClient, db: None) -> None:
        response = await client.get("/auth/me", headers={"Authorization": "Bearer abc"})

        assert response.status_code == 401
        assert response.json() == {"error": "Invalid or expired token"}

    async def test_me_for_deleted_account_is_not_found(
        self,
        client: AsyncClient,
        app: FastAPI,
    ) -> None:
        codec: TokenCodec = app.state.token_codec
        token = codec.issue("no-such-user", "admin")

        response = await client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 404
        assert response.json() == {"error": "User not found"}
