"""Tests for application assembly and cross-cutting behaviour."""

from collections.abc import Awaitable, Callable
from typing import Any

import pytest
from fastapi import FastAPI
from httpx import AsyncClient
from pydantic import SecretStr

from learng.configs import Settings
from learng.errors import ConfigurationError
from learng.main import create_app
from learng.middleware import REQUEST_ID_HEADER


def test_refuses_to_start_without_secret() -> None:
    with pytest.raises(ConfigurationError):
        create_app(Settings(JWT_SECRET=SecretStr("")))


def test_codec_follows_settings() -> None:
    app = create_app(Settings(JWT_SECRET=SecretStr("s3cret"), ACCESS_TOKEN_EXPIRE_HOURS=2))

    assert app.state.token_codec.ttl.total_seconds() == 2 * 3600


def test_routes_are_mounted_under_prefix(app: FastAPI) -> None:
    paths = {getattr(route, "path", "") for route in app.routes}

    assert "/api/v1/auth/login" in paths
    assert "/api/v1/journeys/{journey_id}" in paths
    assert "/health" in paths


def test_openapi_documents_token_errors(app: FastAPI) -> None:
    schema = app.openapi()
    responses = schema["paths"]["/api/v1/words/{word_id}"]["get"]["responses"]

    assert "401" in responses
    assert "ErrorResponse" in schema["components"]["schemas"]


async def test_health_needs_no_token(client: AsyncClient) -> None:
    response = await client.get("http://test/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "version": "1.0.0"}


async def test_security_and_request_id_headers(client: AsyncClient) -> None:
    response = await client.get("http://test/health", headers={REQUEST_ID_HEADER: "req-123"})

    assert response.headers[REQUEST_ID_HEADER] == "req-123"
    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Frame-Options"] == "DENY"


async def test_request_id_is_generated(client: AsyncClient) -> None:
    response = await client.get("http://test/health")

    assert response.headers[REQUEST_ID_HEADER]


async def test_unknown_route_uses_error_body(client: AsyncClient) -> None:
    response = await client.get("/no-such-route")

    assert response.status_code == 404
    assert response.json() == {"error": "Not Found"}


async def test_non_integer_page_is_a_bad_request(
    client: AsyncClient,
    register_user: Callable[..., Awaitable[dict[str, Any]]],
) -> None:
    user = await register_user("pager@example.com")

    response = await client.get("/journeys", params={"page": "two"}, headers=user["headers"])

    assert response.status_code == 400
    assert response.json()["error"] == "Invalid request body"
