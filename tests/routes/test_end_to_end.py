"""Register, log in, create a journey and exercise ownership over HTTP."""

from fastapi import FastAPI
from httpx import AsyncClient

from learng.managers import TokenCodec


async def test_register_login_create_and_ownership(client: AsyncClient, app: FastAPI) -> None:
    registered = await client.post(
        "/auth/register",
        json={"email": "a@x.com", "password": "Passw0rd", "displayName": "A", "role": "admin"},
    )
    assert registered.status_code == 201
    a_id = registered.json()["user"]["id"]

    login = await client.post("/auth/login", json={"email": "a@x.com", "password": "Passw0rd"})
    assert login.status_code == 200
    token = login.json()["token"]

    codec: TokenCodec = app.state.token_codec
    assert codec.decode(token).sub == a_id

    a_headers = {"Authorization": f"Bearer {token}"}
    created = await client.post(
        "/journeys",
        json={"title": "Basics", "sourceLanguage": "en", "targetLanguage": "zh"},
        headers=a_headers,
    )
    assert created.status_code == 201
    journey = created.json()["data"]
    assert journey["createdBy"] == a_id

    other = await client.post(
        "/auth/register",
        json={"email": "b@x.com", "password": "Passw0rd", "displayName": "B", "role": "learner"},
    )
    b_headers = {"Authorization": f"Bearer {other.json()['token']}"}

    forbidden = await client.put(
        f"/journeys/{journey['id']}",
        json={"status": "published"},
        headers=b_headers,
    )
    assert forbidden.status_code == 403

    allowed = await client.put(
        f"/journeys/{journey['id']}",
        json={"status": "published", "id": "attacker-id"},
        headers=a_headers,
    )
    assert allowed.status_code == 200
    assert allowed.json()["data"]["status"] == "published"
    assert allowed.json()["data"]["id"] == journey["id"]
