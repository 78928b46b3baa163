"""Tests for web/app.py — health endpoint and CORS allowlist."""

import pytest
from unittest.mock import AsyncMock

import storage.database
from config.settings import settings
from web.app import create_app

ALLOWED = ["http://localhost:5173", "http://localhost:5000", "http://localhost:8080"]


@pytest.fixture
def client():
    return create_app().test_client()


class TestHealth:
    async def test_health_ok(self, client):
        response = await client.get("/health")
        assert response.status_code == 200
        assert await response.get_json() == {
            "status": "OK",
            "message": "Sehat Saathi backend running",
        }

    async def test_health_ignores_unrelated_headers(self, client):
        response = await client.get(
            "/health",
            headers={"Accept-Language": "hi", "X-Request-Id": "abc", "Authorization": "Bearer x"},
        )
        assert response.status_code == 200
        assert (await response.get_json())["status"] == "OK"

    async def test_unknown_route(self, client):
        response = await client.get("/status")
        assert response.status_code == 404


class TestCors:
    @pytest.mark.parametrize("origin", ALLOWED)
    async def test_allowed_origin(self, client, origin):
        response = await client.get("/health", headers={"Origin": origin})
        assert response.headers["Access-Control-Allow-Origin"] == origin
        assert response.headers["Access-Control-Allow-Credentials"] == "true"

    async def test_foreign_origin_rejected(self, client):
        response = await client.get("/health", headers={"Origin": "https://evil.example.com"})
        assert "Access-Control-Allow-Origin" not in response.headers

    async def test_no_wildcard(self, client):
        response = await client.get("/health", headers={"Origin": "http://localhost:3000"})
        assert response.headers.get("Access-Control-Allow-Origin") != "*"


class TestShutdown:
    async def test_closes_postgres_pool(self, monkeypatch):
        close = AsyncMock()
        monkeypatch.setattr(settings, "kv_backend", "postgres")
        monkeypatch.setattr(storage.database, "close_pool", close)

        app = create_app()
        async with app.test_app():
            pass

        close.assert_awaited_once()
