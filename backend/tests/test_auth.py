"""
Noteful Backend — Bearer Token Tests
======================================

What:  The shared-token gate in front of every route.

What we test:
    ✅ Every route answers 401 without a token, with a wrong token, or with a wrong scheme
    ✅ The 401 body is {"error": "Unauthorized request"}
    ✅ No store call happens on a rejected request
    ✅ An unconfigured (empty) token rejects everything
    ✅ A correct token passes through
"""

from unittest.mock import AsyncMock, patch

import pytest
from httpx import AsyncClient, ASGITransport

from app.middleware.auth import BearerTokenMiddleware, extract_bearer_token
from app.services.folder_service import folder_service
from app.services.note_service import note_service

ROUTES = [
    ("GET", "/api/folders"),
    ("POST", "/api/folders"),
    ("GET", "/api/folders/1"),
    ("PATCH", "/api/folders/1"),
    ("DELETE", "/api/folders/1"),
    ("GET", "/api/notes"),
    ("POST", "/api/notes"),
    ("GET", "/api/notes/1"),
    ("PATCH", "/api/notes/1"),
    ("DELETE", "/api/notes/1"),
    ("GET", "/health"),
    ("GET", "/no/such/route"),
]

UNAUTHORIZED = {"error": "Unauthorized request"}


class TestExtractBearerToken:

    def test_bearer_header(self):
        assert extract_bearer_token("Bearer abc123") == "abc123"

    def test_wrong_scheme(self):
        assert extract_bearer_token("Basic abc123") is None

    def test_scheme_is_case_sensitive(self):
        assert extract_bearer_token("bearer abc123") is None

    def test_missing_token(self):
        assert extract_bearer_token("Bearer") is None
        assert extract_bearer_token("Bearer ") is None


class TestIsAuthorized:

    def setup_method(self):
        self.gate = BearerTokenMiddleware(app=AsyncMock(), api_token="secret")

    def test_exact_match(self):
        assert self.gate.is_authorized("Bearer secret") is True

    def test_mismatch(self):
        assert self.gate.is_authorized("Bearer secret2") is False
        assert self.gate.is_authorized("Bearer Secret") is False

    def test_absent(self):
        assert self.gate.is_authorized(None) is False
        assert self.gate.is_authorized("") is False

    def test_empty_secret_matches_nothing(self):
        gate = BearerTokenMiddleware(app=AsyncMock(), api_token="")
        assert gate.is_authorized("Bearer ") is False
        assert gate.is_authorized("Bearer anything") is False


class TestUnauthorizedRequests:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method,path", ROUTES)
    async def test_no_token(self, test_client, method, path):
        response = await test_client.request(method, path, json={"name": "x"})

        assert response.status_code == 401
        assert response.json() == UNAUTHORIZED

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method,path", ROUTES)
    async def test_wrong_token(self, test_client, method, path):
        response = await test_client.request(
            method, path, headers={"Authorization": "Bearer not-the-token"}
        )

        assert response.status_code == 401
        assert response.json() == UNAUTHORIZED

    @pytest.mark.asyncio
    async def test_wrong_scheme(self, test_client):
        response = await test_client.get(
            "/api/folders", headers={"Authorization": "Token test-api-token"}
        )

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_rejection_happens_before_store(self, test_client):
        with patch.object(folder_service, "get_all", AsyncMock()) as get_all, \
             patch.object(note_service, "get_by_id", AsyncMock()) as get_by_id:
            await test_client.get("/api/folders")
            await test_client.delete("/api/notes/1")

        get_all.assert_not_awaited()
        get_by_id.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unconfigured_token_rejects_everything(self, app_factory):
        transport = ASGITransport(app=app_factory(api_token=""))
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.get("/api/folders", headers={"Authorization": "Bearer "})

        assert response.status_code == 401


class TestAuthorizedRequests:

    @pytest.mark.asyncio
    async def test_valid_token_reaches_route(self, test_client, auth_headers):
        response = await test_client.get("/api/folders", headers=auth_headers)

        assert response.status_code == 200

    @pytest.mark.asyncio
    async def test_unknown_route_is_404_after_auth(self, test_client, auth_headers):
        response = await test_client.get("/no/such/route", headers=auth_headers)

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_response_carries_request_id(self, test_client, auth_headers):
        response = await test_client.get(
            "/api/folders", headers={**auth_headers, "X-Request-ID": "abc12345"}
        )

        assert response.headers["x-request-id"] == "abc12345"

    @pytest.mark.asyncio
    async def test_health_with_token(self, test_client, auth_headers):
        response = await test_client.get("/health", headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["database"] == "connected"
        assert response.json()["status"] == "healthy"
