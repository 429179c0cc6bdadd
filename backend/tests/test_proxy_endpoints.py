"""Tests for the same-origin market data proxies."""

from __future__ import annotations

import httpx
import pytest
from fastapi import status
from fastapi.testclient import TestClient

from app.domains.market_data.api.proxy_endpoints import get_proxy_client
from app.main import app

from .factories import make_fmp_client

UPSTREAM = {
    "/stable/earnings": [{"symbol": "CAT", "date": "2025-04-30", "revenueActual": 14250000000, "extra": 1}],
    "/stable/treasury-rates": [{"date": "2025-06-30", "year10": 4.24}],
    "/stable/dividends": {"historical": "legacy shape"},
}


def _upstream(request: httpx.Request) -> httpx.Response:
    if request.url.path in UPSTREAM:
        return httpx.Response(200, json=UPSTREAM[request.url.path])
    return httpx.Response(500, json={"message": "upstream down"})


@pytest.fixture
def proxy_client():
    app.dependency_overrides[get_proxy_client] = lambda: make_fmp_client(_upstream)
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def keyless_client():
    app.dependency_overrides[get_proxy_client] = lambda: None
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestProxySuccess:
    def test_earnings_verbatim(self, proxy_client):
        response = proxy_client.get("/api/earnings", params={"symbol": "CAT"})
        assert response.status_code == status.HTTP_200_OK
        assert response.json() == UPSTREAM["/stable/earnings"]

    def test_treasury_needs_no_symbol(self, proxy_client):
        response = proxy_client.get("/api/treasury")
        assert response.status_code == status.HTTP_200_OK
        assert response.json() == UPSTREAM["/stable/treasury-rates"]

    def test_non_list_body_verbatim(self, proxy_client):
        response = proxy_client.get("/api/dividends", params={"symbol": "CAT"})
        assert response.json() == {"historical": "legacy shape"}


class TestProxyErrors:
    @pytest.mark.parametrize("path", ["/api/earnings", "/api/shares", "/api/profile", "/api/market-cap", "/api/dividends"])
    def test_symbol_required(self, proxy_client, path):
        response = proxy_client.get(path)
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"error": "Symbol is required"}

    def test_blank_symbol(self, proxy_client):
        response = proxy_client.get("/api/earnings", params={"symbol": "  "})
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_symbol_checked_before_key(self, keyless_client):
        response = keyless_client.get("/api/profile")
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_missing_key(self, keyless_client):
        response = keyless_client.get("/api/earnings", params={"symbol": "CAT"})
        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json() == {"error": "API key not configured"}

    def test_treasury_missing_key(self, keyless_client):
        assert keyless_client.get("/api/treasury").json() == {"error": "API key not configured"}

    @pytest.mark.parametrize(
        "path, label",
        [
            ("/api/shares", "shares data"),
            ("/api/profile", "profile data"),
            ("/api/market-cap", "market cap data"),
        ],
    )
    def test_upstream_failure(self, proxy_client, path, label):
        response = proxy_client.get(path, params={"symbol": "CAT"})
        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json() == {"error": f"Failed to fetch {label}"}


class TestCors:
    def test_preflight_from_allowed_origin(self, proxy_client):
        response = proxy_client.options(
            "/api/earnings",
            headers={"Origin": "http://localhost:3000", "Access-Control-Request-Method": "GET"},
        )
        assert response.status_code == status.HTTP_200_OK
        assert response.headers["access-control-allow-origin"] == "http://localhost:3000"
        assert response.headers["access-control-max-age"] == "86400"

    def test_unknown_origin_not_allowed(self, proxy_client):
        response = proxy_client.get(
            "/api/earnings", params={"symbol": "CAT"}, headers={"Origin": "https://evil.example"}
        )
        assert "access-control-allow-origin" not in response.headers
