"""Smoke tests for health and app wiring."""

from httpx import AsyncClient


async def test_health_returns_ok(client: AsyncClient) -> None:
    """GET /api/v1/health returns 200 and status ok."""
    response = await client.get("/api/v1/health")
    assert response.status_code == 200
    data = response.json()
    assert data.get("status") == "ok"


async def test_readiness_without_store_returns_503(client: AsyncClient) -> None:
    """GET /api/v1/health/ready is 503 when DATABASE_URL is not set."""
    response = await client.get("/api/v1/health/ready")
    assert response.status_code == 503
    data = response.json()
    assert data["status"] == "not_ready"
    assert "DATABASE_URL" in data["message"]


async def test_response_carries_generated_request_id(client: AsyncClient) -> None:
    response = await client.get("/api/v1/health")
    request_id = response.headers.get("x-request-id")
    assert request_id
    assert len(request_id) == 36


async def test_client_request_id_is_forwarded(client: AsyncClient) -> None:
    response = await client.get("/api/v1/health", headers={"X-Request-ID": "abc-123"})
    assert response.headers["x-request-id"] == "abc-123"


async def test_unsafe_request_id_is_replaced(client: AsyncClient) -> None:
    """Values outside [A-Za-z0-9_-] are not echoed back."""
    response = await client.get("/api/v1/health", headers={"X-Request-ID": "bad;id"})
    assert response.headers["x-request-id"] != "bad;id"
    assert len(response.headers["x-request-id"]) == 36


async def test_unknown_route_returns_error_body(client: AsyncClient) -> None:
    response = await client.get("/api/v1/nope")
    assert response.status_code == 404
    assert "error" in response.json()
