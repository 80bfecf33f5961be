"""
Integration tests for health, root and metrics endpoints.
"""

from sqlalchemy.exc import OperationalError

from comptoir.di.dependencies import get_get_platform_stats
from helpers import ALICE_WALLET


class TestHealthRoutes:
    async def test_root(self, client):
        body = (await client.get("/")).json()
        assert body["service"] == "Comptoir"
        assert body["status"] == "running"

    async def test_health(self, client):
        response = await client.get("/api/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["components"] == {"database": "healthy"}

    async def test_liveness(self, client):
        assert (await client.get("/api/health/live")).status_code == 200

    async def test_readiness(self, client):
        response = await client.get("/api/health/ready")

        assert response.status_code == 200
        assert response.json()["status"] == "ready"

    async def test_request_id_echoed(self, client):
        response = await client.get("/api/health", headers={"X-Request-ID": "abc-123"})
        assert response.headers["X-Request-ID"] == "abc-123"

    async def test_metrics_exposed(self, client, alice):
        await client.post(
            "/api/staking/stake", json={"amount": 100, "walletAddress": ALICE_WALLET}
        )

        response = await client.get("/metrics")

        assert response.status_code == 200
        assert "comptoir_http_requests_total" in response.text
        assert "comptoir_staking_positions_total" in response.text

    async def test_unexpected_storage_error_hidden(self, app, client):
        """Outside development the driver message is not leaked."""
        class Broken:
            async def execute(self):
                raise OperationalError("SELECT 1", {}, Exception("disk I/O error"))

        app.dependency_overrides[get_get_platform_stats] = lambda: Broken()

        response = await client.get("/api/analytics/platform")

        assert response.status_code == 500
        assert response.json() == {
            "error": "Internal server error",
            "code": "STORAGE_ERROR",
        }
