"""Integration tests for health check endpoints."""

from unittest.mock import AsyncMock, patch

from fastapi.testclient import TestClient


class TestHealthEndpoint:
    """Tests for /health endpoint."""

    def test_health_returns_healthy_status(self, client: TestClient) -> None:
        """Test that /health returns 200 with healthy status and version."""
        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["version"] == "0.1.0"
        assert data["timestamp"] is not None


class TestReadinessEndpoint:
    """Tests for /health/ready endpoint."""

    def test_readiness_returns_200_when_database_reachable(self, client: TestClient) -> None:
        """Test that /health/ready reports a healthy database check."""
        response = client.get("/health/ready")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert [check["name"] for check in data["checks"]] == ["database"]
        assert data["checks"][0]["healthy"] is True

    def test_readiness_returns_503_when_database_down(self, client: TestClient) -> None:
        """Test that /health/ready returns 503 when the database probe fails."""
        with patch(
            "src.api.routes.health.check_database_connection",
            AsyncMock(return_value={"healthy": False, "error": "connection refused"}),
        ):
            response = client.get("/health/ready")

        assert response.status_code == 503
        data = response.json()
        assert data["status"] == "unhealthy"
        assert data["checks"][0]["error"] == "connection refused"
