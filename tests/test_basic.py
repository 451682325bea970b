"""
Basic application tests.

Validates that the FastAPI app starts correctly and the root and
default health endpoints respond as expected.
"""

import re

from fastapi.testclient import TestClient

from healthmock.domain.health.catalog import ENDPOINT_DESCRIPTIONS
from healthmock.main import app

client = TestClient(app)

ISO_TIMESTAMP = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z$")


class TestRootEndpoint:
    """Tests for GET /."""

    def test_root_returns_200(self) -> None:
        response = client.get("/")
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("application/json")

    def test_root_lists_endpoints(self) -> None:
        """Root must greet and map every endpoint to its description."""
        body = client.get("/").json()
        assert body["message"] == "Hello MJ! API is running"
        assert body["endpoints"] == dict(ENDPOINT_DESCRIPTIONS)
        assert list(body) == ["message", "timestamp", "endpoints"]

    def test_root_timestamp_is_iso_utc(self) -> None:
        body = client.get("/").json()
        assert ISO_TIMESTAMP.match(body["timestamp"])


class TestHealthEndpoint:
    """Tests for the default health check endpoint."""

    def test_health_returns_200(self) -> None:
        """Health endpoint must return HTTP 200 with status OK."""
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "OK"

    def test_health_response_body(self) -> None:
        """Health endpoint must return status, uptime and environment fields."""
        body = client.get("/health").json()
        assert body["message"] == "Service is healthy"
        assert set(body) == {"status", "message", "timestamp", "uptime", "environment"}
        assert isinstance(body["uptime"], float)
        assert body["uptime"] >= 0

    def test_uptime_does_not_decrease(self) -> None:
        first = client.get("/health").json()["uptime"]
        second = client.get("/health").json()["uptime"]
        assert second >= first
