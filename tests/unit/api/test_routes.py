"""Test HTTP routes."""

import pytest
from fastapi.testclient import TestClient

from reviewgen.main import create_application
from reviewgen.services.review_router import FallbackRouter
from tests.mocks.provider_mocks import ScriptedProvider


@pytest.fixture
def review_router() -> FallbackRouter:
    """Create router with scripted providers."""
    return FallbackRouter(
        primary=ScriptedProvider("openai", ["API review"], cost_per_unit=0.002),
        secondary=ScriptedProvider("groq", api_key=""),
    )


@pytest.fixture
def client(test_config, review_router):
    """Create test client running the application lifespan."""
    app = create_application(test_config, review_router=review_router)
    with TestClient(app) as test_client:
        yield test_client


class TestReviewRoutes:
    """Test review generation endpoint."""

    def test_should_generate_review(self, client):
        response = client.post(
            "/api/v1/reviews",
            json={"hotel_name": "Test Hotel", "rating": 5, "highlights": ["spa"]},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["text"] == "API review"
        assert body["source"] == "primary"
        assert body["request_id"].startswith("req_")
        assert body["cached"] is False

    def test_should_reject_invalid_rating(self, client):
        response = client.post(
            "/api/v1/reviews", json={"hotel_name": "Test Hotel", "rating": 9}
        )

        assert response.status_code == 422

    def test_should_reject_missing_hotel(self, client):
        response = client.post("/api/v1/reviews", json={"rating": 4})

        assert response.status_code == 422


class TestHealthRoutes:
    """Test health endpoint."""

    def test_should_report_provider_availability(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["environment"] == "development"
        assert body["providers"] == {
            "primary": True,
            "secondary": False,
            "template": True,
        }


class TestMetricsRoutes:
    """Test metrics and cache endpoints."""

    def test_should_return_metrics_and_cache_stats(self, client):
        client.post("/api/v1/reviews", json={"hotel_name": "Test Hotel", "rating": 4})

        response = client.get("/api/v1/metrics")

        assert response.status_code == 200
        body = response.json()
        assert body["requests"]["total"] == 1
        assert body["cache_stats"]["total"] == 1

    def test_should_clear_cache(self, client):
        client.post("/api/v1/reviews", json={"hotel_name": "Test Hotel", "rating": 4})

        response = client.delete("/api/v1/cache")

        assert response.status_code == 200
        assert response.json() == {"status": "cleared"}
        stats = client.get("/api/v1/metrics").json()["cache_stats"]
        assert stats["total"] == 0
