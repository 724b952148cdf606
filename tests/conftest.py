"""
Pytest configuration and fixtures.

Provides common fixtures for testing.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from reviewgen.cache.request_cache import RequestCache
from reviewgen.config import AppConfig
from reviewgen.models.request import GenerationRequest
from reviewgen.monitoring.metrics import MetricsRecorder


@pytest.fixture
def test_config() -> AppConfig:
    """
    Create test configuration.

    Returns:
        Test configuration instance
    """
    return AppConfig(
        app_env="development",
        openai_api_key="test-openai-key",
        groq_api_key="test-groq-key",
        anthropic_api_key="test-anthropic-key",
        proxy_url="",
        metrics_store="memory",
    )


@pytest.fixture
def sample_request() -> GenerationRequest:
    """Create sample generation request."""
    return GenerationRequest(
        hotel_name="Test Hotel",
        rating=5,
        trip_type="business",
        highlights=["location", "service"],
        nights=2,
    )


@pytest.fixture
def cache() -> RequestCache:
    """Create enabled review cache."""
    return RequestCache(ttl_seconds=3600, max_size=100)


@pytest.fixture
def metrics() -> MetricsRecorder:
    """Create empty metrics recorder."""
    return MetricsRecorder()


@pytest.fixture
def mock_redis_pool():
    """
    Mock Redis connection pool.

    Returns:
        Mocked Redis pool
    """
    pool = MagicMock()
    pool.disconnect = AsyncMock()
    return pool


@pytest.fixture
def mock_redis_client():
    """
    Mock Redis client usable as an async context manager.

    Returns:
        Mocked Redis client
    """
    client = MagicMock()
    client.get = AsyncMock(return_value=None)
    client.set = AsyncMock(return_value=True)
    client.__aenter__ = AsyncMock(return_value=client)
    client.__aexit__ = AsyncMock(return_value=False)
    return client
