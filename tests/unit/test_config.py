"""Test configuration module."""

from reviewgen.config import AppConfig


class TestAppConfig:
    """Test application configuration."""

    def test_should_load_default_values(self):
        """Test default configuration."""
        config = AppConfig(_env_file=None)
        assert config.app_name == "ReviewGen"
        assert config.api_port == 8000
        assert config.cache_ttl_seconds == 3600
        assert config.cache_max_size == 100
        assert config.ab_testing_enabled is False

    def test_should_parse_allowed_origins(self):
        """Test allowed origins parsing."""
        config = AppConfig(
            allowed_origins="http://localhost:3000,http://localhost:8000"
        )
        origins = config.allowed_origins_list
        assert len(origins) == 2
        assert "http://localhost:3000" in origins

    def test_should_identify_development_environment(self):
        """Test environment detection."""
        config = AppConfig(app_env="development")
        assert config.is_development is True
        assert config.is_production is False

    def test_should_build_direct_primary_config(self):
        """Test primary provider defaults when calling directly."""
        config = AppConfig(openai_api_key="sk-test", proxy_url="")

        primary = config.primary_provider_config()

        assert primary.name == "openai"
        assert primary.endpoint == "https://api.openai.com/v1"
        assert primary.model == "gpt-4o-mini"
        assert primary.api_key == "sk-test"
        assert primary.timeout_seconds == 3.0
        assert primary.max_retries == 2
        assert primary.cost_per_unit == 0.00015
        assert not primary.proxied

    def test_should_route_through_proxy_without_keys(self):
        """Test proxy endpoint and dropped credentials."""
        config = AppConfig(openai_api_key="sk-test", proxy_url="https://proxy.local/")

        primary = config.primary_provider_config()
        secondary = config.secondary_provider_config()

        assert primary.endpoint == "https://proxy.local/openai"
        assert primary.api_key == ""
        assert primary.is_callable
        assert secondary.endpoint == "https://proxy.local/groq"

    def test_should_build_secondary_groq_config(self):
        """Test secondary provider defaults."""
        config = AppConfig(groq_api_key="gsk-test", proxy_url="")

        secondary = config.secondary_provider_config()

        assert secondary.name == "groq"
        assert secondary.endpoint == "https://api.groq.com/openai/v1"
        assert secondary.timeout_seconds == 1.0
        assert secondary.max_retries == 1
        assert secondary.cost_per_unit == 0.0

    def test_should_build_alert_thresholds(self):
        """Test alert threshold defaults."""
        thresholds = AppConfig().alert_thresholds()

        assert thresholds.error_rate == 0.1
        assert thresholds.latency_ms == 5000.0
        assert thresholds.cost_per_day == 1.0
