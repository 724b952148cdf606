"""
Application configuration management.

Following Sandi Metz principles:
- Single Responsibility: Configuration loading and validation
- Small class: Named fields with documented defaults
- Clear naming: Descriptive property names
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from reviewgen.models.alert import AlertThresholds
from reviewgen.models.provider import ProviderConfig


class AppConfig(BaseSettings):
    """
    Application configuration with validation.

    Loads from environment variables with fallback to .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    # Application settings
    app_name: str = Field(default="ReviewGen", description="Application name")
    app_env: Literal["development", "staging", "production"] = Field(
        default="development", description="Environment"
    )
    app_version: str = Field(default="0.1.0", description="Application version")
    log_level: str = Field(default="INFO", description="Logging level")

    # API settings
    api_host: str = Field(default="0.0.0.0", description="API host")
    api_port: int = Field(default=8000, ge=1, le=65535, description="API port")
    allowed_origins: str = Field(
        default="http://localhost:3000,http://localhost:8000",
        description="CORS allowed origins",
    )

    # Proxy settings (empty = call providers directly with bearer auth)
    proxy_url: str = Field(default="", description="LLM proxy base URL")

    # Primary provider (OpenAI)
    openai_api_key: str = Field(default="", description="OpenAI API key")
    openai_endpoint: str = Field(
        default="https://api.openai.com/v1", description="OpenAI base URL"
    )
    openai_model: str = Field(default="gpt-4o-mini", description="OpenAI model")
    openai_timeout_seconds: float = Field(
        default=3.0, gt=0, description="Per-attempt deadline"
    )
    openai_max_retries: int = Field(default=2, ge=0, description="Retries")
    openai_cost_per_1k_tokens: float = Field(
        default=0.00015, ge=0.0, description="USD per 1K tokens"
    )

    # Secondary provider
    secondary_provider: Literal["groq", "anthropic"] = Field(
        default="groq", description="Backend used for the secondary slot"
    )
    groq_api_key: str = Field(default="", description="Groq API key")
    groq_endpoint: str = Field(
        default="https://api.groq.com/openai/v1", description="Groq base URL"
    )
    groq_model: str = Field(default="mixtral-8x7b-32768", description="Groq model")
    anthropic_api_key: str = Field(default="", description="Anthropic API key")
    anthropic_model: str = Field(
        default="claude-3-haiku-20240307", description="Anthropic model"
    )
    secondary_timeout_seconds: float = Field(
        default=1.0, gt=0, description="Per-attempt deadline"
    )
    secondary_max_retries: int = Field(default=1, ge=0, description="Retries")

    # Retry backoff
    retry_initial_delay: float = Field(default=1.0, ge=0.0, description="First delay")
    retry_exponential_base: float = Field(default=2.0, ge=1.0, description="Base")
    retry_max_delay: float = Field(default=30.0, ge=0.0, description="Delay cap")

    # Cache settings
    cache_enabled: bool = Field(default=True, description="Enable review cache")
    cache_ttl_seconds: int = Field(default=3600, ge=1, description="TTL seconds")
    cache_max_size: int = Field(default=100, ge=1, description="Max entries")
    cache_sweep_interval_seconds: int = Field(
        default=3600, ge=1, description="Expired entry sweep interval"
    )

    # Monitoring settings
    monitoring_enabled: bool = Field(default=True, description="Enable alerting")
    alert_error_rate: float = Field(
        default=0.1, ge=0.0, le=1.0, description="Error rate threshold"
    )
    alert_latency_ms: float = Field(
        default=5000.0, ge=0.0, description="Average latency threshold"
    )
    alert_cost_per_day: float = Field(
        default=1.0, ge=0.0, description="Daily cost threshold (USD)"
    )
    alert_cooldown_seconds: float = Field(
        default=0.0, ge=0.0, description="Per-type alert suppression window"
    )
    metrics_checkpoint_interval_seconds: int = Field(
        default=60, ge=1, description="Metrics save interval"
    )
    metrics_store: Literal["memory", "file", "redis"] = Field(
        default="memory", description="Metrics persistence backend"
    )
    metrics_file_path: str = Field(
        default="reviewgen_metrics.json", description="Metrics JSON file"
    )
    redis_url: str = Field(
        default="redis://localhost:6379/0", description="Redis URL for metrics"
    )
    redis_metrics_key: str = Field(
        default="reviewgen:metrics", description="Redis key for metrics"
    )

    # Experiment settings
    ab_testing_enabled: bool = Field(default=False, description="Enable A/B gate")
    ab_llm_percentage: float = Field(
        default=50.0, ge=0.0, le=100.0, description="% of requests allowed to LLM"
    )

    @property
    def allowed_origins_list(self) -> list[str]:
        """Get allowed origins as list."""
        return [origin.strip() for origin in self.allowed_origins.split(",")]

    @property
    def uses_proxy(self) -> bool:
        """Check if provider calls go through the auth proxy."""
        return bool(self.proxy_url)

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.app_env == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.app_env == "production"

    def primary_provider_config(self) -> ProviderConfig:
        """Build configuration for the primary provider slot."""
        return ProviderConfig(
            name="openai",
            endpoint=self._endpoint_for("openai", self.openai_endpoint),
            model=self.openai_model,
            api_key="" if self.uses_proxy else self.openai_api_key,
            proxied=self.uses_proxy,
            timeout_seconds=self.openai_timeout_seconds,
            max_retries=self.openai_max_retries,
            cost_per_unit=self.openai_cost_per_1k_tokens,
            temperature=0.8,
            max_tokens=300,
        )

    def secondary_provider_config(self) -> ProviderConfig:
        """Build configuration for the secondary provider slot."""
        if self.secondary_provider == "anthropic":
            return ProviderConfig(
                name="anthropic",
                endpoint=self._endpoint_for("anthropic", ""),
                model=self.anthropic_model,
                api_key="" if self.uses_proxy else self.anthropic_api_key,
                proxied=self.uses_proxy,
                timeout_seconds=self.secondary_timeout_seconds,
                max_retries=self.secondary_max_retries,
                cost_per_unit=0.0,
                temperature=0.7,
                max_tokens=250,
            )

        return ProviderConfig(
            name="groq",
            endpoint=self._endpoint_for("groq", self.groq_endpoint),
            model=self.groq_model,
            api_key="" if self.uses_proxy else self.groq_api_key,
            proxied=self.uses_proxy,
            timeout_seconds=self.secondary_timeout_seconds,
            max_retries=self.secondary_max_retries,
            cost_per_unit=0.0,
            temperature=0.7,
            max_tokens=250,
        )

    def alert_thresholds(self) -> AlertThresholds:
        """Build alert thresholds."""
        return AlertThresholds(
            error_rate=self.alert_error_rate,
            latency_ms=self.alert_latency_ms,
            cost_per_day=self.alert_cost_per_day,
        )

    def _endpoint_for(self, provider: str, direct_endpoint: str) -> str:
        """Route through the proxy when one is configured."""
        if self.uses_proxy:
            return f"{self.proxy_url.rstrip('/')}/{provider}"
        return direct_endpoint


# Global configuration instance
config = AppConfig()
