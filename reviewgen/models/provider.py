"""
Generation provider configuration model.

Sandi Metz Principles:
- Small classes with clear purpose
- Immutable configuration data
- Clear naming conventions
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ProviderConfig(BaseModel):
    """Static provider configuration, read-only at call time."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Backend name (openai, groq, anthropic)")
    endpoint: str = Field(default="", description="Base URL (empty = SDK default)")
    model: str = Field(..., description="Model name/identifier")
    api_key: str = Field(default="", description="API key (empty behind a proxy)")
    proxied: bool = Field(
        default=False, description="Endpoint is a proxy that handles auth"
    )
    timeout_seconds: float = Field(default=3.0, gt=0, description="Attempt deadline")
    max_retries: int = Field(default=2, ge=0, le=10, description="Retries")
    cost_per_unit: float = Field(
        default=0.0, ge=0.0, description="USD per 1K usage units"
    )
    temperature: float = Field(default=0.7, ge=0.0, le=2.0, description="Temperature")
    max_tokens: int = Field(default=300, ge=1, description="Completion token cap")

    @field_validator("model")
    @classmethod
    def validate_model(cls, v: str) -> str:
        """Validate model name is not empty."""
        if not v or v.strip() == "":
            raise ValueError("Model name cannot be empty")
        return v.strip()

    @property
    def has_credentials(self) -> bool:
        """Check if an API key is configured."""
        return bool(self.api_key)

    @property
    def is_callable(self) -> bool:
        """Check if calls can be attempted (key, or keyless behind a proxy)."""
        return self.has_credentials or self.proxied
