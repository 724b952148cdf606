"""
Review generation result models.

Sandi Metz Principles:
- Small classes with clear purpose
- Immutable response data
- Clear naming conventions
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class GenerationSource(str, Enum):
    """Stage of the fallback chain that produced a result."""

    CACHE = "cache"
    PRIMARY = "primary"
    SECONDARY = "secondary"
    TEMPLATE = "template"
    EMERGENCY = "emergency"


class ProviderResponse(BaseModel):
    """Text returned by a generation provider."""

    text: str = Field(..., description="Generated text")
    units: int = Field(default=0, ge=0, description="Usage units (total tokens)")
    model: str = Field(default="", description="Model that produced the text")


class GenerationResult(BaseModel):
    """Final result of one generation request."""

    text: str = Field(..., min_length=1, description="Review text")
    source: GenerationSource = Field(..., description="Terminal source")
    latency_ms: float = Field(..., ge=0, description="End-to-end latency")
    request_id: str = Field(..., description="Request identifier")
    cached: bool = Field(default=False, description="Whether served from cache")
    cost_estimate: float = Field(default=0.0, ge=0.0, description="Cost in USD")
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Completion time (UTC)",
    )
    experiment_arm: Optional[str] = Field(
        None, description="A/B arm when the experiment gate ran"
    )

    @property
    def from_provider(self) -> bool:
        """Check if result came from an external provider."""
        return self.source in (GenerationSource.PRIMARY, GenerationSource.SECONDARY)
