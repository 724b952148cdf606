"""
Alert models.

Sandi Metz Principles:
- Small classes with clear purpose
- Clear naming conventions
"""

from datetime import datetime, timezone
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field


class AlertThresholds(BaseModel):
    """Comparison targets for alert evaluation."""

    model_config = ConfigDict(frozen=True)

    error_rate: float = Field(default=0.1, ge=0.0, le=1.0, description="Error rate")
    latency_ms: float = Field(default=5000.0, ge=0.0, description="Mean latency")
    cost_per_day: float = Field(default=1.0, ge=0.0, description="Daily cost (USD)")


class AlertEvent(BaseModel):
    """One threshold breach."""

    type: str = Field(..., description="Alert type (error_rate, latency, cost)")
    message: str = Field(..., description="Human readable message")
    metrics_snapshot: Dict[str, Any] = Field(
        default_factory=dict, description="Metrics summary at breach time"
    )
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc), description="Breach time"
    )
