"""
Models package for ReviewGen.

Exports all model classes for easy imports throughout the application.
"""

# Alert models
from reviewgen.models.alert import AlertEvent, AlertThresholds

# Cache models
from reviewgen.models.cache_entry import CacheEntry

# Provider configuration models
from reviewgen.models.provider import ProviderConfig

# Request models
from reviewgen.models.request import GenerationRequest

# Result models
from reviewgen.models.result import (
    GenerationResult,
    GenerationSource,
    ProviderResponse,
)

__all__ = [
    # Alerts
    "AlertEvent",
    "AlertThresholds",
    # Cache
    "CacheEntry",
    # Provider
    "ProviderConfig",
    # Request
    "GenerationRequest",
    # Result
    "GenerationResult",
    "GenerationSource",
    "ProviderResponse",
]
