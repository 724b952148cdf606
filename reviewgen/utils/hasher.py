"""
Cache key generation utilities.

Sandi Metz Principles:
- Single Responsibility: Fingerprint generation
- Small functions: Each does one thing
- Pure functions: No side effects
"""

import hashlib
import json

from reviewgen.models.request import GenerationRequest


def canonical_request(request: GenerationRequest) -> str:
    """
    Build canonical encoding of the cache-relevant request fields.

    Highlights are sorted so requests differing only in highlight
    order encode identically.

    Args:
        request: Generation request

    Returns:
        Canonical JSON string
    """
    payload = {
        "hotel": request.hotel_name,
        "rating": request.rating,
        "tripType": request.trip_type,
        "highlights": sorted(request.highlights),
    }
    return json.dumps(payload, sort_keys=True, separators=(",", ":"))


def generate_fingerprint(request: GenerationRequest) -> str:
    """
    Generate cache key for request.

    Args:
        request: Generation request

    Returns:
        Cache key (review:sha256hash)
    """
    hash_value = hashlib.sha256(canonical_request(request).encode()).hexdigest()
    return f"review:{hash_value}"
