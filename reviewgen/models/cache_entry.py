"""
Cache entry model.

Sandi Metz Principles:
- Single Responsibility: Cache data structure
- Clear naming: Descriptive fields
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class CacheEntry:
    """Cached review text with absolute expiry (monotonic seconds)."""

    text: str
    expires_at: float

    def is_expired(self, now: float) -> bool:
        """Check if entry is past its expiry."""
        return now >= self.expires_at
