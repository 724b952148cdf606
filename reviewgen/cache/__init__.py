"""Review cache."""

from reviewgen.cache.request_cache import RequestCache

__all__ = ["RequestCache"]
