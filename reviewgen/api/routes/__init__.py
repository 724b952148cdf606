"""API route modules."""

from reviewgen.api.routes import health, metrics, reviews

__all__ = ["health", "metrics", "reviews"]
