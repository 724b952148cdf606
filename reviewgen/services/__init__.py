"""Review generation services."""

from reviewgen.services.review_router import FallbackRouter, build_router

__all__ = ["FallbackRouter", "build_router"]
