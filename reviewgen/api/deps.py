"""
API dependency injection.

Sandi Metz Principles:
- Single Responsibility: Dependency lookup and injection
- Dependency Inversion: Routes depend on the router abstraction
"""

from fastapi import Request

from reviewgen.config import AppConfig
from reviewgen.services.review_router import FallbackRouter


def get_review_router(request: Request) -> FallbackRouter:
    """
    Get the application-wide fallback router.

    Args:
        request: FastAPI request

    Returns:
        Router built during application startup
    """
    return request.app.state.review_router


def get_settings(request: Request) -> AppConfig:
    """
    Get the configuration the application was created with.

    Args:
        request: FastAPI request

    Returns:
        Application configuration
    """
    return request.app.state.settings
