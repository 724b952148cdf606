"""
Health check endpoint.

Sandi Metz Principles:
- Single Responsibility: Health check logic only
- Clear naming: Descriptive endpoint names
"""

from typing import Dict, Literal

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from reviewgen.api.deps import get_review_router, get_settings
from reviewgen.config import AppConfig
from reviewgen.services.review_router import FallbackRouter

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response."""

    status: Literal["healthy", "degraded"] = Field(..., description="Overall status")
    environment: str = Field(..., description="Environment name")
    version: str = Field(..., description="Application version")
    providers: Dict[str, bool] = Field(
        default_factory=dict, description="Stage availability"
    )


@router.get("/health", response_model=HealthResponse)
async def health_check(
    review_router: FallbackRouter = Depends(get_review_router),  # noqa: B008
    settings: AppConfig = Depends(get_settings),  # noqa: B008
) -> HealthResponse:
    """
    Report service status and provider availability.

    Degraded means neither provider can be called and every request
    is served from templates.

    Returns:
        Health status
    """
    availability = review_router.availability()
    has_provider = availability["primary"] or availability["secondary"]
    return HealthResponse(
        status="healthy" if has_provider else "degraded",
        environment=settings.app_env,
        version=settings.app_version,
        providers=availability,
    )
