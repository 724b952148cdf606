"""
Metrics and cache administration endpoints.

Sandi Metz Principles:
- Single Responsibility: Expose router statistics
- Small functions: Minimal logic in endpoints
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from reviewgen.api.deps import get_review_router
from reviewgen.services.review_router import FallbackRouter
from reviewgen.utils.logger import get_logger

router = APIRouter()
logger = get_logger(__name__)


@router.get("/metrics")
async def get_metrics(
    review_router: FallbackRouter = Depends(get_review_router),  # noqa: B008
) -> Dict[str, Any]:
    """
    Get metrics summary and cache statistics.

    Returns:
        Metrics summary with a cache section
    """
    summary = review_router.metrics_summary()
    summary["cache_stats"] = await review_router.cache_stats()
    return summary


@router.delete("/cache")
async def clear_cache(
    review_router: FallbackRouter = Depends(get_review_router),  # noqa: B008
) -> Dict[str, str]:
    """
    Clear the review cache.

    Returns:
        Confirmation message
    """
    await review_router.clear_cache()
    logger.info("Cache cleared via API")
    return {"status": "cleared"}
