"""
Review generation endpoint.

Sandi Metz Principles:
- Single Responsibility: HTTP request handling
- Small functions: Minimal logic in endpoints
- Dependency Injection: Router injected
"""

from fastapi import APIRouter, Depends

from reviewgen.api.deps import get_review_router
from reviewgen.models.request import GenerationRequest
from reviewgen.models.result import GenerationResult
from reviewgen.services.review_router import FallbackRouter

router = APIRouter()


@router.post("/reviews", response_model=GenerationResult)
async def generate_review(
    request: GenerationRequest,
    review_router: FallbackRouter = Depends(get_review_router),  # noqa: B008
) -> GenerationResult:
    """
    Generate a hotel review.

    Provider failures fall back to template text, so this endpoint
    always answers with a result.

    Args:
        request: Generation request
        review_router: Fallback router (injected)

    Returns:
        Generation result
    """
    return await review_router.generate(request)
