"""
Main FastAPI application.

Following Sandi Metz:
- Single Responsibility: Application setup and configuration
- Small methods: Each lifecycle stage isolated
- Clear naming: Descriptive function names
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from reviewgen.api.routes import health, metrics, reviews
from reviewgen.config import AppConfig, config
from reviewgen.services.review_router import FallbackRouter, build_router
from reviewgen.utils.logger import get_logger, setup_logging

setup_logging(config.log_level)
logger = get_logger(__name__)


def create_application(
    app_config: AppConfig | None = None,
    review_router: Optional[FallbackRouter] = None,
) -> FastAPI:
    """
    Create and configure FastAPI application.

    Args:
        app_config: Application configuration (global config if None)
        review_router: Prebuilt router (built from config at startup if None)

    Returns:
        Configured FastAPI application instance.
    """
    settings = app_config or config

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Build the router and run its background tasks."""
        logger.info("Starting ReviewGen", env=settings.app_env)
        router = review_router or build_router(settings)
        app.state.review_router = router
        app.state.settings = settings
        await router.start()

        yield

        logger.info("Shutting down ReviewGen")
        await router.stop()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router, tags=["health"])
    app.include_router(reviews.router, prefix="/api/v1", tags=["reviews"])
    app.include_router(metrics.router, prefix="/api/v1", tags=["metrics"])

    return app


app = create_application()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "reviewgen.main:app",
        host=config.api_host,
        port=config.api_port,
        reload=config.is_development,
    )
