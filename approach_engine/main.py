"""
Approach Engine FastAPI application entry point.

Serves the approach optimization engines (timing, targeting, cooldown,
conversion analysis) to the outreach dashboards.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from approach_engine import __version__
from approach_engine.config import get_settings

logging.basicConfig(
    level=get_settings().log_level,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: startup and shutdown."""
    settings = get_settings()
    logger.info("%s starting", settings.app_name)
    logger.info(
        "Cooldown windows: duplicate=%dd freelance=%dd recent=%dd locale=%s",
        settings.duplicate_min_interval_days,
        settings.freelance_limit_days,
        settings.recent_approach_days,
        settings.recommendation_locale,
    )
    try:
        yield
    finally:
        logger.info("%s shutting down", settings.app_name)


async def value_error_handler(request: Request, exc: ValueError) -> JSONResponse:
    """Report malformed input data (e.g. unparseable timestamps) as 422."""
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=422, content={"detail": str(exc)})


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    from approach_engine.api.optimization import router as optimization_router

    app.include_router(optimization_router, prefix="/api/optimization", tags=["optimization"])
    app.add_exception_handler(ValueError, value_error_handler)

    @app.get("/health")
    def health() -> dict:
        """Health check endpoint."""
        return {"status": "ok", "version": __version__}

    return app


app = create_app()
