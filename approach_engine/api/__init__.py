"""API routes."""

from approach_engine.api.optimization import router as optimization_router

__all__ = ["optimization_router"]
