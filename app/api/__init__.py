"""API routes."""

from app.api.reloading_sessions import router as reloading_sessions_router
from app.api.selection import router as selection_router
from app.api.taxonomy import router as taxonomy_router

__all__ = ["reloading_sessions_router", "selection_router", "taxonomy_router"]
