"""
ReloadLog FastAPI application entry point.

Flow: taxonomy snapshot → dependent option lists → cascade → validation → session record
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app import __version__
from app.config import get_settings
from app.db.session import check_db_connection, engine

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: startup and shutdown."""
    logger.info("ReloadLog starting")
    try:
        try:
            check_db_connection()
            logger.info("Database connection verified")
        except Exception as e:
            logger.critical("Database unreachable: %s", e)
            raise

        # Validate the reference data YAML at startup so a broken deployment
        # fails immediately instead of at the first seed run.
        try:
            from app.reference_data import get_reference_data_version

            logger.info("Reference data %s validated", get_reference_data_version())
        except Exception as e:
            logger.critical("Reference data validation failed at startup: %s", e)
            raise

        yield
    finally:
        logger.info("ReloadLog shutting down")
        engine.dispose()
        logger.info("Database connection pool closed")


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

    from app.api.reloading_sessions import router as reloading_sessions_router
    from app.api.selection import router as selection_router
    from app.api.taxonomy import router as taxonomy_router

    app.include_router(taxonomy_router, prefix="/api/taxonomy", tags=["taxonomy"])
    app.include_router(selection_router, prefix="/api/selection", tags=["selection"])
    app.include_router(
        reloading_sessions_router,
        prefix="/api/reloading-sessions",
        tags=["reloading-sessions"],
    )

    @app.get("/health")
    def health() -> dict:
        """Health check endpoint. Confirms DB connectivity."""
        from sqlalchemy import text

        try:
            with engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return {
                "status": "ok",
                "version": __version__,
                "database": "connected",
            }
        except Exception:
            from fastapi.responses import JSONResponse

            return JSONResponse(
                status_code=503,
                content={
                    "status": "unhealthy",
                    "version": __version__,
                    "database": "disconnected",
                },
            )

    return app


app = create_app()
