"""
Platform settings FastAPI application entry point.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from platform_settings import __version__
from platform_settings.config import get_settings
from platform_settings.db.session import check_db_connection, engine

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: startup and shutdown."""
    from platform_settings.api.deps import get_asset_store

    settings = get_settings()
    logger.info("%s starting", settings.app_name)
    try:
        try:
            check_db_connection()
            logger.info("Database connection verified")
        except Exception as e:
            logger.critical("Database unreachable: %s", e)
            raise

        if not settings.storage_configured:
            logger.warning("Object store URL/key not set; branding uploads will fail")
        if not settings.storage_bucket:
            logger.warning("STORAGE_BUCKET not set; branding uploads are disabled")

        yield
    finally:
        logger.info("%s shutting down", settings.app_name)
        if get_asset_store.cache_info().currsize:
            get_asset_store().close()
            get_asset_store.cache_clear()
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

    from platform_settings.api.settings import router as settings_router

    app.include_router(settings_router, prefix="/api/settings", tags=["settings"])

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
