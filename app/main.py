# 📄 File: app/main.py
#
# 🧭 Purpose (Layman Explanation):
# The control center that starts the FreshShare pack service, connects to the database (retrying
# a few times if it is not up yet), and plugs in every web address the service answers.
#
# 🧪 Purpose (Technical Summary):
# FastAPI application factory and entry point: structured logging, lifespan-managed database
# initialisation with retry, middleware and exception handlers, slowapi rate limiting, and
# router registration (health at the root, domain routes under /api/v1).
#
# 🔗 Dependencies:
# - FastAPI framework, uvicorn
# - app.shared.config.settings
# - app.shared.infrastructure.database (connection, session)
# - app.api (middleware, v1 router, health router)
#
# 🔄 Connected Modules / Calls From:
# - uvicorn server startup
# - Docker container entry point
# - tests (create_application)

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import uvicorn
from fastapi import FastAPI, Response
from fastapi.middleware.gzip import GZipMiddleware

from app import __version__
from app.api import API_V1_PREFIX
from app.api.middleware import setup_middleware
from app.api.v1.health import health_router
from app.api.v1.router import api_v1_router
from app.shared.config.settings import Settings, get_settings
from app.shared.core.rate_limiter import limiter
from app.shared.infrastructure.database.connection import close_database, db_manager, init_database
from app.shared.infrastructure.database.session import initialize_sessions, session_manager
from app.shared.utils.logging import (
    SERVICE_NAME,
    get_logger,
    log_shutdown_event,
    log_startup_event,
    setup_logging,
)

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Startup connects to Postgres with retries and fails the process if the
    database never answers. Shutdown disposes the connection pool.
    """
    settings: Settings = app.state.settings
    log_startup_event(SERVICE_NAME, settings.APP_VERSION, extra={"environment": settings.ENVIRONMENT})

    if settings.DB_INIT_ON_STARTUP:
        await init_database()
        initialize_sessions()
        logger.info("Database ready")
    else:
        logger.warning("Database initialisation on startup is disabled")

    try:
        yield
    finally:
        if db_manager.is_initialized:
            await close_database()
        session_manager.reset()
        log_shutdown_event(SERVICE_NAME)


def create_application(settings: Optional[Settings] = None) -> FastAPI:
    """
    Application factory function.

    Args:
        settings: Settings to use; defaults to the cached environment settings

    Returns:
        FastAPI: Configured FastAPI application instance
    """
    settings = settings or get_settings()
    setup_logging(log_level=settings.LOG_LEVEL, log_format=settings.LOG_FORMAT, log_file=settings.LOG_FILE)

    app = FastAPI(
        title=settings.APP_NAME,
        description=settings.APP_DESCRIPTION,
        version=settings.APP_VERSION,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        openapi_url="/openapi.json" if settings.DEBUG else None,
        lifespan=lifespan,
        debug=settings.DEBUG,
    )
    app.state.settings = settings
    app.state.limiter = limiter

    # =========================================================================
    # MIDDLEWARE & EXCEPTION HANDLERS
    # =========================================================================

    setup_middleware(app, settings)
    app.add_middleware(GZipMiddleware, minimum_size=1000)

    # =========================================================================
    # ROUTER REGISTRATION
    # =========================================================================

    app.include_router(health_router, tags=["Health Check"])
    app.include_router(api_v1_router, prefix=API_V1_PREFIX)

    # =========================================================================
    # ROOT ENDPOINTS
    # =========================================================================

    @app.get("/", include_in_schema=False)
    async def root() -> dict:
        """Root endpoint with service information."""
        return {
            "name": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "package_version": __version__,
            "description": settings.APP_DESCRIPTION,
            "environment": settings.ENVIRONMENT,
            "docs_url": "/docs" if settings.DEBUG else None,
            "health_check": "/health",
            "api_base": API_V1_PREFIX,
        }

    @app.get("/favicon.ico", include_in_schema=False)
    async def favicon():
        """Favicon endpoint to prevent 404 errors."""
        return Response(status_code=204)

    return app


# Create the FastAPI application
app = create_application()


def main():
    """
    Run the service with uvicorn.

    Used by the ``freshshare-pack-service`` console script and by
    ``python -m app.main``.
    """
    settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD and settings.is_development,
        log_level=settings.LOG_LEVEL.lower(),
        workers=1 if settings.RELOAD else settings.WORKERS,
    )


if __name__ == "__main__":
    main()
