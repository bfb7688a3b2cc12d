# 📄 File: soundcave/main.py
#
# 🧭 Purpose (Layman Explanation):
# The main control center that starts the SoundCave backend, connects all the parts
# together, and makes sure everything is ready to handle requests from the apps.
#
# 🧪 Purpose (Technical Summary):
# FastAPI application factory and entry point with middleware setup, router
# registration, shared infrastructure on app.state and lifespan management of the
# database engine and object storage client.
#
# 🔗 Dependencies:
# - FastAPI framework, uvicorn
# - soundcave.shared.config (settings, database)
# - soundcave.shared.core.security (token service, password hasher)
# - All module routers via soundcave.api.v1.router
#
# 🔄 Connected Modules / Calls From:
# - uvicorn server startup
# - Docker container entry point
# - tests (create_application)

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import uvicorn
from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware

from soundcave.api.middleware.error_handling import ErrorHandlingMiddleware, register_exception_handlers
from soundcave.api.middleware.logging import RequestLoggingMiddleware
from soundcave.api.middleware.rate_limiting import configure_rate_limiting
from soundcave.api.v1.health import health_router
from soundcave.api.v1.router import api_v1_router
from soundcave.modules.user_management.infrastructure.external.google_identity import GoogleIdentityVerifier
from soundcave.shared.config.database import DatabaseConfig
from soundcave.shared.config.settings import Settings, get_settings
from soundcave.shared.core.security import PasswordHasher, TokenService
from soundcave.shared.infrastructure.storage.supabase_storage import SupabaseStorageClient
from soundcave.shared.utils.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Connects the object storage client on startup and releases the storage
    client and database engine on shutdown.
    """
    settings: Settings = app.state.settings
    logger.info("🎵 SoundCave API starting up...")

    if settings.storage_configured:
        storage = SupabaseStorageClient(settings)
        await storage.initialize()
        app.state.storage = storage
        logger.info("✅ Object storage initialized")
    else:
        logger.warning("⚠️ Supabase storage not configured; upload endpoints are disabled")

    logger.info("✅ SoundCave API startup complete")

    try:
        yield
    finally:
        logger.info("🔄 SoundCave API shutting down...")

        if app.state.storage is not None:
            await app.state.storage.close()
            app.state.storage = None

        await app.state.database.dispose()
        logger.info("✅ Database connections closed")


def create_application(settings: Optional[Settings] = None) -> FastAPI:
    """
    Application factory function.

    Creates and configures the FastAPI application with all necessary
    middleware, routers and shared infrastructure for the given settings.

    Args:
        settings: Settings to use; defaults to the cached environment settings

    Returns:
        FastAPI: Configured FastAPI application instance
    """
    settings = settings or get_settings()
    setup_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)

    app = FastAPI(
        title=settings.APP_NAME,
        description=settings.APP_DESCRIPTION,
        version=settings.APP_VERSION,
        docs_url="/docs" if not settings.is_production else None,
        redoc_url="/redoc" if not settings.is_production else None,
        openapi_url="/openapi.json" if not settings.is_production else None,
        lifespan=lifespan,
        debug=settings.DEBUG,
    )

    # =========================================================================
    # SHARED INFRASTRUCTURE
    # =========================================================================

    app.state.settings = settings
    app.state.database = DatabaseConfig(settings)
    app.state.token_service = TokenService(settings)
    app.state.password_hasher = PasswordHasher(settings)
    app.state.google_verifier = GoogleIdentityVerifier(settings)
    app.state.storage = None

    # =========================================================================
    # MIDDLEWARE CONFIGURATION
    # =========================================================================

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=["GET", "POST", "PUT", "DELETE", "PATCH", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID", "X-Response-Time"],
    )

    # Request logging middleware
    app.add_middleware(RequestLoggingMiddleware)

    # Error handling middleware (added last so it wraps everything)
    app.add_middleware(ErrorHandlingMiddleware)

    # =========================================================================
    # EXCEPTION HANDLERS
    # =========================================================================

    register_exception_handlers(app)
    configure_rate_limiting(app, settings)

    # =========================================================================
    # ROUTER REGISTRATION
    # =========================================================================

    app.include_router(health_router)
    app.include_router(api_v1_router, prefix="/api/v1")

    # =========================================================================
    # ROOT ENDPOINTS
    # =========================================================================

    @app.get("/", include_in_schema=False)
    async def root() -> dict:
        """Root endpoint with API information."""
        return {
            "name": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "description": settings.APP_DESCRIPTION,
            "environment": settings.ENVIRONMENT,
            "docs_url": app.docs_url,
            "health_check": "/health",
            "api_base": "/api/v1",
        }

    @app.get("/favicon.ico", include_in_schema=False)
    async def favicon():
        """Favicon endpoint to prevent 404 errors."""
        return Response(status_code=204)

    return app


def main():
    """
    Main function for running the application in development.

    This function is used when running the application directly
    with python -m soundcave.main or the soundcave console script.
    """
    settings = get_settings()
    uvicorn.run(
        "soundcave.main:create_application",
        factory=True,
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD and settings.is_development,
        log_level=settings.LOG_LEVEL.lower(),
        workers=1 if settings.RELOAD else settings.WORKERS,
    )


if __name__ == "__main__":
    main()
