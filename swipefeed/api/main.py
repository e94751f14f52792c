"""
SwipeFeed API Application Entry Point

FastAPI application setup with all routers, middleware, and lifecycle management.

Application Architecture:
=========================
    Middleware:    CORS, exception handlers
    Routers:       Health, Taxonomy, Listings, Feed, Admin session, Moderation
    Dependencies:  Database session, moderator session, services

Lifecycle:
==========
1. Application starts → lifespan startup
2. Database connection initialized
3. Application serves requests
4. Application stops → lifespan shutdown
5. Database connection closed

Usage:
======
    # Run with uvicorn
    uvicorn swipefeed.api.main:app --host 0.0.0.0 --port 8000 --reload

    # Or programmatically
    from swipefeed.api.main import create_application
    app = create_application()
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from swipefeed.config.settings import settings
from swipefeed.shared.db import init_db, close_db
from swipefeed.shared.core.logging import logger, clear_log_context
from swipefeed.api.middleware import setup_exception_handlers
from swipefeed.api.routes import register_routes


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Startup:
    - Verify the database is reachable

    Shutdown:
    - Close database connections
    """
    logger.info(
        "Starting SwipeFeed API",
        app_name=settings.APP_NAME,
        version=settings.APP_VERSION,
        environment=settings.APP_ENV,
    )
    if not settings.ADMIN_PASSWORD:
        logger.warning("ADMIN_PASSWORD is not set; moderator login is disabled")

    await init_db()
    logger.info("SwipeFeed API started successfully")

    yield

    logger.info("Shutting down SwipeFeed API")
    await close_db()
    logger.info("SwipeFeed API shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title=settings.APP_NAME,
        description="Creator video submissions, moderation queue and public feed",
        version=settings.APP_VERSION,
        # Only show docs in development
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        lifespan=lifespan,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # MIDDLEWARE
    # ═══════════════════════════════════════════════════════════════════════════

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def reset_log_context(request: Request, call_next):
        # Context bound during one request must not leak into the next
        clear_log_context()
        try:
            return await call_next(request)
        finally:
            clear_log_context()

    # ═══════════════════════════════════════════════════════════════════════════
    # EXCEPTION HANDLERS
    # ═══════════════════════════════════════════════════════════════════════════

    setup_exception_handlers(app)

    # ═══════════════════════════════════════════════════════════════════════════
    # ROUTES
    # ═══════════════════════════════════════════════════════════════════════════

    register_routes(app)

    return app


# Create the application instance
app = create_application()
