"""
Route Registration

Centralizes all route registration for the FastAPI application.

Route Hierarchy:
================
    /health, /ready, /live  → Health check endpoints
    /taxonomy               → Genre categories and genres
    /listings               → Creator submissions
    /feed                   → Published listings
    /admin                  → Moderator session
    /moderation             → Moderation queue (moderator session required)

Usage:
======
    from swipefeed.api.routes import register_routes

    app = FastAPI()
    register_routes(app)
"""

from fastapi import FastAPI

from swipefeed.shared.schemas.common import error_responses

from swipefeed.api.handlers import (
    auth_handler,
    feed_handler,
    health_handler,
    moderation_handler,
    submission_handler,
    taxonomy_handler,
)


def register_routes(app: FastAPI) -> None:
    """
    Register all API routes.

    Args:
        app: FastAPI application instance
    """
    # Health check endpoints (no prefix, root level)
    app.include_router(
        health_handler.router,
        tags=["Health"],
    )

    app.include_router(
        taxonomy_handler.router,
        prefix="/taxonomy",
        tags=["Taxonomy"],
    )

    app.include_router(
        submission_handler.router,
        prefix="/listings",
        tags=["Submissions"],
    )

    app.include_router(
        feed_handler.router,
        prefix="/feed",
        tags=["Feed"],
    )

    app.include_router(
        auth_handler.router,
        prefix="/admin",
        tags=["Moderator Session"],
        responses=error_responses(401),
    )

    app.include_router(
        moderation_handler.router,
        prefix="/moderation",
        tags=["Moderation"],
        responses=error_responses(401, 403, 503),
    )
