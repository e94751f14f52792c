"""
SwipeFeed Backend

Moderated short-video feed: anonymous submissions, a moderation queue,
and a public feed of approved listings.

Package Structure:
==================
    swipefeed/
    ├── api/        ← FastAPI application
    ├── shared/     ← Shared code (models, repositories, services, etc.)
    └── config/     ← Configuration

Running the Application:
========================
    # API Server
    uvicorn swipefeed.api.main:app --reload

    # Migrations
    alembic upgrade head
"""
