"""
Database Module

This module provides database connectivity and session management for SwipeFeed.

Architecture Overview:
======================
    FastAPI Route
        │  Dependency Injection: get_db()
        ▼
    AsyncSession (one per request)
        │  Passed to Service → Repository
        ▼
    ListingRepository / GenreRepository / ...
        │  SQL Queries
        ▼
    PostgreSQL (SQLite in tests)

Usage in FastAPI:
=================
    from fastapi import Depends
    from swipefeed.shared.db import get_db
    from swipefeed.shared.repositories import ListingRepository

    @app.get("/listings/{listing_id}")
    async def get_listing(listing_id: UUID, db: AsyncSession = Depends(get_db)):
        return await ListingRepository(db).get(listing_id)
"""

from swipefeed.shared.db.session import (
    get_db,
    init_db,
    close_db,
    AsyncSessionLocal,
    engine,
)

__all__ = [
    "get_db",
    "init_db",
    "close_db",
    "AsyncSessionLocal",
    "engine",
]
