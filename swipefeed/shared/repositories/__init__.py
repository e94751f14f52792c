"""
Repository Pattern Implementations

This module provides the Repository pattern for database operations.
Repositories encapsulate database queries and provide a clean API for data access.

Repository Hierarchy:
=====================
    BaseRepository[ModelType]           ← Generic read / insert operations
         │
         ├── ListingRepository          ← Pending-only inserts, decisions, status queries
         ├── GenreCategoryRepository    ← Ordered categories
         └── GenreRepository            ← Ordered active genres

    ListingGenreRepository              ← Association set replace / read

Usage Example:
==============
    from swipefeed.shared.repositories import ListingRepository, ListingGenreRepository

    async def tag(db: AsyncSession, listing_id: UUID, genre_ids: list[int]):
        await ListingGenreRepository(db).replace_for_listing(listing_id, genre_ids)
"""

from swipefeed.shared.repositories.base import BaseRepository
from swipefeed.shared.repositories.listing_repository import ListingRepository
from swipefeed.shared.repositories.genre_repository import (
    GenreCategoryRepository,
    GenreRepository,
)
from swipefeed.shared.repositories.listing_genre_repository import ListingGenreRepository

__all__ = [
    # Base class
    "BaseRepository",
    # Entity-specific repositories
    "ListingRepository",
    "GenreCategoryRepository",
    "GenreRepository",
    "ListingGenreRepository",
]
