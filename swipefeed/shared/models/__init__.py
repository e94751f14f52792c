"""
SwipeFeed SQLAlchemy Models

This package contains all database models for the SwipeFeed application.

Model Hierarchy:
================
    GenreCategory
       └── genres (Genre[])

    Listing
       └── genre_links (ListingGenre[])
              └── genre (Genre)

Models Overview:
================
- Base: Base class and timestamp mixin
- GenreCategory: Top-level grouping of genres (reference data)
- Genre: Selectable tag owned by one category (reference data)
- Listing: Submitted video and its moderation state
- ListingGenre: Junction table for listings and genres

Usage:
======
    from swipefeed.shared.models import Listing, ModerationStatus

    listing = await repo.get(listing_id)
    listing.status  # ModerationStatus.PENDING
"""

from swipefeed.shared.models.base import Base, TimestampMixin
from swipefeed.shared.models.enums import (
    ModerationStatus,
    MODERATION_TRANSITIONS,
    can_transition,
)
from swipefeed.shared.models.genre_category import GenreCategory
from swipefeed.shared.models.genre import Genre
from swipefeed.shared.models.listing import Listing
from swipefeed.shared.models.listing_genre import ListingGenre

__all__ = [
    # Base classes and mixins
    "Base",
    "TimestampMixin",
    # Enums
    "ModerationStatus",
    "MODERATION_TRANSITIONS",
    "can_transition",
    # Models
    "GenreCategory",
    "Genre",
    "Listing",
    "ListingGenre",
]
