"""
ListingGenre Entity Model

Junction table linking Listings to Genres.

The composite primary key makes a (listing, genre) pair unique, so a listing
can never carry the same genre twice. Rows are never updated in place: when a
listing's tags change, its whole set of rows is replaced.

SAMPLE LISTING_GENRE RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ listing_id       │ 550e8400-e29b-41d4-a716-446655440000                      │
│ genre_id         │ 3                                                          │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from typing import TYPE_CHECKING
import uuid

from sqlalchemy import ForeignKey, Integer, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from swipefeed.shared.models.base import Base


if TYPE_CHECKING:
    from swipefeed.shared.models.genre import Genre
    from swipefeed.shared.models.listing import Listing


class ListingGenre(Base):
    """
    ListingGenre model - links a listing to one of its genres.

    Attributes:
        listing_id: The tagged listing (part of composite PK)
        genre_id: The attached genre (part of composite PK)

    Relationships:
        listing: The tagged listing
        genre: The attached genre
    """

    __tablename__ = "listing_genres"

    listing_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("listings.id", ondelete="CASCADE"),
        primary_key=True,
    )

    genre_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("genres.id", ondelete="RESTRICT"),
        primary_key=True,
        index=True,
    )

    listing: Mapped["Listing"] = relationship(
        "Listing",
        back_populates="genre_links",
    )

    genre: Mapped["Genre"] = relationship("Genre")

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<ListingGenre(listing_id={self.listing_id}, genre_id={self.genre_id})>"
