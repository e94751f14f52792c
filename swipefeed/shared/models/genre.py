"""
Genre Entity Model

A selectable tag. Each genre belongs to exactly one category and can be
attached to many listings through ListingGenre. Only active genres are
offered to submitters.

SAMPLE GENRE RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id                 │ 3                                                        │
│ genre_category_id  │ 1                                                        │
│ name               │ "Office"                                                 │
│ is_active          │ true                                                     │
│ sort_order         │ 20                                                       │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from typing import TYPE_CHECKING

from sqlalchemy import Boolean, ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from swipefeed.shared.models.base import Base


if TYPE_CHECKING:
    from swipefeed.shared.models.genre_category import GenreCategory


class Genre(Base):
    """
    Genre model - a tag owned by a GenreCategory.

    Attributes:
        id: Integer identifier
        genre_category_id: Owning category
        name: Display name
        is_active: Whether the genre is offered for selection
        sort_order: Display position (ascending)

    Relationships:
        category: The owning category
    """

    __tablename__ = "genres"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    genre_category_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("genre_categories.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )

    name: Mapped[str] = mapped_column(Text, nullable=False)

    is_active: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=True,
        index=True,
    )

    sort_order: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
    )

    category: Mapped["GenreCategory"] = relationship(
        "GenreCategory",
        back_populates="genres",
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<Genre(id={self.id}, name={self.name!r}, active={self.is_active})>"
