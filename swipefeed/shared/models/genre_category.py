"""
GenreCategory Entity Model

Top-level grouping used to organize genres for tag selection.
Static reference data: read by the application, maintained outside it.

SAMPLE GENRE_CATEGORY RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ 1                                                          │
│ name             │ "Situation"                                                │
│ sort_order       │ 10                                                         │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from typing import TYPE_CHECKING

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from swipefeed.shared.models.base import Base


if TYPE_CHECKING:
    from swipefeed.shared.models.genre import Genre


class GenreCategory(Base):
    """
    GenreCategory model - a named, ordered group of genres.

    Attributes:
        id: Integer identifier
        name: Display name
        sort_order: Display position (ascending)

    Relationships:
        genres: Genres owned by this category
    """

    __tablename__ = "genre_categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    name: Mapped[str] = mapped_column(Text, nullable=False)

    sort_order: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        index=True,
    )

    genres: Mapped[list["Genre"]] = relationship(
        "Genre",
        back_populates="category",
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<GenreCategory(id={self.id}, name={self.name!r})>"
