"""
Genre taxonomy schemas.
"""

from pydantic import Field

from swipefeed.shared.schemas.common import BaseSchema


class GenreCategoryRecord(BaseSchema):
    """A genre category as read from the store."""

    id: int
    name: str = Field(min_length=1)
    sort_order: int = 0


class GenreRecord(BaseSchema):
    """A genre as read from the store."""

    id: int
    genre_category_id: int
    name: str = Field(min_length=1)
    is_active: bool
    sort_order: int = 0


class CategoryWithGenres(BaseSchema):
    """A category and its active genres, both in display order."""

    id: int
    name: str
    sort_order: int
    genres: list[GenreRecord] = Field(default_factory=list)


class TaxonomyResponse(BaseSchema):
    """Full taxonomy for the submission form."""

    categories: list[CategoryWithGenres]
