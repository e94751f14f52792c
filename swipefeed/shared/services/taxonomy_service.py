"""
Genre Taxonomy Service

Read-only access to the genre catalog used by the submission form.

Usage:
======
    from swipefeed.shared.services.taxonomy_service import TaxonomyService

    service = TaxonomyService(db)
    categories = await service.get_taxonomy()
"""

from collections import defaultdict
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from swipefeed.shared.core.exceptions import StoreReadError
from swipefeed.shared.core.logging import logger
from swipefeed.shared.repositories.genre_repository import (
    GenreCategoryRepository,
    GenreRepository,
)
from swipefeed.shared.schemas.taxonomy import (
    CategoryWithGenres,
    GenreCategoryRecord,
    GenreRecord,
)
from swipefeed.shared.services.records import to_records


TAXONOMY_UNAVAILABLE = "Genre taxonomy is unavailable"


class TaxonomyService:
    """
    Service for genre catalog reads.

    Every listing is ascending sort_order, ties by id. An empty catalog is a
    normal result; a store failure raises StoreReadError.
    """

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize TaxonomyService.

        Args:
            session: Async database session
        """
        self.session = session
        self.category_repo = GenreCategoryRepository(session)
        self.genre_repo = GenreRepository(session)

    async def list_categories(self) -> list[GenreCategoryRecord]:
        """All genre categories in display order."""
        try:
            rows = await self.category_repo.list_ordered()
        except SQLAlchemyError as e:
            logger.error("Failed to load genre categories", error=str(e))
            raise StoreReadError(TAXONOMY_UNAVAILABLE) from e
        return to_records(GenreCategoryRecord, rows)

    async def list_active_genres(self, category_id: Optional[int] = None) -> list[GenreRecord]:
        """
        Active genres in display order.

        Args:
            category_id: Only return genres of this category

        Returns:
            Active genres; empty if there are none
        """
        try:
            rows = await self.genre_repo.list_active(category_id=category_id)
        except SQLAlchemyError as e:
            logger.error("Failed to load genres", category_id=category_id, error=str(e))
            raise StoreReadError(TAXONOMY_UNAVAILABLE) from e
        return to_records(GenreRecord, rows)

    async def get_taxonomy(self) -> list[CategoryWithGenres]:
        """
        Categories with their active genres, both in display order.

        Categories without active genres are included with an empty list.
        """
        categories = await self.list_categories()
        genres = await self.list_active_genres()

        by_category: dict[int, list[GenreRecord]] = defaultdict(list)
        for genre in genres:
            by_category[genre.genre_category_id].append(genre)

        return [
            CategoryWithGenres(
                id=category.id,
                name=category.name,
                sort_order=category.sort_order,
                genres=by_category.get(category.id, []),
            )
            for category in categories
        ]
