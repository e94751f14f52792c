"""
Genre taxonomy repositories.

Read-only access to genre categories and genres. Both are ordered by
sort_order, ties broken by id.
"""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from swipefeed.shared.models.genre import Genre
from swipefeed.shared.models.genre_category import GenreCategory
from swipefeed.shared.repositories.base import BaseRepository


class GenreCategoryRepository(BaseRepository[GenreCategory]):
    """Repository for GenreCategory entity."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(GenreCategory, session)

    async def list_ordered(self) -> list[GenreCategory]:
        """All categories in display order."""
        return await self.list(order_by="sort_order", order_desc=False)


class GenreRepository(BaseRepository[Genre]):
    """Repository for Genre entity."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Genre, session)

    async def list_active(self, category_id: Optional[int] = None) -> list[Genre]:
        """
        Active genres in display order.

        Args:
            category_id: Only return genres owned by this category

        Returns:
            Genres with is_active = true, ascending sort_order
        """
        stmt = select(Genre).where(Genre.is_active.is_(True))

        if category_id is not None:
            stmt = stmt.where(Genre.genre_category_id == category_id)

        stmt = stmt.order_by(Genre.sort_order.asc(), Genre.id.asc())
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
