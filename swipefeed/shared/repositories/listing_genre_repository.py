"""
ListingGenre repository for the listing ↔ genre association.
"""

from typing import Iterable
from uuid import UUID

from sqlalchemy import delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from swipefeed.shared.models.listing_genre import ListingGenre


class ListingGenreRepository:
    """
    Repository for the listing ↔ genre association table.

    The association has no identity of its own, so this does not extend
    BaseRepository: it reads ids for a listing and replaces the whole set.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def list_genre_ids(self, listing_id: UUID) -> list[int]:
        """Genre ids attached to a listing, ascending."""
        result = await self.session.execute(
            select(ListingGenre.genre_id)
            .where(ListingGenre.listing_id == listing_id)
            .order_by(ListingGenre.genre_id.asc())
        )
        return list(result.scalars().all())

    async def replace_for_listing(self, listing_id: UUID, genre_ids: Iterable[int]) -> list[int]:
        """
        Replace the listing's genre set wholesale.

        Duplicate ids in the input are collapsed; the composite primary key
        would reject them anyway.

        Args:
            listing_id: Listing UUID
            genre_ids: New genre ids

        Returns:
            The genre ids written, in first-seen order
        """
        unique_ids = list(dict.fromkeys(genre_ids))

        await self.session.execute(delete(ListingGenre).where(ListingGenre.listing_id == listing_id))
        if unique_ids:
            await self.session.execute(
                insert(ListingGenre),
                [{"listing_id": listing_id, "genre_id": genre_id} for genre_id in unique_ids],
            )

        await self.session.flush()
        return unique_ids
