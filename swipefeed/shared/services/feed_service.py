"""
Publication Feed Service

Approved listings for the public feed, newest first.
"""

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from swipefeed.shared.core.exceptions import StoreReadError
from swipefeed.shared.core.logging import logger
from swipefeed.shared.models.enums import ModerationStatus
from swipefeed.shared.repositories.listing_repository import ListingRepository
from swipefeed.shared.schemas.listing import FeedEntry, ListingRecord
from swipefeed.shared.services.records import to_records


class FeedService:
    """Read-only service over published listings."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.listing_repo = ListingRepository(session)

    async def list_published(self) -> list[FeedEntry]:
        """
        Approved listings, newest first, numbered from 1.

        An empty list means nothing is published yet.

        Raises:
            StoreReadError: If the store read fails
        """
        try:
            rows = await self.listing_repo.list_by_status(ModerationStatus.APPROVED)
        except SQLAlchemyError as e:
            logger.error("Failed to load feed", error=str(e))
            raise StoreReadError("Could not load the feed") from e

        records = to_records(ListingRecord, rows)
        return [
            FeedEntry(
                position=position,
                id=record.id,
                title=record.title,
                creator_name=record.creator_name,
                genre_label=record.genre_label,
                video_url=record.video_url,
                created_at=record.created_at,
            )
            for position, record in enumerate(records, start=1)
        ]
