"""
Moderation Queue Service

Lists listings awaiting review and applies approve/reject decisions.

STATE MACHINE:
==============
    from / to   approved   rejected   pending
    pending       yes        yes        no
    approved      yes        yes        no
    rejected      yes        yes        no

Any state may move to approved or rejected; nothing returns to pending.
Decisions are last-write-wins. Authorization happens before this service
is called; the moderator context only feeds the log.

Usage:
======
    from swipefeed.shared.services.moderation_service import ModerationService

    service = ModerationService(db, moderator=context)
    outcome = await service.reject(listing_id, "bad link")
    outcome.pending  # queue reloaded after the decision
"""

from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from swipefeed.shared.core.exceptions import (
    ListingNotFoundError,
    StoreReadError,
    StoreWriteError,
)
from swipefeed.shared.core.logging import get_logger
from swipefeed.shared.models.enums import ModerationStatus
from swipefeed.shared.repositories.listing_genre_repository import ListingGenreRepository
from swipefeed.shared.repositories.listing_repository import ListingRepository
from swipefeed.shared.schemas.auth import ModeratorContext
from swipefeed.shared.schemas.listing import ListingDetail, ListingRecord
from swipefeed.shared.services.records import to_record, to_records


@dataclass
class ModerationOutcome:
    """
    A decided listing and the pending queue as it stands afterwards.

    pending_reloaded is False when the decision was committed but the queue
    read that follows it failed; pending is then empty.
    """

    listing: ListingRecord
    pending: list[ListingRecord]
    pending_reloaded: bool = True


class ModerationService:
    """
    Service for the moderation queue.

    Handles:
    - Listing pending submissions, newest first
    - Reading one listing with its genres
    - Approve / reject transitions
    """

    def __init__(
        self,
        session: AsyncSession,
        moderator: Optional[ModeratorContext] = None,
    ) -> None:
        """
        Initialize ModerationService.

        Args:
            session: Async database session
            moderator: Who is acting; used for log context only
        """
        self.session = session
        self.moderator = moderator
        self.listing_repo = ListingRepository(session)
        self.listing_genre_repo = ListingGenreRepository(session)
        self.log = get_logger(__name__).bind(
            moderator=moderator.subject if moderator else None
        )

    # ═══════════════════════════════════════════════════════════════════════════
    # READS
    # ═══════════════════════════════════════════════════════════════════════════

    async def list_pending(self) -> list[ListingRecord]:
        """Pending listings, newest first."""
        try:
            rows = await self.listing_repo.list_by_status(ModerationStatus.PENDING)
        except SQLAlchemyError as e:
            self.log.error("Failed to load pending listings", error=str(e))
            raise StoreReadError("Could not load the moderation queue") from e
        return to_records(ListingRecord, rows)

    async def get_listing(self, listing_id: UUID) -> ListingDetail:
        """
        Read one listing with its genre ids.

        Raises:
            ListingNotFoundError: If no listing has this id
            StoreReadError: If the store read fails or the row is malformed
        """
        try:
            listing = await self.listing_repo.get(listing_id)
            if listing is None:
                raise ListingNotFoundError(str(listing_id))
            genre_ids = await self.listing_genre_repo.list_genre_ids(listing_id)
        except SQLAlchemyError as e:
            self.log.error("Failed to load listing", listing_id=str(listing_id), error=str(e))
            raise StoreReadError("Could not load the listing") from e

        detail = to_record(ListingDetail, listing)
        return detail.model_copy(update={"genre_ids": genre_ids})

    # ═══════════════════════════════════════════════════════════════════════════
    # TRANSITIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def approve(self, listing_id: UUID) -> ModerationOutcome:
        """
        Approve a listing and clear any rejection reason.

        The write is issued even if the listing is already approved.
        """
        return await self._decide(listing_id, ModerationStatus.APPROVED)

    async def reject(self, listing_id: UUID, reason: str) -> ModerationOutcome:
        """
        Reject a listing.

        Args:
            listing_id: Listing UUID
            reason: Rejection reason; stored trimmed, blank leaves it unset
        """
        cleaned = (reason or "").strip() or None
        return await self._decide(listing_id, ModerationStatus.REJECTED, cleaned)

    async def _decide(
        self,
        listing_id: UUID,
        status: ModerationStatus,
        reason: Optional[str] = None,
    ) -> ModerationOutcome:
        try:
            listing = await self.listing_repo.apply_decision(listing_id, status, reason)
            if listing is None:
                raise ListingNotFoundError(str(listing_id))
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            self.log.error(
                "Moderation write failed",
                listing_id=str(listing_id),
                status=status.value,
                error=str(e),
            )
            raise StoreWriteError("Could not record the moderation decision") from e

        self.log.info(
            "Moderation decision recorded",
            listing_id=str(listing_id),
            status=status.value,
            has_reason=reason is not None,
        )
        record = to_record(ListingRecord, listing)
        # The decision is already committed; a failed queue read must not undo it
        try:
            pending = await self.list_pending()
        except StoreReadError:
            self.log.warning(
                "Pending queue reload failed after decision",
                listing_id=str(listing_id),
                status=status.value,
            )
            return ModerationOutcome(listing=record, pending=[], pending_reloaded=False)
        return ModerationOutcome(listing=record, pending=pending)
