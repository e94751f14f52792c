"""
Listing Repository

Database operations specific to the Listing model.

Common Operations:
==================
- create()           → Insert a new listing (pending only)
- list_by_status()   → Listings in one moderation state, newest first
- apply_decision()   → Write a moderation decision (status + rejection reason)
"""

from typing import Any, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from swipefeed.shared.core.exceptions import InvalidTransitionError, StoreWriteError
from swipefeed.shared.models.enums import ModerationStatus, can_transition
from swipefeed.shared.models.listing import Listing
from swipefeed.shared.repositories.base import BaseRepository


class ListingRepository(BaseRepository[Listing]):
    """
    Repository for Listing database operations.

    Enforces the write-time policy that new listings are pending, and keeps
    rejection_reason consistent with status on every decision.
    """

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize ListingRepository.

        Args:
            session: Async database session
        """
        super().__init__(Listing, session)

    # ═══════════════════════════════════════════════════════════════════════════
    # INSERT
    # ═══════════════════════════════════════════════════════════════════════════

    async def create(self, **kwargs: Any) -> Listing:
        """
        Insert a listing.

        Only pending listings without a rejection reason may be inserted;
        anything else is refused the way a row-level policy would refuse it.

        Raises:
            StoreWriteError: If the record is not a fresh pending listing
        """
        status = kwargs.setdefault("status", ModerationStatus.PENDING)
        if status != ModerationStatus.PENDING:
            raise StoreWriteError(
                "New listings must be pending",
                details={"status": str(getattr(status, "value", status))},
            )
        if kwargs.get("rejection_reason") is not None:
            raise StoreWriteError("New listings cannot carry a rejection reason")

        return await super().create(**kwargs)

    # ═══════════════════════════════════════════════════════════════════════════
    # LOOKUP METHODS
    # ═══════════════════════════════════════════════════════════════════════════

    async def list_by_status(self, status: ModerationStatus) -> list[Listing]:
        """
        Get listings in one moderation state, newest first.

        Args:
            status: Status to filter by

        Returns:
            Listings ordered by created_at descending
        """
        result = await self.session.execute(
            select(Listing)
            .where(Listing.status == status)
            .order_by(Listing.created_at.desc(), Listing.id.desc())
        )
        return list(result.scalars().all())

    # ═══════════════════════════════════════════════════════════════════════════
    # UPDATE METHODS
    # ═══════════════════════════════════════════════════════════════════════════

    async def apply_decision(
        self,
        listing_id: UUID,
        status: ModerationStatus,
        rejection_reason: Optional[str] = None,
    ) -> Optional[Listing]:
        """
        Write a moderation decision.

        The rejection reason is stored only for REJECTED; any other status
        clears it. The write is issued even when the status does not change.

        Args:
            listing_id: Listing UUID
            status: Target status
            rejection_reason: Reason text, used only when status is REJECTED

        Returns:
            Updated listing or None if not found

        Raises:
            InvalidTransitionError: If the state machine forbids the change
        """
        listing = await self.get(listing_id)
        if not listing:
            return None

        if not can_transition(listing.status, status):
            raise InvalidTransitionError(listing.status.value, status.value)

        listing.status = status
        listing.rejection_reason = (
            rejection_reason if status == ModerationStatus.REJECTED else None
        )

        await self.session.flush()
        await self.session.refresh(listing)
        return listing
