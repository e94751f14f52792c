"""
Moderation Handler

Moderation queue endpoints. Every route requires a moderator session
(see get_moderation_service).

ARCHITECTURE:
=============
    Handler → Service → Repository → Model

Approve and reject respond with the decided listing plus the reloaded
pending queue, so the caller never renders a queue that still shows it.
"""

from uuid import UUID

from fastapi import APIRouter, Depends

from swipefeed.shared.schemas.common import error_responses
from swipefeed.shared.schemas.listing import (
    ListingDetail,
    ModerationResponse,
    PendingQueueResponse,
    RejectRequest,
)
from swipefeed.shared.services.moderation_service import ModerationOutcome, ModerationService
from swipefeed.api.dependencies.services import get_moderation_service


router = APIRouter()


def _build_moderation_response(outcome: ModerationOutcome) -> ModerationResponse:
    return ModerationResponse(
        listing=outcome.listing,
        pending=outcome.pending,
        pending_reloaded=outcome.pending_reloaded,
    )


@router.get("/pending", response_model=PendingQueueResponse)
async def list_pending(
    moderation_service: ModerationService = Depends(get_moderation_service),
):
    """Listings awaiting review, newest first."""
    items = await moderation_service.list_pending()
    return PendingQueueResponse(items=items, total=len(items))


@router.get(
    "/listings/{listing_id}",
    response_model=ListingDetail,
    responses=error_responses(404),
)
async def get_listing(
    listing_id: UUID,
    moderation_service: ModerationService = Depends(get_moderation_service),
):
    """One listing with its genre ids."""
    return await moderation_service.get_listing(listing_id)


@router.post(
    "/listings/{listing_id}/approve",
    response_model=ModerationResponse,
    responses=error_responses(404),
)
async def approve_listing(
    listing_id: UUID,
    moderation_service: ModerationService = Depends(get_moderation_service),
):
    """Approve a listing; any rejection reason is cleared."""
    outcome = await moderation_service.approve(listing_id)
    return _build_moderation_response(outcome)


@router.post(
    "/listings/{listing_id}/reject",
    response_model=ModerationResponse,
    responses=error_responses(400, 404),
)
async def reject_listing(
    listing_id: UUID,
    request: RejectRequest,
    moderation_service: ModerationService = Depends(get_moderation_service),
):
    """Reject a listing with the given reason (blank leaves it unset)."""
    outcome = await moderation_service.reject(listing_id, request.reason)
    return _build_moderation_response(outcome)
