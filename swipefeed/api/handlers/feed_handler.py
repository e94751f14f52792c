"""
Feed Handler

Public feed of approved listings.
"""

from fastapi import APIRouter, Depends

from swipefeed.shared.schemas.listing import FeedResponse
from swipefeed.shared.services.feed_service import FeedService
from swipefeed.api.dependencies.services import get_feed_service


router = APIRouter()


@router.get("", response_model=FeedResponse)
async def list_feed(
    feed_service: FeedService = Depends(get_feed_service),
):
    """Approved listings, newest first. An empty feed returns no items."""
    entries = await feed_service.list_published()
    return FeedResponse.from_entries(entries)
