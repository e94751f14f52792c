import pytest
from sqlalchemy.exc import SQLAlchemyError

from swipefeed.shared.core.exceptions import StoreReadError
from swipefeed.shared.models import ModerationStatus
from swipefeed.shared.repositories.listing_repository import ListingRepository
from swipefeed.shared.services.feed_service import FeedService


async def test_empty_feed(db_session):
    assert await FeedService(db_session).list_published() == []


async def test_feed_shows_approved_newest_first_with_positions(db_session, make_listing):
    first = await make_listing(status=ModerationStatus.APPROVED, genre_label="Office")
    await make_listing()
    await make_listing(status=ModerationStatus.REJECTED, rejection_reason="spam")
    second = await make_listing(status=ModerationStatus.APPROVED)

    feed = await FeedService(db_session).list_published()

    assert [(e.position, e.id) for e in feed] == [(1, second.id), (2, first.id)]
    entry = feed[1]
    assert entry.title == first.title
    assert entry.creator_name == first.creator_name
    assert entry.genre_label == "Office"
    assert entry.video_url == first.video_url
    assert feed[0].genre_label is None


async def test_store_failure_raises_store_read_error(db_session, monkeypatch):
    async def fail(*args, **kwargs):
        raise SQLAlchemyError("connection lost")

    monkeypatch.setattr(ListingRepository, "list_by_status", fail)

    with pytest.raises(StoreReadError):
        await FeedService(db_session).list_published()
