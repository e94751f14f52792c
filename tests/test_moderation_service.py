import uuid
from datetime import datetime, timezone

import pytest
from sqlalchemy.exc import SQLAlchemyError

from swipefeed.shared.core.exceptions import (
    ListingNotFoundError,
    StoreReadError,
    StoreWriteError,
)
from swipefeed.shared.models import Listing, ModerationStatus, can_transition
from swipefeed.shared.repositories.listing_repository import ListingRepository
from swipefeed.shared.schemas.auth import ModeratorContext
from swipefeed.shared.schemas.listing import ListingRecord, ListingSubmission
from swipefeed.shared.services.feed_service import FeedService
from swipefeed.shared.services.moderation_service import ModerationService
from swipefeed.shared.services.submission_service import SubmissionService


@pytest.fixture
def service(db_session):
    return ModerationService(db_session, moderator=ModeratorContext(subject="tester"))


async def test_list_pending_is_newest_first_and_pending_only(service, make_listing):
    older = await make_listing()
    await make_listing(status=ModerationStatus.APPROVED)
    newer = await make_listing()
    await make_listing(status=ModerationStatus.REJECTED, rejection_reason="spam")

    pending = await service.list_pending()

    assert [r.id for r in pending] == [newer.id, older.id]
    assert all(r.status == ModerationStatus.PENDING for r in pending)


async def test_approve_publishes_and_leaves_the_queue(service, db_session, make_listing):
    listing = await make_listing()

    outcome = await service.approve(listing.id)

    assert outcome.listing.status == ModerationStatus.APPROVED
    assert outcome.listing.rejection_reason is None
    assert listing.id not in [r.id for r in outcome.pending]
    feed = await FeedService(db_session).list_published()
    assert [e.id for e in feed] == [listing.id]


async def test_reject_stores_trimmed_reason_and_hides_from_feed(service, db_session, make_listing):
    listing = await make_listing()

    outcome = await service.reject(listing.id, "  bad link ")

    assert outcome.pending == []
    detail = await service.get_listing(listing.id)
    assert detail.status == ModerationStatus.REJECTED
    assert detail.rejection_reason == "bad link"
    assert await FeedService(db_session).list_published() == []


async def test_blank_reject_reason_is_unset(service, make_listing):
    listing = await make_listing()

    outcome = await service.reject(listing.id, "   ")

    assert outcome.listing.status == ModerationStatus.REJECTED
    assert outcome.listing.rejection_reason is None


async def test_approving_a_rejected_listing_clears_the_reason(service, db_session, make_listing):
    listing = await make_listing(status=ModerationStatus.REJECTED, rejection_reason="blurry")

    await service.approve(listing.id)

    stored = await db_session.get(Listing, listing.id)
    assert stored.status == ModerationStatus.APPROVED
    assert stored.rejection_reason is None


async def test_approved_listing_can_be_rejected(service, make_listing):
    listing = await make_listing(status=ModerationStatus.APPROVED)

    outcome = await service.reject(listing.id, "copyright claim")

    assert outcome.listing.status == ModerationStatus.REJECTED
    assert outcome.listing.rejection_reason == "copyright claim"


async def test_approve_is_repeatable(service, make_listing):
    listing = await make_listing(status=ModerationStatus.APPROVED)

    first = await service.approve(listing.id)
    second = await service.approve(listing.id)

    assert first.listing.status == second.listing.status == ModerationStatus.APPROVED


def test_no_transition_returns_to_pending():
    for status in ModerationStatus:
        assert can_transition(status, ModerationStatus.APPROVED)
        assert can_transition(status, ModerationStatus.REJECTED)
        assert not can_transition(status, ModerationStatus.PENDING)


async def test_unknown_listing_raises_not_found(service):
    missing = uuid.uuid4()

    with pytest.raises(ListingNotFoundError):
        await service.approve(missing)
    with pytest.raises(ListingNotFoundError):
        await service.reject(missing, "bad link")
    with pytest.raises(ListingNotFoundError):
        await service.get_listing(missing)


async def test_get_listing_includes_genre_ids(service, db_session, taxonomy):
    fields = ListingSubmission(
        creator_name="@creator",
        title="Morning routine",
        video_url="https://youtu.be/abcdef12345",
    )
    result = await SubmissionService(db_session).submit(fields, [3, 1])

    detail = await service.get_listing(result.listing_id)

    assert detail.status == ModerationStatus.PENDING
    assert sorted(detail.genre_ids) == [1, 3]


async def test_write_failure_raises_store_write_error(service, make_listing, monkeypatch):
    listing = await make_listing()

    async def fail(*args, **kwargs):
        raise SQLAlchemyError("connection lost")

    monkeypatch.setattr(ListingRepository, "apply_decision", fail)

    with pytest.raises(StoreWriteError):
        await service.approve(listing.id)


async def test_failed_queue_reload_keeps_the_committed_decision(service, make_listing, monkeypatch):
    listing = await make_listing()
    other = await make_listing()

    async def fail(*args, **kwargs):
        raise SQLAlchemyError("read timeout")

    monkeypatch.setattr(ListingRepository, "list_by_status", fail)

    outcome = await service.approve(listing.id)

    assert outcome.pending_reloaded is False
    assert outcome.pending == []
    assert outcome.listing.status == ModerationStatus.APPROVED
    monkeypatch.undo()
    assert (await service.get_listing(listing.id)).status == ModerationStatus.APPROVED
    assert [r.id for r in await service.list_pending()] == [other.id]


async def test_decision_reports_reloaded_queue(service, make_listing):
    listing = await make_listing()

    outcome = await service.reject(listing.id, "off topic")

    assert outcome.pending_reloaded is True


async def test_malformed_rows_are_dropped_from_the_queue(service, make_listing):
    good = await make_listing()
    broken = await make_listing(title="")

    pending = await service.list_pending()

    assert [r.id for r in pending] == [good.id]
    with pytest.raises(StoreReadError):
        await service.get_listing(broken.id)


def test_stale_rejection_reason_is_coerced_away():
    record = ListingRecord.model_validate(
        {
            "id": uuid.uuid4(),
            "creator_name": "@creator",
            "title": "Morning routine",
            "video_url": "https://www.youtube.com/embed/abcdef12345?autoplay=0&mute=0",
            "status": "approved",
            "rejection_reason": "left over",
            "created_at": datetime.now(timezone.utc),
        }
    )

    assert record.rejection_reason is None
