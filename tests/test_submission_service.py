import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError

from swipefeed.shared.core.exceptions import (
    PartialWriteError,
    StoreWriteError,
    ValidationError,
)
from swipefeed.shared.models import Listing, ListingGenre, ModerationStatus
from swipefeed.shared.repositories.listing_genre_repository import ListingGenreRepository
from swipefeed.shared.repositories.listing_repository import ListingRepository
from swipefeed.shared.schemas.listing import ListingSubmission
from swipefeed.shared.services.submission_service import SubmissionService


def _fields(**overrides) -> ListingSubmission:
    values = {
        "creator_name": "@creator",
        "title": "Morning routine",
        "video_url": "https://youtu.be/abcdef12345",
    }
    values.update(overrides)
    return ListingSubmission(**values)


async def _listing_count(session) -> int:
    return await session.scalar(select(func.count()).select_from(Listing))


async def _genre_ids(session, listing_id) -> set[int]:
    result = await session.execute(
        select(ListingGenre.genre_id).where(ListingGenre.listing_id == listing_id)
    )
    return set(result.scalars().all())


async def test_submission_is_stored_pending_with_normalized_url(db_session, taxonomy):
    result = await SubmissionService(db_session).submit(_fields(status="approved"), [1, 3])

    listing = await db_session.get(Listing, result.listing_id)
    assert listing.status == ModerationStatus.PENDING
    assert listing.rejection_reason is None
    assert listing.video_url == "https://www.youtube.com/embed/abcdef12345?autoplay=0&mute=0"
    assert listing.source_url == "https://youtu.be/abcdef12345"
    assert listing.genre_label == "Office / Comedy"
    assert result.genre_ids == [1, 3]


async def test_selected_genres_become_association_rows(db_session, taxonomy):
    result = await SubmissionService(db_session).submit(_fields(), [1, 3])

    assert await _genre_ids(db_session, result.listing_id) == {1, 3}


async def test_duplicate_genre_ids_collapse_in_selection_order(db_session, taxonomy):
    result = await SubmissionService(db_session).submit(_fields(), [3, 1, 3])

    listing = await db_session.get(Listing, result.listing_id)
    assert result.genre_ids == [3, 1]
    assert listing.genre_label == "Comedy / Office"
    assert await _genre_ids(db_session, result.listing_id) == {1, 3}


async def test_no_genres_leaves_label_unset(db_session, taxonomy):
    result = await SubmissionService(db_session).submit(_fields())

    listing = await db_session.get(Listing, result.listing_id)
    assert listing.genre_label is None
    assert result.genre_ids == []
    assert await _genre_ids(db_session, result.listing_id) == set()


async def test_text_fields_are_trimmed(db_session):
    result = await SubmissionService(db_session).submit(
        _fields(
            creator_name="  @creator ",
            title=" Morning routine  ",
            creator_contact="  me@example.com ",
            memo="   ",
        )
    )

    listing = await db_session.get(Listing, result.listing_id)
    assert listing.creator_name == "@creator"
    assert listing.title == "Morning routine"
    assert listing.creator_contact == "me@example.com"
    assert listing.memo is None


@pytest.mark.parametrize("field", ["creator_name", "title", "video_url"])
async def test_blank_required_field_writes_nothing(db_session, field):
    with pytest.raises(ValidationError) as exc_info:
        await SubmissionService(db_session).submit(_fields(**{field: "   "}))

    assert exc_info.value.details == {"field": field}
    assert await _listing_count(db_session) == 0


@pytest.mark.parametrize("genre_id", [5, 99])
async def test_inactive_or_unknown_genre_writes_nothing(db_session, taxonomy, genre_id):
    with pytest.raises(ValidationError) as exc_info:
        await SubmissionService(db_session).submit(_fields(), [1, genre_id])

    assert exc_info.value.details["field"] == "genre_ids"
    assert exc_info.value.details["invalid_ids"] == [genre_id]
    assert await _listing_count(db_session) == 0


async def test_tagging_failure_keeps_the_pending_listing(db_session, taxonomy, monkeypatch):
    async def fail(*args, **kwargs):
        raise SQLAlchemyError("connection lost")

    monkeypatch.setattr(ListingGenreRepository, "replace_for_listing", fail)

    with pytest.raises(PartialWriteError) as exc_info:
        await SubmissionService(db_session).submit(_fields(), [1, 3])

    error = exc_info.value
    assert error.status_code == 207
    assert error.details["step"] == "genre_tagging"

    result = await db_session.execute(select(Listing))
    listings = result.scalars().all()
    assert len(listings) == 1
    assert str(listings[0].id) == error.listing_id
    assert listings[0].status == ModerationStatus.PENDING
    assert await _genre_ids(db_session, listings[0].id) == set()


async def test_listing_write_failure_raises_store_write_error(db_session, monkeypatch):
    async def fail(*args, **kwargs):
        raise SQLAlchemyError("connection lost")

    monkeypatch.setattr(ListingRepository, "create", fail)

    with pytest.raises(StoreWriteError):
        await SubmissionService(db_session).submit(_fields())

    assert await _listing_count(db_session) == 0


@pytest.mark.parametrize(
    "overrides",
    [
        {"status": ModerationStatus.APPROVED},
        {"rejection_reason": "nope"},
    ],
)
async def test_repository_refuses_non_pending_inserts(db_session, overrides):
    values = {
        "creator_name": "@creator",
        "title": "Morning routine",
        "video_url": "https://www.youtube.com/embed/abcdef12345?autoplay=0&mute=0",
    }
    values.update(overrides)

    with pytest.raises(StoreWriteError):
        await ListingRepository(db_session).create(**values)

    assert await _listing_count(db_session) == 0
