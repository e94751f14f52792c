"""
Submission Intake Service

Validates a creator's submission and stores it for moderation.

FLOW:
=====
    1. Required fields checked (creator name, title, video URL). Nothing is
       written if one is blank.
    2. Selected genres checked against the active catalog.
    3. Listing inserted as PENDING and committed.
    4. Genre associations written and committed as a separate step.

Step 4 is not atomic with step 3. If it fails the listing stays stored as
pending and PartialWriteError tells the caller which listing was kept.

Usage:
======
    from swipefeed.shared.services.submission_service import SubmissionService

    service = SubmissionService(db)
    result = await service.submit(fields, genre_ids=[1, 3])
"""

from dataclasses import dataclass, field
from typing import Iterable, Optional
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from swipefeed.config.settings import settings
from swipefeed.shared.core.exceptions import (
    PartialWriteError,
    StoreReadError,
    StoreWriteError,
    ValidationError,
)
from swipefeed.shared.core.logging import logger
from swipefeed.shared.models.enums import ModerationStatus
from swipefeed.shared.models.genre import Genre
from swipefeed.shared.repositories.genre_repository import GenreRepository
from swipefeed.shared.repositories.listing_genre_repository import ListingGenreRepository
from swipefeed.shared.repositories.listing_repository import ListingRepository
from swipefeed.shared.schemas.listing import ListingSubmission
from swipefeed.shared.services.url_service import URLService


SUBMISSION_RECEIVED = "Submission received. It will appear in the feed once approved."

REQUIRED_FIELDS = (
    ("creator_name", "Creator name"),
    ("title", "Title"),
    ("video_url", "Video URL"),
)


@dataclass
class SubmissionResult:
    """Outcome of a fully successful submission."""

    listing_id: UUID
    genre_ids: list[int] = field(default_factory=list)
    message: str = SUBMISSION_RECEIVED


def _clean_optional(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


class SubmissionService:
    """
    Service for creator submissions.

    Attributes:
        session: Database session
        listing_repo: ListingRepository instance
        genre_repo: GenreRepository instance
        listing_genre_repo: ListingGenreRepository instance
    """

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize SubmissionService.

        Args:
            session: Async database session
        """
        self.session = session
        self.listing_repo = ListingRepository(session)
        self.genre_repo = GenreRepository(session)
        self.listing_genre_repo = ListingGenreRepository(session)

    # ═══════════════════════════════════════════════════════════════════════════
    # VALIDATION
    # ═══════════════════════════════════════════════════════════════════════════

    @staticmethod
    def validate_required(fields: ListingSubmission) -> dict[str, str]:
        """
        Check required fields and return them trimmed.

        Raises:
            ValidationError: On the first field that is blank after trimming
        """
        cleaned: dict[str, str] = {}
        for name, label in REQUIRED_FIELDS:
            value = (getattr(fields, name) or "").strip()
            if not value:
                raise ValidationError(f"{label} is required", details={"field": name})
            cleaned[name] = value
        return cleaned

    async def resolve_genres(self, genre_ids: Iterable[int]) -> list[Genre]:
        """
        Load the selected genres in selection order.

        Duplicate ids collapse to their first occurrence.

        Raises:
            ValidationError: If an id is unknown or names an inactive genre
            StoreReadError: If the catalog cannot be read
        """
        selected = list(dict.fromkeys(genre_ids))
        if not selected:
            return []

        try:
            found = await self.genre_repo.get_by_ids(selected)
        except SQLAlchemyError as e:
            logger.error("Failed to load selected genres", error=str(e))
            raise StoreReadError("Genre taxonomy is unavailable") from e

        active = {genre.id: genre for genre in found if genre.is_active}
        invalid = [genre_id for genre_id in selected if genre_id not in active]
        if invalid:
            raise ValidationError(
                "Unknown or inactive genre selected",
                details={"field": "genre_ids", "invalid_ids": invalid},
            )
        return [active[genre_id] for genre_id in selected]

    @staticmethod
    def build_genre_label(genres: list[Genre]) -> Optional[str]:
        """Join genre names in selection order; None when nothing was selected."""
        if not genres:
            return None
        return settings.GENRE_LABEL_DELIMITER.join(genre.name for genre in genres)

    # ═══════════════════════════════════════════════════════════════════════════
    # SUBMIT
    # ═══════════════════════════════════════════════════════════════════════════

    async def submit(
        self,
        fields: ListingSubmission,
        genre_ids: Iterable[int] = (),
    ) -> SubmissionResult:
        """
        Store a new listing for moderation.

        Any status on the incoming fields is ignored; the listing is always
        written as PENDING with no rejection reason.

        Args:
            fields: Submitted listing fields
            genre_ids: Selected genre ids (may be empty)

        Returns:
            SubmissionResult with the new listing id and the attached genre ids

        Raises:
            ValidationError: Bad input, nothing written
            StoreReadError: Genre catalog unreadable, nothing written
            StoreWriteError: Listing write failed, nothing written
            PartialWriteError: Listing stored, genre tagging failed
        """
        required = self.validate_required(fields)
        genres = await self.resolve_genres(genre_ids)

        try:
            listing = await self.listing_repo.create(
                creator_name=required["creator_name"],
                creator_contact=_clean_optional(fields.creator_contact),
                title=required["title"],
                video_url=URLService.normalize(required["video_url"]),
                source_url=required["video_url"],
                genre_label=self.build_genre_label(genres),
                memo=_clean_optional(fields.memo),
                status=ModerationStatus.PENDING,
                rejection_reason=None,
            )
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error("Listing write failed", error=str(e))
            raise StoreWriteError("Could not save the submission") from e

        # Captured now: a rollback below expires the instance
        listing_id = listing.id
        logger.info("Listing submitted", listing_id=str(listing_id), genre_count=len(genres))

        attached: list[int] = []
        if genres:
            try:
                attached = await self.listing_genre_repo.replace_for_listing(
                    listing_id, [genre.id for genre in genres]
                )
                await self.session.commit()
            except SQLAlchemyError as e:
                await self.session.rollback()
                logger.error(
                    "Genre tagging failed",
                    listing_id=str(listing_id),
                    step="genre_tagging",
                    error=str(e),
                )
                raise PartialWriteError(str(listing_id)) from e

        return SubmissionResult(listing_id=listing_id, genre_ids=attached)
