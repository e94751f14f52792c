"""
Service Dependencies

FastAPI dependencies for service injection.

Services are created per-request with the request's db session.

Usage:
======
    from swipefeed.api.dependencies.services import get_submission_service

    @router.post("")
    async def submit(
        data: SubmitListingRequest,
        service: SubmissionService = Depends(get_submission_service),
    ):
        return await service.submit(data, data.genre_ids)
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from swipefeed.api.dependencies.auth import CurrentModerator
from swipefeed.api.dependencies.database import get_db
from swipefeed.shared.services.auth_service import AuthService
from swipefeed.shared.services.feed_service import FeedService
from swipefeed.shared.services.moderation_service import ModerationService
from swipefeed.shared.services.submission_service import SubmissionService
from swipefeed.shared.services.taxonomy_service import TaxonomyService


async def get_auth_service() -> AuthService:
    """Dependency to get AuthService instance."""
    return AuthService()


async def get_taxonomy_service(
    db: AsyncSession = Depends(get_db),
) -> TaxonomyService:
    """
    Dependency to get TaxonomyService instance.

    Creates a new service instance per request with the request's db session.
    """
    return TaxonomyService(db)


async def get_submission_service(
    db: AsyncSession = Depends(get_db),
) -> SubmissionService:
    """Dependency to get SubmissionService instance."""
    return SubmissionService(db)


async def get_feed_service(
    db: AsyncSession = Depends(get_db),
) -> FeedService:
    """Dependency to get FeedService instance."""
    return FeedService(db)


async def get_moderation_service(
    moderator: CurrentModerator,
    db: AsyncSession = Depends(get_db),
) -> ModerationService:
    """
    Dependency to get ModerationService instance.

    Requires a verified moderator session; the context is handed to the
    service for logging.
    """
    return ModerationService(db, moderator=moderator)
