"""
Business Logic Services

Services encapsulate business logic and coordinate between repositories
and domain rules.

Service Pattern:
================
    Handler → Service → Repository → Database

Services should:
- Contain business logic and validation
- Convert store rows into validated records
- Decide when a write is committed
- NOT handle HTTP concerns (that's for handlers)

Available Services:
===================
- URLService: Video link normalization
- TaxonomyService: Genre categories and genres
- SubmissionService: Creator submissions
- ModerationService: Pending queue and approve/reject
- FeedService: Published listings
- AuthService: Moderator sessions

Usage:
======
    from swipefeed.shared.services import SubmissionService

    service = SubmissionService(db)
    result = await service.submit(fields, genre_ids=[1, 3])
"""

from swipefeed.shared.services.url_service import URLService
from swipefeed.shared.services.taxonomy_service import TaxonomyService
from swipefeed.shared.services.submission_service import SubmissionService, SubmissionResult
from swipefeed.shared.services.moderation_service import ModerationService, ModerationOutcome
from swipefeed.shared.services.feed_service import FeedService
from swipefeed.shared.services.auth_service import AuthService

__all__ = [
    "URLService",
    "TaxonomyService",
    "SubmissionService",
    "SubmissionResult",
    "ModerationService",
    "ModerationOutcome",
    "FeedService",
    "AuthService",
]
