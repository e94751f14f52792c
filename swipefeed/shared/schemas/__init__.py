"""
Pydantic Schemas

Request, response and store-record models.

Schema Categories:
==================
- common: Base schema, error and health responses
- listing: Submission, listing records, moderation and feed schemas
- taxonomy: Genre categories and genres
- auth: Moderator session schemas

Usage:
======
    from swipefeed.shared.schemas.listing import ListingRecord, FeedEntry
    from swipefeed.shared.schemas.common import ErrorResponse
"""

from swipefeed.shared.schemas.common import (
    BaseSchema,
    ErrorDetail,
    ErrorResponse,
    error_responses,
    HealthResponse,
)
from swipefeed.shared.schemas.listing import (
    ListingSubmission,
    SubmitListingRequest,
    SubmissionResponse,
    ListingRecord,
    ListingDetail,
    RejectRequest,
    ModerationResponse,
    PendingQueueResponse,
    FeedEntry,
    FeedResponse,
)
from swipefeed.shared.schemas.taxonomy import (
    GenreCategoryRecord,
    GenreRecord,
    CategoryWithGenres,
    TaxonomyResponse,
)
from swipefeed.shared.schemas.auth import (
    ModeratorLogin,
    ModeratorSessionResponse,
    ModeratorContext,
)

__all__ = [
    # Common
    "BaseSchema",
    "ErrorDetail",
    "ErrorResponse",
    "error_responses",
    "HealthResponse",
    # Listing
    "ListingSubmission",
    "SubmitListingRequest",
    "SubmissionResponse",
    "ListingRecord",
    "ListingDetail",
    "RejectRequest",
    "ModerationResponse",
    "PendingQueueResponse",
    "FeedEntry",
    "FeedResponse",
    # Taxonomy
    "GenreCategoryRecord",
    "GenreRecord",
    "CategoryWithGenres",
    "TaxonomyResponse",
    # Auth
    "ModeratorLogin",
    "ModeratorSessionResponse",
    "ModeratorContext",
]
