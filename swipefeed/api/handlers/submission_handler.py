"""
Submission Handler

Accepts creator submissions.

ARCHITECTURE:
=============
    Handler → Service → Repository → Model

Errors raised by the service are rendered by the error handler middleware:
400 for bad input, 503 when the store fails, and 207 when the listing was
stored but genre tagging failed.
"""

from fastapi import APIRouter, Depends, status

from swipefeed.shared.schemas.common import error_responses
from swipefeed.shared.schemas.listing import SubmissionResponse, SubmitListingRequest
from swipefeed.shared.services.submission_service import SubmissionService
from swipefeed.api.dependencies.services import get_submission_service


router = APIRouter()


@router.post(
    "",
    response_model=SubmissionResponse,
    status_code=status.HTTP_201_CREATED,
    # 207: listing stored, genre tagging failed; details.listing_id names it
    responses=error_responses(207, 400, 503),
)
async def submit_listing(
    request: SubmitListingRequest,
    submission_service: SubmissionService = Depends(get_submission_service),
):
    """
    Submit a video for moderation.

    The listing is stored as pending whatever status the body carries, and
    its link is normalized to the embeddable form.
    """
    result = await submission_service.submit(request, request.genre_ids)

    return SubmissionResponse(
        listing_id=result.listing_id,
        genre_ids=result.genre_ids,
        message=result.message,
    )
