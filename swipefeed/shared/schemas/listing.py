"""
Listing-related Pydantic schemas.

ListingRecord is the validation step at the store boundary: every listing
row a service hands out has been through it.
"""

from datetime import datetime
from typing import Any, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, model_validator

from swipefeed.shared.models.enums import ModerationStatus
from swipefeed.shared.schemas.common import BaseSchema


# ═══════════════════════════════════════════════════════════════════════════════
# INTAKE
# ═══════════════════════════════════════════════════════════════════════════════


class ListingSubmission(BaseModel):
    """
    Fields a creator submits.

    Required fields are plain strings here so the intake service can report
    which one is missing; a `status` sent by the client is accepted and
    ignored (new listings are always pending).
    """

    model_config = ConfigDict(extra="ignore")

    creator_name: str = Field(default="", description="Creator display name (required)")
    creator_contact: Optional[str] = Field(None, description="Optional contact, e.g. e-mail")
    title: str = Field(default="", description="Video title (required)")
    video_url: str = Field(default="", description="Video link (required)")
    memo: Optional[str] = Field(None, description="Note for moderators")
    # Any shape is accepted so a stray status never blocks a submission
    status: Any = Field(None, description="Ignored; listings start pending")


class SubmitListingRequest(ListingSubmission):
    """Request body for a new submission."""

    genre_ids: list[int] = Field(default_factory=list, description="Selected genre ids")


class SubmissionResponse(BaseModel):
    """Response after a successful submission."""

    listing_id: UUID
    genre_ids: list[int]
    message: str


# ═══════════════════════════════════════════════════════════════════════════════
# STORE RECORDS
# ═══════════════════════════════════════════════════════════════════════════════


class ListingRecord(BaseSchema):
    """
    A listing as read from the store.

    Rows with an empty creator name, title or URL fail validation. A
    rejection reason on a listing that is not rejected is dropped.
    """

    id: UUID
    creator_name: str = Field(min_length=1)
    creator_contact: Optional[str] = None
    title: str = Field(min_length=1)
    video_url: str = Field(min_length=1)
    source_url: Optional[str] = None
    genre_label: Optional[str] = None
    memo: Optional[str] = None
    status: ModerationStatus
    rejection_reason: Optional[str] = None
    created_at: datetime
    updated_at: Optional[datetime] = None

    @model_validator(mode="after")
    def _clear_stale_rejection_reason(self) -> "ListingRecord":
        if self.status != ModerationStatus.REJECTED and self.rejection_reason is not None:
            self.rejection_reason = None
        return self


class ListingDetail(ListingRecord):
    """A listing together with its associated genre ids."""

    genre_ids: list[int] = Field(default_factory=list)


# ═══════════════════════════════════════════════════════════════════════════════
# MODERATION
# ═══════════════════════════════════════════════════════════════════════════════


class RejectRequest(BaseModel):
    """Request body for rejecting a listing."""

    reason: str = Field(description="Rejection reason (required); blank leaves it unset")


class ModerationResponse(BaseModel):
    """
    Outcome of a moderation decision plus the reloaded pending queue.

    pending_reloaded is false when the decision was saved but the queue
    could not be read back; `pending` is then empty and should be refetched.
    """

    listing: ListingRecord
    pending: list[ListingRecord]
    pending_reloaded: bool = True


class PendingQueueResponse(BaseModel):
    """Listings awaiting review, newest first."""

    items: list[ListingRecord]
    total: int


# ═══════════════════════════════════════════════════════════════════════════════
# FEED
# ═══════════════════════════════════════════════════════════════════════════════


class FeedEntry(BaseModel):
    """One published listing as shown in the feed."""

    position: int = Field(description="1-based position within this response")
    id: UUID
    title: str
    creator_name: str
    genre_label: Optional[str] = None
    video_url: str
    created_at: datetime


class FeedResponse(BaseModel):
    """Published listings, newest first. An empty list is a valid feed."""

    items: list[FeedEntry]
    total: int

    @classmethod
    def from_entries(cls, entries: list[FeedEntry]) -> "FeedResponse":
        return cls(items=entries, total=len(entries))

