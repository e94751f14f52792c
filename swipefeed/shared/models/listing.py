"""
Listing Entity Model

One submitted video entry awaiting or having completed moderation.

Lifecycle:
1. Creator submits → Listing created (status=PENDING, rejection_reason=NULL)
2. Moderator approves → status=APPROVED, rejection_reason cleared
3. Moderator rejects → status=REJECTED, rejection_reason set (or NULL)
4. Either decision can be reversed later; listings are never deleted

Only APPROVED listings appear in the public feed.

SAMPLE LISTING RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ 550e8400-e29b-41d4-a716-446655440000                      │
│ creator_name     │ "@creator"                                                 │
│ title            │ "Morning routine"                                          │
│ video_url        │ "https://www.youtube.com/embed/abcdef12345?autoplay=0..."  │
│ source_url       │ "https://youtu.be/abcdef12345"                            │
│ genre_label      │ "Office / Comedy"                                          │
│ status           │ pending                                                    │
│ rejection_reason │ NULL                                                       │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from typing import TYPE_CHECKING, Optional
import uuid

from sqlalchemy import CheckConstraint, Enum as SQLEnum, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from swipefeed.shared.models.base import Base, TimestampMixin
from swipefeed.shared.models.enums import ModerationStatus


if TYPE_CHECKING:
    from swipefeed.shared.models.listing_genre import ListingGenre


moderation_status_type = SQLEnum(
    ModerationStatus,
    name="moderation_status",
    values_callable=lambda enum_cls: [member.value for member in enum_cls],
    validate_strings=True,
)


class Listing(Base, TimestampMixin):
    """
    Listing model - a submitted video and its moderation state.

    Attributes:
        id: Unique identifier (UUID v4)
        creator_name: Creator display name (required)
        creator_contact: Optional contact, free text (usually an e-mail)
        title: Video title (required)
        video_url: Canonical embeddable URL (normalized at intake)
        source_url: URL exactly as the creator submitted it
        genre_label: Legacy free-text label built from the selected genres
        memo: Optional note addressed to moderators
        status: Moderation status
        rejection_reason: Why the listing was rejected; NULL unless REJECTED

    Relationships:
        genre_links: Association rows to the selected genres
    """

    __tablename__ = "listings"
    __table_args__ = (
        CheckConstraint(
            "rejection_reason IS NULL OR status = 'rejected'",
            name="rejection_reason_only_when_rejected",
        ),
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # PRIMARY KEY
    # ═══════════════════════════════════════════════════════════════════════════

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # CONTENT
    # ═══════════════════════════════════════════════════════════════════════════

    creator_name: Mapped[str] = mapped_column(Text, nullable=False)
    creator_contact: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    video_url: Mapped[str] = mapped_column(Text, nullable=False)
    source_url: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    genre_label: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    memo: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # ═══════════════════════════════════════════════════════════════════════════
    # MODERATION
    # ═══════════════════════════════════════════════════════════════════════════

    status: Mapped[ModerationStatus] = mapped_column(
        moderation_status_type,
        nullable=False,
        default=ModerationStatus.PENDING,
        index=True,
    )

    rejection_reason: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # ═══════════════════════════════════════════════════════════════════════════
    # RELATIONSHIPS
    # ═══════════════════════════════════════════════════════════════════════════

    genre_links: Mapped[list["ListingGenre"]] = relationship(
        "ListingGenre",
        back_populates="listing",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<Listing(id={self.id}, status={self.status})>"
