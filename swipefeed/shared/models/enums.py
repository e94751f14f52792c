"""
Enums used across the application.
"""

from enum import Enum


class ModerationStatus(str, Enum):
    """
    Moderation lifecycle state of a listing.

    Every listing starts as PENDING. Moderators move it to APPROVED or
    REJECTED and may reverse either decision later; no state is terminal.
    """

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


# Allowed status changes. Nothing ever moves back to PENDING; re-applying the
# current decision is allowed (approve twice, or reject again with a new reason).
MODERATION_TRANSITIONS: dict[ModerationStatus, frozenset[ModerationStatus]] = {
    ModerationStatus.PENDING: frozenset({ModerationStatus.APPROVED, ModerationStatus.REJECTED}),
    ModerationStatus.APPROVED: frozenset({ModerationStatus.APPROVED, ModerationStatus.REJECTED}),
    ModerationStatus.REJECTED: frozenset({ModerationStatus.APPROVED, ModerationStatus.REJECTED}),
}


def can_transition(current: ModerationStatus, target: ModerationStatus) -> bool:
    """Check whether a listing in `current` may be moved to `target`."""
    return target in MODERATION_TRANSITIONS.get(current, frozenset())
