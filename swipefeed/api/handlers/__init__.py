"""
API Handlers

Route handlers for the SwipeFeed API.

Handlers follow the pattern:
- Parse HTTP requests
- Call service methods
- Format HTTP responses

All business logic is delegated to the service layer.
"""

from swipefeed.api.handlers import (
    auth_handler,
    feed_handler,
    health_handler,
    moderation_handler,
    submission_handler,
    taxonomy_handler,
)

__all__ = [
    "auth_handler",
    "feed_handler",
    "health_handler",
    "moderation_handler",
    "submission_handler",
    "taxonomy_handler",
]
