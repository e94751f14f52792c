"""
Core Module

Provides core functionality shared across the application:
- Structured logging
- Custom exceptions

Usage:
======
    from swipefeed.shared.core.logging import logger, get_logger
    from swipefeed.shared.core.exceptions import SwipeFeedException, NotFoundError

    logger.info("Starting operation", listing_id=listing_id)
"""

from swipefeed.shared.core.logging import (
    logger,
    get_logger,
    log_context,
    clear_log_context,
)
from swipefeed.shared.core.exceptions import (
    SwipeFeedException,
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    ListingNotFoundError,
    ValidationError,
    ConflictError,
    InvalidTransitionError,
    PartialWriteError,
    ServiceUnavailableError,
    StoreReadError,
    StoreWriteError,
)

__all__ = [
    # Logging
    "logger",
    "get_logger",
    "log_context",
    "clear_log_context",
    # Exceptions
    "SwipeFeedException",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "ListingNotFoundError",
    "ValidationError",
    "ConflictError",
    "InvalidTransitionError",
    "PartialWriteError",
    "ServiceUnavailableError",
    "StoreReadError",
    "StoreWriteError",
]
