"""
Custom Exceptions

Application-specific exceptions with HTTP status codes and error codes.

Exception Hierarchy:
====================
    SwipeFeedException (base)
       │
       ├── AuthenticationError (401)      ← Missing/invalid moderator session
       ├── AuthorizationError (403)       ← Session lacks the moderator role
       ├── NotFoundError (404)            ← Resource not found
       │      └── ListingNotFoundError
       ├── ValidationError (400)          ← Bad or missing input, nothing written
       ├── ConflictError (409)            ← Operation conflicts with current state
       │      └── InvalidTransitionError
       ├── PartialWriteError (207)        ← Listing written, genre tagging failed
       └── ServiceUnavailableError (503)  ← Store unreachable or refused
              ├── StoreReadError
              └── StoreWriteError

Usage:
======
    from swipefeed.shared.core.exceptions import NotFoundError, ValidationError

    # Raise with automatic status code
    raise ListingNotFoundError(listing_id)
    # Results in: {"error": {"code": "NOT_FOUND", "message": "Listing with id 'abc' not found"}}

    # Raise with additional details
    raise ValidationError("Title is required", details={"field": "title"})

Exception Handling:
===================
    Exceptions are caught by the error handler middleware and converted to JSON:
    {
        "error": {
            "code": "NOT_FOUND",
            "message": "Listing with id 'abc-123' not found",
            "details": {}
        }
    }
"""

from typing import Any, Optional


class SwipeFeedException(Exception):
    """
    Base exception for all SwipeFeed application errors.

    All custom exceptions inherit from this class, providing:
    - HTTP status code mapping
    - Error code for programmatic handling
    - Optional details dictionary
    - Consistent JSON serialization

    Attributes:
        message: Human-readable error message
        status_code: HTTP status code (default 500)
        error_code: Machine-readable error code
        details: Additional error context
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.error_code = error_code or "INTERNAL_ERROR"
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert exception to dictionary for API response.

        Returns:
            Dictionary with error details for JSON response
        """
        return {
            "error": {
                "code": self.error_code,
                "message": self.message,
                "details": self.details,
            }
        }


# ═══════════════════════════════════════════════════════════════════════════════
# AUTHENTICATION & AUTHORIZATION ERRORS (401, 403)
# ═══════════════════════════════════════════════════════════════════════════════


class AuthenticationError(SwipeFeedException):
    """
    Authentication failed error (401 Unauthorized).

    Raised when:
    - Wrong moderator password
    - Missing, expired or malformed session token
    """

    def __init__(
        self,
        message: str = "Authentication failed",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=401,
            error_code="AUTHENTICATION_ERROR",
            details=details,
        )


class AuthorizationError(SwipeFeedException):
    """
    Authorization failed error (403 Forbidden).

    Raised when a valid token does not carry the moderator role.
    """

    def __init__(
        self,
        message: str = "Access denied",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=403,
            error_code="AUTHORIZATION_ERROR",
            details=details,
        )


# ═══════════════════════════════════════════════════════════════════════════════
# NOT FOUND ERRORS (404)
# ═══════════════════════════════════════════════════════════════════════════════


class NotFoundError(SwipeFeedException):
    """
    Resource not found error (404 Not Found).

    Base class for all "not found" errors with automatic message formatting.

    Example:
        raise NotFoundError("Listing", listing_id)
        # Message: "Listing with id 'abc-123' not found"
    """

    def __init__(
        self,
        resource: str,
        resource_id: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        message = f"{resource} not found"
        if resource_id:
            message = f"{resource} with id '{resource_id}' not found"
        super().__init__(
            message=message,
            status_code=404,
            error_code="NOT_FOUND",
            details=details,
        )


class ListingNotFoundError(NotFoundError):
    """Listing not found error."""

    def __init__(self, listing_id: str) -> None:
        super().__init__(resource="Listing", resource_id=listing_id)


# ═══════════════════════════════════════════════════════════════════════════════
# VALIDATION & CONFLICT ERRORS (400, 409)
# ═══════════════════════════════════════════════════════════════════════════════


class ValidationError(SwipeFeedException):
    """
    Validation error (400 Bad Request).

    Raised when input data fails validation. No store write has happened
    when this is raised; correcting the input and retrying is safe.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=400,
            error_code="VALIDATION_ERROR",
            details=details,
        )


class ConflictError(SwipeFeedException):
    """
    Resource conflict error (409 Conflict).

    Raised when operation conflicts with the current state of a resource.
    """

    def __init__(
        self,
        message: str = "Resource conflict",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=409,
            error_code="CONFLICT",
            details=details,
        )


class InvalidTransitionError(ConflictError):
    """Moderation status change that the state machine does not allow."""

    def __init__(self, current: str, target: str) -> None:
        super().__init__(
            message=f"Cannot move listing from '{current}' to '{target}'",
            details={"current_status": current, "target_status": target},
        )


# ═══════════════════════════════════════════════════════════════════════════════
# PARTIAL WRITE (207)
# ═══════════════════════════════════════════════════════════════════════════════


class PartialWriteError(SwipeFeedException):
    """
    Dependent write failed after the primary record was stored (207 Multi-Status).

    The listing exists in the store as pending; only the genre association
    write failed. Callers must not treat this as a total failure.
    """

    def __init__(
        self,
        listing_id: str,
        message: str = "Submission was received, but genre tagging failed",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        extra_details = details or {}
        extra_details["listing_id"] = listing_id
        extra_details["step"] = "genre_tagging"
        super().__init__(
            message=message,
            status_code=207,
            error_code="PARTIAL_WRITE",
            details=extra_details,
        )
        self.listing_id = listing_id


# ═══════════════════════════════════════════════════════════════════════════════
# STORE ERRORS (503)
# ═══════════════════════════════════════════════════════════════════════════════


class ServiceUnavailableError(SwipeFeedException):
    """
    Service temporarily unavailable error (503).

    Base for failures of the backing store.
    """

    def __init__(
        self,
        message: str = "Service temporarily unavailable",
        error_code: str = "SERVICE_UNAVAILABLE",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=503,
            error_code=error_code,
            details=details,
        )


class StoreReadError(ServiceUnavailableError):
    """
    Reading from the store failed.

    Callers keep whatever data they already show and may retry.
    """

    def __init__(
        self,
        message: str = "Could not read from the store",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message=message, error_code="STORE_READ_ERROR", details=details)


class StoreWriteError(ServiceUnavailableError):
    """
    Writing to the store failed or was refused.

    Nothing is assumed to have changed.
    """

    def __init__(
        self,
        message: str = "Could not write to the store",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message=message, error_code="STORE_WRITE_ERROR", details=details)
