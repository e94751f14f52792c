"""
Moderator Session Dependencies

FastAPI dependencies that turn a bearer token into a ModeratorContext.

Dependency Hierarchy:
=====================
    get_moderator_token()     ← Extract bearer token from header
           │
           ▼
    get_current_moderator()   ← Verify token, require moderator role

Type Aliases:
=============
    CurrentModerator - Verified moderator context

Usage:
======
    from swipefeed.api.dependencies.auth import CurrentModerator

    @router.get("/pending")
    async def list_pending(moderator: CurrentModerator):
        ...
"""

from typing import Annotated, Optional

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from swipefeed.shared.core.exceptions import AuthenticationError
from swipefeed.shared.core.logging import log_context
from swipefeed.shared.schemas.auth import ModeratorContext
from swipefeed.shared.services.auth_service import AuthService


# Missing credentials are reported as our own AuthenticationError
security = HTTPBearer(auto_error=False)


async def get_moderator_token(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(security)] = None,
) -> str:
    """
    Extract the bearer token from the Authorization header.

    Raises:
        AuthenticationError: If the header is missing
    """
    if not credentials or not credentials.credentials:
        raise AuthenticationError("Authorization header required")
    return credentials.credentials


async def get_current_moderator(
    token: Annotated[str, Depends(get_moderator_token)],
) -> ModeratorContext:
    """
    Verify the session token and return the moderator context.

    Raises:
        AuthenticationError: If the token is invalid or expired
        AuthorizationError: If the token lacks the moderator role
    """
    moderator = AuthService().verify_moderator_token(token)
    log_context(moderator=moderator.subject)
    return moderator


# ═══════════════════════════════════════════════════════════════════════════════
# TYPE ALIASES
# ═══════════════════════════════════════════════════════════════════════════════

CurrentModerator = Annotated[ModeratorContext, Depends(get_current_moderator)]
