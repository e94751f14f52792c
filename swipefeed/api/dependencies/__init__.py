"""
API Dependencies

FastAPI dependencies for injection into route handlers.

Dependencies:
=============
- Database: get_db(), DbSession
- Moderator session: get_current_moderator(), CurrentModerator
- Services: get_*_service() functions

Type Aliases:
=============
Type aliases provide cleaner route signatures:

    # Instead of this:
    async def handler(
        db: AsyncSession = Depends(get_db),
        moderator: ModeratorContext = Depends(get_current_moderator)
    ):

    # Write this:
    async def handler(db: DbSession, moderator: CurrentModerator):
"""

from swipefeed.api.dependencies.database import (
    get_db,
    DbSession,
)
from swipefeed.api.dependencies.auth import (
    get_current_moderator,
    get_moderator_token,
    CurrentModerator,
)

__all__ = [
    # Database
    "get_db",
    "DbSession",
    # Moderator session
    "get_current_moderator",
    "get_moderator_token",
    "CurrentModerator",
]
