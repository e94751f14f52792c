"""
Moderator Session Handler

Opens moderator sessions against the shared moderator password.

Handlers should ONLY:
- Parse HTTP requests
- Call service methods
- Format HTTP responses

A wrong password surfaces as AuthenticationError (401) through the error
handler middleware.
"""

from fastapi import APIRouter, Depends

from swipefeed.shared.schemas.auth import ModeratorLogin, ModeratorSessionResponse
from swipefeed.shared.services.auth_service import AuthService
from swipefeed.api.dependencies.services import get_auth_service


router = APIRouter()


@router.post("/session", response_model=ModeratorSessionResponse)
async def open_session(
    credentials: ModeratorLogin,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Exchange the moderator password for a session token.

    Args:
        credentials: Password and optional operator name
        auth_service: Injected AuthService instance

    Returns:
        ModeratorSessionResponse with a bearer token
    """
    access_token, expires_in = auth_service.open_moderator_session(
        password=credentials.password,
        name=credentials.name,
    )
    return ModeratorSessionResponse(access_token=access_token, expires_in=expires_in)
