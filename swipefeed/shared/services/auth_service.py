"""
Moderator Session Service

Issues moderator session tokens against the shared moderator password.

There are no moderator accounts: one password, configured as
ADMIN_PASSWORD, opens a session. The optional name only labels the
session in logs.

Usage:
======
    from swipefeed.shared.services.auth_service import AuthService

    token, expires_in = AuthService().open_moderator_session(password, name="alice")
    context = AuthService().verify_moderator_token(token)
"""

import secrets
from datetime import datetime, timedelta, timezone
from typing import Optional, Tuple

from swipefeed.config.settings import Settings, settings as default_settings
from swipefeed.shared.core.exceptions import AuthenticationError, AuthorizationError
from swipefeed.shared.core.logging import logger
from swipefeed.shared.schemas.auth import ModeratorContext
from swipefeed.shared.utils.security import SecurityUtils


MODERATOR_ROLE = "moderator"
DEFAULT_SUBJECT = "moderator"


class AuthService:
    """
    Service for moderator sessions.

    Handles:
    - Password check (constant-time) and token issue
    - Token verification into a ModeratorContext
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.settings = settings or default_settings

    def open_moderator_session(
        self,
        password: str,
        name: Optional[str] = None,
    ) -> Tuple[str, int]:
        """
        Check the moderator password and issue a session token.

        Args:
            password: Password as typed by the moderator
            name: Optional operator name, becomes the token subject

        Returns:
            Tuple of (access_token, expires_in_seconds)

        Raises:
            AuthenticationError: If login is disabled or the password is wrong
        """
        expected = self.settings.ADMIN_PASSWORD
        if not expected:
            raise AuthenticationError("Moderator password is not configured")

        if not secrets.compare_digest(password.encode("utf-8"), expected.encode("utf-8")):
            logger.warning("Moderator login failed")
            raise AuthenticationError("Invalid moderator password")

        subject = (name or "").strip() or DEFAULT_SUBJECT
        expire_minutes = self.settings.MODERATOR_SESSION_EXPIRE_MINUTES

        access_token = SecurityUtils.create_access_token(
            data={"sub": subject, "role": MODERATOR_ROLE},
            secret_key=self.settings.SECRET_KEY,
            expires_delta=timedelta(minutes=expire_minutes),
            algorithm=self.settings.JWT_ALGORITHM,
        )
        logger.info("Moderator session opened", moderator=subject)

        return access_token, expire_minutes * 60  # Convert to seconds

    def verify_moderator_token(self, token: str) -> ModeratorContext:
        """
        Decode a session token into the moderator context.

        Raises:
            AuthenticationError: If the token is expired, malformed or has no subject
            AuthorizationError: If the token lacks the moderator role
        """
        try:
            payload = SecurityUtils.decode_access_token(
                token,
                self.settings.SECRET_KEY,
                algorithm=self.settings.JWT_ALGORITHM,
            )
        except ValueError as e:
            raise AuthenticationError(str(e)) from e

        subject = payload.get("sub")
        if not subject:
            raise AuthenticationError("Invalid token payload")
        if payload.get("role") != MODERATOR_ROLE:
            raise AuthorizationError("Moderator role required")

        issued_at = payload.get("iat")
        return ModeratorContext(
            subject=subject,
            issued_at=datetime.fromtimestamp(issued_at, tz=timezone.utc) if issued_at else None,
        )
