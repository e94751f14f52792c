"""
Security Utilities

JWT token management for moderator sessions.

JWT Tokens:
===========
Uses PyJWT for JSON Web Token creation and validation.

Usage:
======
    from swipefeed.shared.utils.security import SecurityUtils

    # Create JWT
    token = SecurityUtils.create_access_token(
        data={"sub": "alice", "role": "moderator"},
        secret_key="secret",
        expires_delta=timedelta(hours=12)
    )

    # Decode JWT
    payload = SecurityUtils.decode_access_token(token, "secret")
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt


class SecurityUtils:
    """
    Security utilities for moderator sessions.

    Provides:
    - JWT token creation and validation
    """

    @staticmethod
    def create_access_token(
        data: dict,
        secret_key: str,
        expires_delta: Optional[timedelta] = None,
        algorithm: str = "HS256",
    ) -> str:
        """
        Create JWT access token.

        Args:
            data: Payload data to encode (e.g., sub, role)
            secret_key: Secret key for signing
            expires_delta: Token expiration time (default: 12 hours)
            algorithm: JWT algorithm (default: HS256)

        Returns:
            Encoded JWT token string
        """
        to_encode = data.copy()
        now = datetime.now(timezone.utc)

        to_encode.update({
            "exp": now + (expires_delta or timedelta(hours=12)),
            "iat": now,
        })

        return jwt.encode(to_encode, secret_key, algorithm=algorithm)

    @staticmethod
    def decode_access_token(
        token: str,
        secret_key: str,
        algorithm: str = "HS256",
    ) -> dict:
        """
        Decode and verify JWT token.

        Args:
            token: JWT token string
            secret_key: Secret key used for signing
            algorithm: JWT algorithm (default: HS256)

        Returns:
            Decoded token payload

        Raises:
            ValueError: If token is expired or invalid

        Example:
            try:
                payload = SecurityUtils.decode_access_token(token, settings.SECRET_KEY)
                subject = payload["sub"]
            except ValueError as e:
                raise AuthenticationError(str(e))
        """
        try:
            return jwt.decode(
                token,
                secret_key,
                algorithms=[algorithm],
            )
        except jwt.ExpiredSignatureError:
            raise ValueError("Token has expired")
        except jwt.InvalidTokenError as e:
            raise ValueError(f"Invalid token: {str(e)}")
