"""
Moderator session schemas.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class ModeratorLogin(BaseModel):
    """Request body for opening a moderator session."""

    password: str = Field(description="Shared moderator password")
    name: Optional[str] = Field(
        None,
        max_length=100,
        description="Operator name recorded in logs",
    )


class ModeratorSessionResponse(BaseModel):
    """Issued moderator session token."""

    access_token: str
    token_type: str = "bearer"
    expires_in: int  # seconds


class ModeratorContext(BaseModel):
    """
    Who is acting in a moderation request.

    Passed explicitly into the moderation service; used for log context,
    never for authorization decisions.
    """

    subject: str
    issued_at: Optional[datetime] = None
