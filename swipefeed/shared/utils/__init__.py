"""
Utilities Package

Common utility functions and helpers.

Contents:
=========
- security: JWT management for moderator sessions

Usage:
======
    from swipefeed.shared.utils.security import SecurityUtils
"""

from swipefeed.shared.utils.security import SecurityUtils

__all__ = [
    "SecurityUtils",
]
