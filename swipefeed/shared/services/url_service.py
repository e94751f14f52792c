"""
URL service - video link normalization.

Turns whatever link a creator pastes into the embeddable form the feed
plays directly. Pure and total: unrecognized input comes back unchanged.
"""

import re


class URLService:
    """Service for URL operations."""

    EMBED_TEMPLATE = "https://www.youtube.com/embed/{video_id}?autoplay=0&mute=0"

    # First match wins
    EMBED_PATTERN = re.compile(r"youtube\.com/embed/[A-Za-z0-9_-]{6,}")
    SHORT_LINK_PATTERN = re.compile(r"youtu\.be/([A-Za-z0-9_-]{6,})")
    VIDEO_PARAM_PATTERN = re.compile(r"[?&]v=([A-Za-z0-9_-]{6,})")

    @staticmethod
    def embed_url(video_id: str) -> str:
        """Canonical embeddable URL for a video id."""
        return URLService.EMBED_TEMPLATE.format(video_id=video_id)

    @staticmethod
    def normalize(url: str) -> str:
        """
        Normalize a video link to its canonical embeddable form.

        - Already an embed link: returned as is
        - Short link (youtu.be/<id>): rewritten to the embed form
        - Any link with a v=<id> query parameter: rewritten to the embed form
        - Anything else: returned as is

        Ids must be at least 6 characters of [A-Za-z0-9_-]. The embed form
        matches the first rule, so normalize(normalize(x)) == normalize(x).
        """
        if URLService.EMBED_PATTERN.search(url):
            return url

        match = URLService.SHORT_LINK_PATTERN.search(url)
        if match:
            return URLService.embed_url(match.group(1))

        match = URLService.VIDEO_PARAM_PATTERN.search(url)
        if match:
            return URLService.embed_url(match.group(1))

        return url
