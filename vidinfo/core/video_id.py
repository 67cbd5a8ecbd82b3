"""
YouTube video ID validation and extraction from URLs.
"""

import re

_VIDEO_ID_RE = re.compile(r"[a-zA-Z0-9_-]{11}")

_VIDEO_URL_PATTERNS = [
    re.compile(p, re.IGNORECASE)
    for p in (
        r"(?:https?://)?(?:www\.|m\.|music\.)?youtube\.com/watch\?(?:.*?&)?v=(?P<id>[^&#/?]+)",
        r"(?:https?://)?youtu\.be/(?P<id>[^&#/?]+)",
        r"(?:https?://)?(?:www\.)?youtube\.com/embed/(?P<id>[^&#/?]+)",
        r"(?:https?://)?(?:www\.)?youtube\.com/v/(?P<id>[^&#/?]+)",
        r"(?:https?://)?(?:www\.)?youtube\.com/shorts/(?P<id>[^&#/?]+)",
    )
]


def validate_video_id(video_id: str) -> bool:
    """Check that *video_id* has the shape of a YouTube video ID."""
    if not video_id:
        return False
    return _VIDEO_ID_RE.fullmatch(video_id) is not None


def parse_video_id(url: str) -> str | None:
    """Extract a valid video ID from a YouTube URL, or None."""
    if not url:
        return None
    for pattern in _VIDEO_URL_PATTERNS:
        match = pattern.search(url.strip())
        if match and validate_video_id(match.group("id")):
            return match.group("id")
    return None
