"""vidinfo: YouTube video metadata, stream and caption resolution."""

from .client import YoutubeClient
from .config import get_settings
from .exceptions import (
    InvalidVideoIdError,
    ParseError,
    ResolverError,
    VideoRequiresPurchaseError,
    VideoUnavailableError,
)

__all__ = [
    "InvalidVideoIdError",
    "ParseError",
    "ResolverError",
    "VideoRequiresPurchaseError",
    "VideoUnavailableError",
    "YoutubeClient",
    "get_settings",
]
