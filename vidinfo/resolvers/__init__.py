"""
Resolvers for the pieces of a YouTube video: raw video info, streams and
caption tracks.
"""

from .base import BaseResolver
from .captions import parse_caption_tracks
from .streams import StreamResolver
from .video_info import (
    InfoAttempt,
    PlayerContext,
    VideoInfo,
    VideoInfoResolver,
    WatchPage,
    parse_video,
)

__all__ = [
    "BaseResolver",
    "InfoAttempt",
    "PlayerContext",
    "StreamResolver",
    "VideoInfo",
    "VideoInfoResolver",
    "WatchPage",
    "parse_caption_tracks",
    "parse_video",
]
