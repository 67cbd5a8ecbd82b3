"""
YoutubeClient - resolves video metadata, media streams and caption tracks.
"""

import asyncio
import logging
from collections.abc import Awaitable
from typing import TypeVar

from .config import Settings, get_settings
from .core.http_client import HTTPClient
from .core.player_source import PlayerSourceCache
from .core.video_id import validate_video_id
from .exceptions import InvalidVideoIdError
from .models.streams import MediaStreamInfoSet
from .models.video import Channel, ClosedCaptionTrackInfo, Video
from .resolvers.captions import parse_caption_tracks
from .resolvers.streams import StreamResolver
from .resolvers.video_info import VideoInfo, VideoInfoResolver, parse_video

logger = logging.getLogger(__name__)

T = TypeVar("T")


class YoutubeClient:
    """
    Entry point for resolving YouTube videos.

    Owns the HTTP client (unless one is passed in) and the compiled cipher
    cache, which lives as long as the client. Use as an async context
    manager or call close() when done.
    """

    def __init__(self, http: HTTPClient | None = None, settings: Settings | None = None):
        self._settings = settings or get_settings()
        self._owns_http = http is None
        self._http = http or HTTPClient(self._settings)

        self.player_cache = PlayerSourceCache(self._http.get_text)
        self._video_info = VideoInfoResolver(self._http)
        self._streams = StreamResolver(
            self._http,
            self.player_cache,
            known_itags_only=self._settings.known_itags_only,
        )

    async def get_video_info(self, video_id: str, sts: str = "") -> VideoInfo:
        """Raw video info. Passing ``sts`` enables the detail-page fallback."""
        self._ensure_valid(video_id)
        return await self._with_deadline(self._video_info.resolve(video_id, sts))

    async def get_video(self, video_id: str) -> Video:
        """Metadata: title, author, upload date, description, duration, keywords, statistics."""
        self._ensure_valid(video_id)
        return await self._with_deadline(self._resolve_video(video_id))

    async def get_video_author_channel(self, video_id: str) -> Channel:
        """The channel that uploaded the video."""
        self._ensure_valid(video_id)
        return await self._with_deadline(self._resolve_author_channel(video_id))

    async def get_media_streams(self, video_id: str) -> MediaStreamInfoSet:
        """All muxed, audio and video streams, best first."""
        self._ensure_valid(video_id)
        return await self._with_deadline(self._resolve_media_streams(video_id))

    async def get_caption_tracks(self, video_id: str) -> list[ClosedCaptionTrackInfo]:
        self._ensure_valid(video_id)
        info = await self._with_deadline(self._video_info.resolve(video_id))
        return parse_caption_tracks(info)

    async def _resolve_video(self, video_id: str) -> Video:
        info = await self._video_info.resolve(video_id)
        watch_page = await self._video_info.get_watch_page(video_id)
        return parse_video(video_id, info, watch_page)

    async def _resolve_author_channel(self, video_id: str) -> Channel:
        # Video info first, so a missing video raises VideoUnavailableError
        await self._video_info.resolve(video_id)
        return await self._video_info.get_author_channel(video_id)

    async def _resolve_media_streams(self, video_id: str) -> MediaStreamInfoSet:
        context = await self._video_info.get_player_context(video_id)
        logger.debug(f"Player context for {video_id}: {context!r}")
        info = await self._video_info.resolve(video_id, context.sts)
        return await self._streams.resolve(info, context.source_url)

    async def _with_deadline(self, operation: Awaitable[T]) -> T:
        """Await an operation under the configured overall deadline, if any."""
        timeout = self._settings.resolve_timeout
        if timeout is None:
            return await operation
        return await asyncio.wait_for(operation, timeout)

    @staticmethod
    def _ensure_valid(video_id: str):
        if not validate_video_id(video_id):
            raise InvalidVideoIdError(video_id)

    async def close(self):
        if self._owns_http:
            await self._http.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *args):
        await self.close()
