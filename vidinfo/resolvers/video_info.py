"""
Video info resolver: player context and author channel from the embed page,
raw video info from ``get_video_info``, extra details from the watch page, and
basic video metadata built on top of them.
"""

import json
import logging
import re
from datetime import date
from enum import Enum
from typing import Any

from ..exceptions import ParseError, VideoUnavailableError
from ..models.video import Channel, Statistics, ThumbnailSet, Video
from ..utils.helpers import (
    clean_html,
    count_or_none,
    date_or_none,
    float_or_none,
    int_or_none,
    split_query,
    str_or_none,
    traverse_obj,
)
from .base import BaseResolver

logger = logging.getLogger(__name__)

_BASE_URL = "https://www.youtube.com"
_VIDEO_INFO_URL = f"{_BASE_URL}/get_video_info"

# Count shown inside the like/dislike button of the watch page
_LIKE_COUNT_RE = r'like-button-renderer-{button}-button[^"]*"[^>]*>\s*<span[^>]*>\s*([\d,.\s]+?)\s*</span>'


class InfoAttempt(str, Enum):
    """States of the video info fetch; the value is the ``el`` parameter sent."""

    EMBEDDED = "embedded"
    DETAIL_PAGE = "detailpage"


class VideoInfo:
    """
    Read-only view over the key/value pairs returned by ``get_video_info``.

    ``get()`` returns optional values, ``require()`` raises ParseError naming
    the missing field.
    """

    def __init__(self, fields: dict[str, str]):
        self._fields = dict(fields)
        self._player_response: dict | None = None

    @classmethod
    def from_query(cls, raw: str) -> "VideoInfo":
        return cls(split_query(raw.strip()))

    def get(self, key: str, default: str | None = None) -> str | None:
        return self._fields.get(key, default)

    def require(self, key: str) -> str:
        value = self._fields.get(key)
        if value is None:
            raise ParseError(f"video info field {key!r}")
        return value

    def keys(self):
        return self._fields.keys()

    def __contains__(self, key: object) -> bool:
        return key in self._fields

    def __repr__(self):
        return f"<VideoInfo video_id={self.video_id!r} error_code={self.error_code}>"

    @property
    def video_id(self) -> str:
        return self._fields.get("video_id", "").strip()

    @property
    def error_code(self) -> int:
        return int_or_none(self._fields.get("errorcode")) or 0

    @property
    def error_reason(self) -> str | None:
        return str_or_none(self._fields.get("reason"))

    @property
    def player_response(self) -> dict[str, Any]:
        """The nested ``player_response`` JSON blob; empty when absent."""
        if self._player_response is None:
            raw = self._fields.get("player_response")
            if not raw:
                self._player_response = {}
            else:
                try:
                    self._player_response = json.loads(raw)
                except json.JSONDecodeError as e:
                    raise ParseError("player_response JSON") from e
        return self._player_response


class PlayerContext:
    """The player script URL and its signature timestamp."""

    def __init__(self, source_url: str, sts: str):
        self.source_url = source_url
        self.sts = sts

    def __repr__(self):
        return f"<PlayerContext source_url={self.source_url!r} sts={self.sts!r}>"


class WatchPage:
    """Details only the watch page carries."""

    def __init__(
        self,
        upload_date: date | None = None,
        description: str | None = None,
        like_count: int | None = None,
        dislike_count: int | None = None,
    ):
        self.upload_date = upload_date
        self.description = description
        self.like_count = like_count
        self.dislike_count = dislike_count

    def __repr__(self):
        return f"<WatchPage upload_date={self.upload_date} likes={self.like_count} dislikes={self.dislike_count}>"


class VideoInfoResolver(BaseResolver):
    """Fetches and validates raw video info."""

    async def _get_embed_config(self, video_id: str, name: str) -> dict[str, Any]:
        page = await self._download_webpage(
            f"{_BASE_URL}/embed/{video_id}",
            params={"disable_polymer": "true", "hl": "en"},
        )
        return self._search_json(r"['\"]PLAYER_CONFIG['\"]", page, name)

    async def get_player_context(self, video_id: str) -> PlayerContext:
        """Read the player script URL and ``sts`` from the embed page config."""
        config = await self._get_embed_config(video_id, "player context")

        source_url = str_or_none(traverse_obj(config, ("assets", "js")))
        sts = str_or_none(config.get("sts"))
        if not source_url or not sts:
            raise ParseError("player context")

        if source_url.startswith("//"):
            source_url = f"https:{source_url}"
        elif not source_url.startswith("http"):
            source_url = f"{_BASE_URL}{source_url}"

        return PlayerContext(source_url, sts)

    async def get_author_channel(self, video_id: str) -> Channel:
        """Read the uploader's channel from the embed page config."""
        config = await self._get_embed_config(video_id, "author channel")
        args = config.get("args") or {}

        channel_id = str_or_none(args.get("ucid"))
        if not channel_id:
            raise ParseError("author channel ID")

        logo_url = str_or_none(args.get("profile_picture"))
        if logo_url and logo_url.startswith("//"):
            logo_url = f"https:{logo_url}"

        return Channel(
            id=channel_id,
            title=str_or_none(args.get("expanded_title")) or str_or_none(args.get("author")),
            logo_url=logo_url,
        )

    async def get_watch_page(self, video_id: str) -> WatchPage:
        """Upload date, description and like/dislike counts from the watch page."""
        page = await self._download_webpage(
            f"{_BASE_URL}/watch",
            params={"v": video_id, "disable_polymer": "true", "hl": "en"},
        )

        description = self._search_regex(
            r'<p[^>]+id="eow-description"[^>]*>(.*?)</p>', page, "description", default="", flags=re.DOTALL
        )
        return WatchPage(
            upload_date=date_or_none(
                self._search_regex(
                    r'<meta[^>]+itemprop="datePublished"[^>]+content="([^"]+)"', page, "upload date", default=""
                )
            ),
            description=clean_html(description) or None,
            like_count=count_or_none(
                self._search_regex(_LIKE_COUNT_RE.format(button="like"), page, "like count", default="")
            ),
            dislike_count=count_or_none(
                self._search_regex(_LIKE_COUNT_RE.format(button="dislike"), page, "dislike count", default="")
            ),
        )

    async def fetch(self, video_id: str, attempt: InfoAttempt, sts: str = "") -> VideoInfo:
        """Single ``get_video_info`` request for the given embedding context."""
        raw = await self._download_webpage(
            _VIDEO_INFO_URL,
            params={
                "video_id": video_id,
                "el": attempt.value,
                "sts": sts,
                # Many videos return nothing without an eurl
                "eurl": f"https://youtube.googleapis.com/v/{video_id}",
                "hl": "en",
            },
        )
        return VideoInfo.from_query(raw)

    async def resolve(self, video_id: str, sts: str = "") -> VideoInfo:
        """
        Fetch video info with the embedded/detail-page fallback.

        EMBEDDED: an empty ``video_id`` field means the video does not exist.
        When ``sts`` is given the caller wants streams, so a non-zero error
        code moves to DETAIL_PAGE, where any error code is final.

        Raises:
            VideoUnavailableError: with the native code and reason of the
                response that failed.
        """
        attempt = InfoAttempt.EMBEDDED
        while True:
            info = await self.fetch(video_id, attempt, sts)

            if attempt is InfoAttempt.EMBEDDED:
                if not info.video_id:
                    raise VideoUnavailableError(video_id, info.error_code, info.error_reason)
                if sts and info.error_code != 0:
                    logger.info(
                        f"Video {video_id} reported error {info.error_code} for el=embedded, "
                        "retrying with el=detailpage"
                    )
                    attempt = InfoAttempt.DETAIL_PAGE
                    continue
                return info

            if info.error_code != 0:
                raise VideoUnavailableError(video_id, info.error_code, info.error_reason)
            return info


def parse_video(video_id: str, info: VideoInfo, watch_page: WatchPage | None = None) -> Video:
    """
    Build video metadata from info fields, falling back to
    player_response.videoDetails. Upload date, description and like counts
    come from the watch page when given.
    """
    watch_page = watch_page or WatchPage()
    details = info.player_response.get("videoDetails") or {}

    keywords_raw = info.get("keywords")
    if keywords_raw:
        keywords = [k.strip() for k in keywords_raw.split(",") if k.strip()]
    else:
        keywords = list(details.get("keywords") or [])

    view_count = int_or_none(info.get("view_count") or details.get("viewCount"))
    statistics = Statistics(
        view_count=view_count,
        like_count=watch_page.like_count,
        dislike_count=watch_page.dislike_count,
    )

    average_rating = float_or_none(info.get("avg_rating") or details.get("averageRating"))
    if average_rating is None:
        average_rating = statistics.average_rating

    return Video(
        id=video_id,
        author=str_or_none(info.get("author")) or str_or_none(details.get("author")),
        upload_date=watch_page.upload_date,
        title=str_or_none(info.get("title")) or str_or_none(details.get("title")),
        description=watch_page.description or str_or_none(details.get("shortDescription")),
        duration=int_or_none(info.get("length_seconds") or details.get("lengthSeconds")),
        keywords=keywords,
        view_count=view_count,
        average_rating=average_rating,
        statistics=statistics,
        loudness=float_or_none(info.get("loudness")),
        thumbnails=ThumbnailSet.for_video(video_id),
    )
