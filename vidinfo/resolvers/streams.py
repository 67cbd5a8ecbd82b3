"""
Stream descriptor resolver.

Turns the three stream encodings found in video info into one
MediaStreamInfoSet:

- ``url_encoded_fmt_stream_map``: muxed streams, sized with a HEAD request
- ``adaptive_fmts``: audio-only and video-only streams
- ``dashmpd``: DASH manifest, fetched and parsed separately

Within a kind the last entry seen for an itag wins.
"""

import logging

from ..core.dash_manifest import DashRepresentation, parse_manifest
from ..core.http_client import HTTPClient
from ..core.player_source import PlayerSourceCache
from ..exceptions import ParseError, VideoRequiresPurchaseError
from ..models.enums import StreamKind, VideoQuality
from ..models.itags import get_itag_info, is_known_itag
from ..models.streams import MediaStreamInfoSet, StreamDescriptor, VideoResolution
from ..utils.helpers import (
    int_or_none,
    parse_size,
    set_query_parameter,
    set_route_parameter,
    split_query,
)
from .base import BaseResolver
from .video_info import VideoInfo

logger = logging.getLogger(__name__)

# HEAD statuses meaning the muxed stream no longer exists
_GONE_STATUS_CODES = {404, 410}

_DASH_SIGNATURE_RE = r"/s/(.*?)(?:/|$)"


class StreamResolver(BaseResolver):
    """Resolves stream descriptors, deciphering signatures through the player cache."""

    def __init__(
        self,
        http: HTTPClient,
        player_cache: PlayerSourceCache,
        known_itags_only: bool = False,
    ):
        super().__init__(http)
        self._player_cache = player_cache
        self._known_itags_only = known_itags_only

    async def resolve(self, info: VideoInfo, player_source_url: str) -> MediaStreamInfoSet:
        """
        Build the stream set for a video.

        Raises:
            VideoRequiresPurchaseError: the video is paid content.
            ParseError: a required field, the decipher function or a content
                length is missing.
            httpx.HTTPStatusError: a muxed HEAD request or the manifest fetch failed.
        """
        if "ypc_vid" in info:
            raise VideoRequiresPurchaseError(info.video_id, info.get("ypc_vid") or "")

        streams: dict[StreamKind, dict[int, StreamDescriptor]] = {kind: {} for kind in StreamKind}

        muxed_encoded = info.get("url_encoded_fmt_stream_map")
        if muxed_encoded:
            for entry in _split_entries(muxed_encoded):
                descriptor = await self._resolve_muxed(entry, player_source_url)
                if descriptor is not None:
                    streams[StreamKind.MUXED][descriptor.itag] = descriptor

        adaptive_encoded = info.get("adaptive_fmts")
        if adaptive_encoded:
            for entry in _split_entries(adaptive_encoded):
                descriptor = await self._resolve_adaptive(entry, player_source_url)
                if descriptor is not None:
                    streams[descriptor.kind][descriptor.itag] = descriptor

        dash_manifest_url = info.get("dashmpd")
        if dash_manifest_url:
            for descriptor in await self._resolve_dash(dash_manifest_url, player_source_url):
                streams[descriptor.kind][descriptor.itag] = descriptor

        stream_set = MediaStreamInfoSet(
            muxed=sorted(streams[StreamKind.MUXED].values(), key=_video_sort_key, reverse=True),
            audio=sorted(
                streams[StreamKind.AUDIO].values(), key=lambda s: s.bitrate or 0, reverse=True
            ),
            video=sorted(streams[StreamKind.VIDEO].values(), key=_video_sort_key, reverse=True),
            hls_live_stream_url=info.get("hlsvp") or None,
        )
        logger.info(
            f"Resolved streams for {info.video_id}: {len(stream_set.muxed)} muxed, "
            f"{len(stream_set.audio)} audio, {len(stream_set.video)} video"
        )
        return stream_set

    def _is_wanted(self, itag: int) -> bool:
        if self._known_itags_only and not is_known_itag(itag):
            logger.debug(f"Skipping unknown itag {itag}")
            return False
        return True

    async def _apply_signature(self, fields: dict[str, str], url: str, player_source_url: str) -> str:
        """Decipher the ``s`` field, if any, and set it on the URL as ``signature``."""
        signature = fields.get("s")
        if signature:
            deciphered = await self._player_cache.decipher(player_source_url, signature)
            return set_query_parameter(url, "signature", deciphered)
        # Plain (unscrambled) signature
        if fields.get("sig"):
            return set_query_parameter(url, "signature", fields["sig"])
        return url

    # ------------------------------------------------------------------
    # Muxed
    # ------------------------------------------------------------------

    async def _resolve_muxed(
        self, fields: dict[str, str], player_source_url: str
    ) -> StreamDescriptor | None:
        itag = _require_int(fields, "itag", "muxed stream")
        url = _require(fields, "url", "muxed stream")
        if not self._is_wanted(itag):
            return None

        url = await self._apply_signature(fields, url, player_source_url)

        response = await self.http.head(url)
        if response.status_code in _GONE_STATUS_CODES:
            logger.info(f"Muxed stream {itag} is gone (HTTP {response.status_code}), skipping")
            return None
        response.raise_for_status()

        content_length = int_or_none(response.headers.get("Content-Length"))
        if content_length is None:
            raise ParseError(f"content length of muxed stream {itag}")

        itag_info = get_itag_info(itag)
        quality = itag_info.get("quality")
        return StreamDescriptor(
            itag=itag,
            url=url,
            kind=StreamKind.MUXED,
            content_length=content_length,
            quality_label=quality.label if quality else None,
            video_quality=quality,
            container=itag_info.get("container"),
            audio_encoding=itag_info.get("acodec"),
            video_encoding=itag_info.get("vcodec"),
        )

    # ------------------------------------------------------------------
    # Adaptive
    # ------------------------------------------------------------------

    async def _resolve_adaptive(
        self, fields: dict[str, str], player_source_url: str
    ) -> StreamDescriptor | None:
        itag = _require_int(fields, "itag", "adaptive stream")
        url = _require(fields, "url", "adaptive stream")
        content_length = _require_int(fields, "clen", f"adaptive stream {itag}")
        bitrate = _require_int(fields, "bitrate", f"adaptive stream {itag}")
        if not self._is_wanted(itag):
            return None

        url = await self._apply_signature(fields, url, player_source_url)
        itag_info = get_itag_info(itag)

        if "audio/" in fields.get("type", ""):
            return StreamDescriptor(
                itag=itag,
                url=url,
                kind=StreamKind.AUDIO,
                content_length=content_length,
                bitrate=bitrate,
                container=itag_info.get("container"),
                audio_encoding=itag_info.get("acodec"),
            )

        size = parse_size(fields.get("size"))
        if size is None:
            raise ParseError(f"resolution of adaptive stream {itag}")
        width, height = size

        quality = VideoQuality.from_height(height) or itag_info.get("quality")
        return StreamDescriptor(
            itag=itag,
            url=url,
            kind=StreamKind.VIDEO,
            content_length=content_length,
            bitrate=bitrate,
            resolution=VideoResolution(width=width, height=height),
            framerate=int_or_none(fields.get("fps")),
            quality_label=fields.get("quality_label") or (quality.label if quality else None),
            video_quality=quality,
            container=itag_info.get("container"),
            video_encoding=itag_info.get("vcodec"),
        )

    # ------------------------------------------------------------------
    # DASH
    # ------------------------------------------------------------------

    async def _resolve_dash(self, manifest_url: str, player_source_url: str) -> list[StreamDescriptor]:
        signature = self._search_regex(_DASH_SIGNATURE_RE, manifest_url, "DASH signature", default="")
        if signature:
            deciphered = await self._player_cache.decipher(player_source_url, signature)
            manifest_url = set_route_parameter(manifest_url, "signature", deciphered)

        content = await self._download_webpage(manifest_url)

        descriptors = []
        for rep in parse_manifest(content):
            if rep.is_segmented:
                logger.debug(f"Skipping segmented DASH representation {rep.itag}")
                continue
            if not self._is_wanted(rep.itag):
                continue
            descriptors.append(_dash_descriptor(rep))
        return descriptors


def _dash_descriptor(rep: DashRepresentation) -> StreamDescriptor:
    if rep.content_length is None:
        raise ParseError(f"content length of DASH stream {rep.itag}")

    itag_info = get_itag_info(rep.itag)
    if rep.is_audio:
        return StreamDescriptor(
            itag=rep.itag,
            url=rep.url,
            kind=StreamKind.AUDIO,
            content_length=rep.content_length,
            bitrate=rep.bitrate,
            container=itag_info.get("container"),
            audio_encoding=itag_info.get("acodec"),
        )

    if not rep.width or not rep.height:
        raise ParseError(f"resolution of DASH stream {rep.itag}")

    quality = VideoQuality.from_height(rep.height) or itag_info.get("quality")
    label = quality.label if quality else None
    if label and rep.frame_rate and rep.frame_rate > 30:
        label = f"{label}{rep.frame_rate}"

    return StreamDescriptor(
        itag=rep.itag,
        url=rep.url,
        kind=StreamKind.VIDEO,
        content_length=rep.content_length,
        bitrate=rep.bitrate,
        resolution=VideoResolution(width=rep.width, height=rep.height),
        framerate=rep.frame_rate,
        quality_label=label,
        video_quality=quality,
        container=itag_info.get("container"),
        video_encoding=itag_info.get("vcodec"),
    )


def _split_entries(encoded: str) -> list[dict[str, str]]:
    return [split_query(entry) for entry in encoded.split(",") if entry.strip()]


def _require(fields: dict[str, str], key: str, context: str) -> str:
    value = fields.get(key)
    if not value:
        raise ParseError(f"{key} of {context}")
    return value


def _require_int(fields: dict[str, str], key: str, context: str) -> int:
    value = int_or_none(fields.get(key))
    if value is None:
        raise ParseError(f"{key} of {context}")
    return value


def _video_sort_key(stream: StreamDescriptor) -> tuple[int, int, int]:
    return (stream.video_quality or 0, stream.framerate or 0, stream.bitrate or 0)
