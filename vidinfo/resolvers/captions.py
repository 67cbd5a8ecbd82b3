import logging

from ..models.video import ClosedCaptionTrackInfo
from ..utils.helpers import find_descendants, set_query_parameter, traverse_obj
from .video_info import VideoInfo

logger = logging.getLogger(__name__)

# format=3 selects the timed-text XML format
_CAPTION_FORMAT = "3"


def parse_caption_tracks(info: VideoInfo) -> list[ClosedCaptionTrackInfo]:
    """Extract caption track locations from the player_response of video info."""
    info.require("player_response")

    tracks = []
    for caption_tracks in find_descendants(info.player_response, "captionTracks"):
        if not isinstance(caption_tracks, list):
            continue

        for track in caption_tracks:
            if not isinstance(track, dict):
                continue

            base_url = track.get("baseUrl")
            language_code = track.get("languageCode")
            if not base_url or not language_code:
                logger.debug(f"Skipping incomplete caption track: {track!r}")
                continue

            tracks.append(
                ClosedCaptionTrackInfo(
                    url=set_query_parameter(base_url, "format", _CAPTION_FORMAT),
                    language_code=language_code,
                    language_name=traverse_obj(
                        track, ("name", "simpleText"), ("name", "runs", 0, "text")
                    ),
                    is_auto_generated=(track.get("vssId") or "").lower().startswith("a."),
                )
            )

    return tracks
