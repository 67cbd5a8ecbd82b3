"""Tests for Pydantic models, enums and the itag table."""

import pytest
from pydantic import ValidationError

from vidinfo.models import (
    AudioEncoding,
    Channel,
    ClosedCaptionTrackInfo,
    Container,
    MediaStreamInfoSet,
    Statistics,
    StreamDescriptor,
    StreamKind,
    ThumbnailSet,
    Video,
    VideoEncoding,
    VideoQuality,
    VideoResolution,
)
from vidinfo.models.itags import get_itag_info, is_known_itag


# ── Enums ────────────────────────────────────────────────────────────
class TestEnums:
    def test_stream_kinds(self):
        assert {k.value for k in StreamKind} == {"muxed", "audio", "video"}

    def test_quality_label(self):
        assert VideoQuality.HIGH_720.label == "720p"

    @pytest.mark.parametrize(
        ("height", "expected"),
        [
            (144, VideoQuality.LOW_144),
            (240, VideoQuality.LOW_240),
            (270, VideoQuality.MEDIUM_360),
            (1080, VideoQuality.HIGH_1080),
            (1088, VideoQuality.HIGH_1440),
            (8000, VideoQuality.HIGH_4320),
        ],
    )
    def test_quality_from_height(self, height, expected):
        assert VideoQuality.from_height(height) is expected

    @pytest.mark.parametrize("height", [None, 0, -1])
    def test_quality_from_invalid_height(self, height):
        assert VideoQuality.from_height(height) is None

    def test_qualities_are_ordered(self):
        assert VideoQuality.HIGH_1080 > VideoQuality.HIGH_720


# ── Itag table ───────────────────────────────────────────────────────
class TestItags:
    def test_muxed_itag(self):
        info = get_itag_info(22)
        assert info["container"] == Container.MP4
        assert info["acodec"] == AudioEncoding.AAC
        assert info["vcodec"] == VideoEncoding.H264
        assert info["quality"] == VideoQuality.HIGH_720

    def test_audio_itag_has_no_video(self):
        info = get_itag_info(251)
        assert info["acodec"] == AudioEncoding.OPUS
        assert "vcodec" not in info

    def test_unknown_itag(self):
        assert is_known_itag(9999) is False
        assert get_itag_info(9999) == {}


# ── Streams ──────────────────────────────────────────────────────────
class TestStreamDescriptor:
    def test_minimal(self):
        stream = StreamDescriptor(itag=140, url="https://x/140", kind="audio")
        assert stream.kind == StreamKind.AUDIO
        assert stream.resolution is None
        assert stream.content_length is None

    def test_invalid_kind_rejected(self):
        with pytest.raises(ValidationError):
            StreamDescriptor(itag=1, url="https://x", kind="subtitle")

    def test_frozen(self):
        stream = StreamDescriptor(itag=140, url="https://x/140", kind="audio")
        with pytest.raises(ValidationError):
            stream.itag = 141

    def test_json_serialization(self):
        stream = StreamDescriptor(
            itag=137,
            url="https://x/137",
            kind=StreamKind.VIDEO,
            resolution=VideoResolution(width=1920, height=1080),
            video_quality=VideoQuality.HIGH_1080,
        )
        data = stream.model_dump(mode="json")
        assert data["kind"] == "video"
        assert data["resolution"] == {"width": 1920, "height": 1080}
        assert data["video_quality"] == 1080

    def test_resolution_str(self):
        assert str(VideoResolution(width=640, height=360)) == "640x360"


class TestMediaStreamInfoSet:
    def test_empty(self):
        streams = MediaStreamInfoSet()
        assert streams.all() == []
        assert streams.hls_live_stream_url is None

    def test_all_concatenates_kinds(self):
        muxed = StreamDescriptor(itag=18, url="https://x/18", kind="muxed")
        audio = StreamDescriptor(itag=140, url="https://x/140", kind="audio")
        video = StreamDescriptor(itag=137, url="https://x/137", kind="video")
        streams = MediaStreamInfoSet(muxed=[muxed], audio=[audio], video=[video])
        assert [s.itag for s in streams.all()] == [18, 140, 137]


# ── Video ────────────────────────────────────────────────────────────
class TestVideo:
    def test_thumbnails_from_id(self):
        thumbnails = ThumbnailSet.for_video("dQw4w9WgXcQ")
        assert thumbnails.low_resolution == "https://i.ytimg.com/vi/dQw4w9WgXcQ/default.jpg"
        assert thumbnails.max_resolution == "https://i.ytimg.com/vi/dQw4w9WgXcQ/maxresdefault.jpg"

    def test_defaults(self):
        video = Video(id="dQw4w9WgXcQ", thumbnails=ThumbnailSet.for_video("dQw4w9WgXcQ"))
        assert video.keywords == []
        assert video.title is None
        assert video.statistics == Statistics()
        assert video.upload_date is None

    def test_caption_track_defaults(self):
        track = ClosedCaptionTrackInfo(url="https://x/timedtext", language_code="en")
        assert track.is_auto_generated is False
        assert track.language_name is None


class TestStatistics:
    @pytest.mark.parametrize(
        ("likes", "dislikes", "expected"),
        [
            (3, 1, 4.0),
            (10, 0, 5.0),
            (0, 10, 1.0),
            (0, 0, None),
            (None, 10, None),
            (10, None, None),
        ],
    )
    def test_average_rating(self, likes, dislikes, expected):
        assert Statistics(like_count=likes, dislike_count=dislikes).average_rating == expected


class TestChannel:
    def test_url(self):
        channel = Channel(id="UCuAXFkgsw1L7xaCfnd5JJOw", title="Rick Astley")
        assert channel.url == "https://www.youtube.com/channel/UCuAXFkgsw1L7xaCfnd5JJOw"
        assert channel.logo_url is None
