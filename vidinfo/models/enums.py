from enum import Enum, IntEnum


class StreamKind(str, Enum):
    MUXED = "muxed"
    AUDIO = "audio"
    VIDEO = "video"


class Container(str, Enum):
    MP4 = "mp4"
    M4A = "m4a"
    WEBM = "webm"
    TGPP = "3gp"
    FLV = "flv"
    TS = "ts"


class AudioEncoding(str, Enum):
    AAC = "aac"
    MP3 = "mp3"
    VORBIS = "vorbis"
    OPUS = "opus"


class VideoEncoding(str, Enum):
    H263 = "h263"
    MP4V = "mp4v"
    H264 = "h264"
    VP8 = "vp8"
    VP9 = "vp9"
    AV1 = "av1"


class VideoQuality(IntEnum):
    """Video quality tiers, valued by nominal frame height."""

    LOW_144 = 144
    LOW_240 = 240
    MEDIUM_360 = 360
    MEDIUM_480 = 480
    HIGH_720 = 720
    HIGH_1080 = 1080
    HIGH_1440 = 1440
    HIGH_2160 = 2160
    HIGH_2880 = 2880
    HIGH_3072 = 3072
    HIGH_4320 = 4320

    @property
    def label(self) -> str:
        return f"{self.value}p"

    @classmethod
    def from_height(cls, height: int | None) -> "VideoQuality | None":
        """Smallest tier that fits *height*; the top tier for anything larger."""
        if not height or height <= 0:
            return None
        for quality in cls:
            if height <= quality.value:
                return quality
        return cls.HIGH_4320
