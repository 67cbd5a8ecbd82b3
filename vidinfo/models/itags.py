"""
Known YouTube itags and what they encode.

Muxed entries carry no resolution of their own, so their quality comes from
this table. Adaptive and DASH entries use it for container and codec info.
"""

from typing import Any

from .enums import AudioEncoding as A
from .enums import Container as C
from .enums import VideoEncoding as V
from .enums import VideoQuality as Q

_ITAG_MAP: dict[int, dict[str, Any]] = {
    # Muxed
    5: {"container": C.FLV, "acodec": A.MP3, "vcodec": V.H263, "quality": Q.LOW_144},
    6: {"container": C.FLV, "acodec": A.MP3, "vcodec": V.H263, "quality": Q.LOW_240},
    13: {"container": C.TGPP, "acodec": A.AAC, "vcodec": V.MP4V, "quality": Q.LOW_144},
    17: {"container": C.TGPP, "acodec": A.AAC, "vcodec": V.MP4V, "quality": Q.LOW_144},
    18: {"container": C.MP4, "acodec": A.AAC, "vcodec": V.H264, "quality": Q.MEDIUM_360},
    22: {"container": C.MP4, "acodec": A.AAC, "vcodec": V.H264, "quality": Q.HIGH_720},
    34: {"container": C.FLV, "acodec": A.AAC, "vcodec": V.H264, "quality": Q.MEDIUM_360},
    35: {"container": C.FLV, "acodec": A.AAC, "vcodec": V.H264, "quality": Q.MEDIUM_480},
    36: {"container": C.TGPP, "acodec": A.AAC, "vcodec": V.MP4V, "quality": Q.LOW_240},
    37: {"container": C.MP4, "acodec": A.AAC, "vcodec": V.H264, "quality": Q.HIGH_1080},
    38: {"container": C.MP4, "acodec": A.AAC, "vcodec": V.H264, "quality": Q.HIGH_3072},
    43: {"container": C.WEBM, "acodec": A.VORBIS, "vcodec": V.VP8, "quality": Q.MEDIUM_360},
    44: {"container": C.WEBM, "acodec": A.VORBIS, "vcodec": V.VP8, "quality": Q.MEDIUM_480},
    45: {"container": C.WEBM, "acodec": A.VORBIS, "vcodec": V.VP8, "quality": Q.HIGH_720},
    46: {"container": C.WEBM, "acodec": A.VORBIS, "vcodec": V.VP8, "quality": Q.HIGH_1080},
    59: {"container": C.MP4, "acodec": A.AAC, "vcodec": V.H264, "quality": Q.MEDIUM_480},
    78: {"container": C.MP4, "acodec": A.AAC, "vcodec": V.H264, "quality": Q.MEDIUM_480},
    82: {"container": C.MP4, "acodec": A.AAC, "vcodec": V.H264, "quality": Q.MEDIUM_360},
    83: {"container": C.MP4, "acodec": A.AAC, "vcodec": V.H264, "quality": Q.MEDIUM_480},
    84: {"container": C.MP4, "acodec": A.AAC, "vcodec": V.H264, "quality": Q.HIGH_720},
    85: {"container": C.MP4, "acodec": A.AAC, "vcodec": V.H264, "quality": Q.HIGH_1080},
    91: {"container": C.TS, "acodec": A.AAC, "vcodec": V.H264, "quality": Q.LOW_144},
    92: {"container": C.TS, "acodec": A.AAC, "vcodec": V.H264, "quality": Q.LOW_240},
    93: {"container": C.TS, "acodec": A.AAC, "vcodec": V.H264, "quality": Q.MEDIUM_360},
    94: {"container": C.TS, "acodec": A.AAC, "vcodec": V.H264, "quality": Q.MEDIUM_480},
    95: {"container": C.TS, "acodec": A.AAC, "vcodec": V.H264, "quality": Q.HIGH_720},
    96: {"container": C.TS, "acodec": A.AAC, "vcodec": V.H264, "quality": Q.HIGH_1080},
    100: {"container": C.WEBM, "acodec": A.VORBIS, "vcodec": V.VP8, "quality": Q.MEDIUM_360},
    101: {"container": C.WEBM, "acodec": A.VORBIS, "vcodec": V.VP8, "quality": Q.MEDIUM_480},
    102: {"container": C.WEBM, "acodec": A.VORBIS, "vcodec": V.VP8, "quality": Q.HIGH_720},
    132: {"container": C.TS, "acodec": A.AAC, "vcodec": V.H264, "quality": Q.LOW_240},
    151: {"container": C.TS, "acodec": A.AAC, "vcodec": V.H264, "quality": Q.LOW_144},
    # Video only (H.264)
    133: {"container": C.MP4, "vcodec": V.H264, "quality": Q.LOW_240},
    134: {"container": C.MP4, "vcodec": V.H264, "quality": Q.MEDIUM_360},
    135: {"container": C.MP4, "vcodec": V.H264, "quality": Q.MEDIUM_480},
    136: {"container": C.MP4, "vcodec": V.H264, "quality": Q.HIGH_720},
    137: {"container": C.MP4, "vcodec": V.H264, "quality": Q.HIGH_1080},
    138: {"container": C.MP4, "vcodec": V.H264, "quality": Q.HIGH_4320},
    160: {"container": C.MP4, "vcodec": V.H264, "quality": Q.LOW_144},
    212: {"container": C.MP4, "vcodec": V.H264, "quality": Q.MEDIUM_480},
    264: {"container": C.MP4, "vcodec": V.H264, "quality": Q.HIGH_1440},
    266: {"container": C.MP4, "vcodec": V.H264, "quality": Q.HIGH_2160},
    298: {"container": C.MP4, "vcodec": V.H264, "quality": Q.HIGH_720},
    299: {"container": C.MP4, "vcodec": V.H264, "quality": Q.HIGH_1080},
    # Video only (VP8/VP9)
    167: {"container": C.WEBM, "vcodec": V.VP8, "quality": Q.MEDIUM_360},
    168: {"container": C.WEBM, "vcodec": V.VP8, "quality": Q.MEDIUM_480},
    169: {"container": C.WEBM, "vcodec": V.VP8, "quality": Q.HIGH_720},
    170: {"container": C.WEBM, "vcodec": V.VP8, "quality": Q.HIGH_1080},
    218: {"container": C.WEBM, "vcodec": V.VP8, "quality": Q.MEDIUM_480},
    219: {"container": C.WEBM, "vcodec": V.VP8, "quality": Q.MEDIUM_480},
    242: {"container": C.WEBM, "vcodec": V.VP9, "quality": Q.LOW_240},
    243: {"container": C.WEBM, "vcodec": V.VP9, "quality": Q.MEDIUM_360},
    244: {"container": C.WEBM, "vcodec": V.VP9, "quality": Q.MEDIUM_480},
    245: {"container": C.WEBM, "vcodec": V.VP9, "quality": Q.MEDIUM_480},
    246: {"container": C.WEBM, "vcodec": V.VP9, "quality": Q.MEDIUM_480},
    247: {"container": C.WEBM, "vcodec": V.VP9, "quality": Q.HIGH_720},
    248: {"container": C.WEBM, "vcodec": V.VP9, "quality": Q.HIGH_1080},
    271: {"container": C.WEBM, "vcodec": V.VP9, "quality": Q.HIGH_1440},
    272: {"container": C.WEBM, "vcodec": V.VP9, "quality": Q.HIGH_2160},
    278: {"container": C.WEBM, "vcodec": V.VP9, "quality": Q.LOW_144},
    302: {"container": C.WEBM, "vcodec": V.VP9, "quality": Q.HIGH_720},
    303: {"container": C.WEBM, "vcodec": V.VP9, "quality": Q.HIGH_1080},
    308: {"container": C.WEBM, "vcodec": V.VP9, "quality": Q.HIGH_1440},
    313: {"container": C.WEBM, "vcodec": V.VP9, "quality": Q.HIGH_2160},
    315: {"container": C.WEBM, "vcodec": V.VP9, "quality": Q.HIGH_2160},
    330: {"container": C.WEBM, "vcodec": V.VP9, "quality": Q.LOW_144},
    331: {"container": C.WEBM, "vcodec": V.VP9, "quality": Q.LOW_240},
    332: {"container": C.WEBM, "vcodec": V.VP9, "quality": Q.MEDIUM_360},
    333: {"container": C.WEBM, "vcodec": V.VP9, "quality": Q.MEDIUM_480},
    334: {"container": C.WEBM, "vcodec": V.VP9, "quality": Q.HIGH_720},
    335: {"container": C.WEBM, "vcodec": V.VP9, "quality": Q.HIGH_1080},
    336: {"container": C.WEBM, "vcodec": V.VP9, "quality": Q.HIGH_1440},
    337: {"container": C.WEBM, "vcodec": V.VP9, "quality": Q.HIGH_2160},
    # Video only (AV1)
    394: {"container": C.MP4, "vcodec": V.AV1, "quality": Q.LOW_144},
    395: {"container": C.MP4, "vcodec": V.AV1, "quality": Q.LOW_240},
    396: {"container": C.MP4, "vcodec": V.AV1, "quality": Q.MEDIUM_360},
    397: {"container": C.MP4, "vcodec": V.AV1, "quality": Q.MEDIUM_480},
    398: {"container": C.MP4, "vcodec": V.AV1, "quality": Q.HIGH_720},
    399: {"container": C.MP4, "vcodec": V.AV1, "quality": Q.HIGH_1080},
    # Audio only
    139: {"container": C.M4A, "acodec": A.AAC},
    140: {"container": C.M4A, "acodec": A.AAC},
    141: {"container": C.M4A, "acodec": A.AAC},
    171: {"container": C.WEBM, "acodec": A.VORBIS},
    172: {"container": C.WEBM, "acodec": A.VORBIS},
    249: {"container": C.WEBM, "acodec": A.OPUS},
    250: {"container": C.WEBM, "acodec": A.OPUS},
    251: {"container": C.WEBM, "acodec": A.OPUS},
}


def is_known_itag(itag: int) -> bool:
    return itag in _ITAG_MAP


def get_itag_info(itag: int) -> dict[str, Any]:
    """Container/codec/quality info for an itag, empty for unknown itags."""
    return _ITAG_MAP.get(itag, {})
