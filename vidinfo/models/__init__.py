from .enums import AudioEncoding, Container, StreamKind, VideoEncoding, VideoQuality
from .streams import MediaStreamInfoSet, StreamDescriptor, VideoResolution
from .video import Channel, ClosedCaptionTrackInfo, Statistics, ThumbnailSet, Video

__all__ = [
    "AudioEncoding",
    "Channel",
    "ClosedCaptionTrackInfo",
    "Container",
    "MediaStreamInfoSet",
    "StreamDescriptor",
    "Statistics",
    "StreamKind",
    "ThumbnailSet",
    "Video",
    "VideoEncoding",
    "VideoQuality",
    "VideoResolution",
]
