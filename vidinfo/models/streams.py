from pydantic import BaseModel, ConfigDict, Field

from .enums import AudioEncoding, Container, StreamKind, VideoEncoding, VideoQuality


class VideoResolution(BaseModel):
    """Frame size of a video stream."""

    model_config = ConfigDict(frozen=True)

    width: int = Field(..., description="Width in pixels")
    height: int = Field(..., description="Height in pixels")

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"


class StreamDescriptor(BaseModel):
    """A single resolved media stream."""

    model_config = ConfigDict(frozen=True)

    itag: int = Field(..., description="Format tag, unique within its kind")
    url: str = Field(..., description="Playable URL with the signature applied")
    kind: StreamKind = Field(..., description="muxed, audio or video")
    content_length: int | None = Field(None, description="Size in bytes")
    bitrate: int | None = Field(None, description="Bitrate in bits per second")
    resolution: VideoResolution | None = Field(None, description="Frame size (video only)")
    framerate: int | None = Field(None, description="Frames per second (video only)")
    quality_label: str | None = Field(None, description="Quality label (e.g. '1080p60')")
    video_quality: VideoQuality | None = Field(None, description="Resolution-derived quality tier")
    container: Container | None = Field(None, description="Container format")
    audio_encoding: AudioEncoding | None = Field(None, description="Audio codec")
    video_encoding: VideoEncoding | None = Field(None, description="Video codec")


class MediaStreamInfoSet(BaseModel):
    """All streams of a video, each list sorted best first."""

    model_config = ConfigDict(frozen=True)

    muxed: list[StreamDescriptor] = Field(default_factory=list)
    audio: list[StreamDescriptor] = Field(default_factory=list)
    video: list[StreamDescriptor] = Field(default_factory=list)
    hls_live_stream_url: str | None = Field(None, description="HLS playlist of a live broadcast")

    def all(self) -> list[StreamDescriptor]:
        return [*self.muxed, *self.audio, *self.video]
