from datetime import date

from pydantic import BaseModel, ConfigDict, Field


class ThumbnailSet(BaseModel):
    """Thumbnail URLs for a video, derived from its ID."""

    model_config = ConfigDict(frozen=True)

    low_resolution: str
    medium_resolution: str
    high_resolution: str
    standard_resolution: str
    max_resolution: str

    @classmethod
    def for_video(cls, video_id: str) -> "ThumbnailSet":
        base = f"https://i.ytimg.com/vi/{video_id}"
        return cls(
            low_resolution=f"{base}/default.jpg",
            medium_resolution=f"{base}/mqdefault.jpg",
            high_resolution=f"{base}/hqdefault.jpg",
            standard_resolution=f"{base}/sddefault.jpg",
            max_resolution=f"{base}/maxresdefault.jpg",
        )


class Statistics(BaseModel):
    """Engagement counters of a video."""

    model_config = ConfigDict(frozen=True)

    view_count: int | None = Field(None, description="View count")
    like_count: int | None = Field(None, description="Like count")
    dislike_count: int | None = Field(None, description="Dislike count")

    @property
    def average_rating(self) -> float | None:
        """Rating on a 1-5 scale derived from likes and dislikes."""
        if self.like_count is None or self.dislike_count is None:
            return None
        total = self.like_count + self.dislike_count
        if total == 0:
            return None
        return 1 + 4.0 * self.like_count / total


class Channel(BaseModel):
    """A YouTube channel."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Channel ID")
    title: str | None = Field(None, description="Channel name")
    logo_url: str | None = Field(None, description="Channel logo image URL")

    @property
    def url(self) -> str:
        return f"https://www.youtube.com/channel/{self.id}"


class Video(BaseModel):
    """Basic metadata about a video."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Video ID")
    author: str | None = Field(None, description="Channel name")
    upload_date: date | None = Field(None, description="Publication date")
    title: str | None = Field(None, description="Video title")
    description: str | None = Field(None, description="Description text")
    duration: int | None = Field(None, description="Duration in seconds")
    keywords: list[str] = Field(default_factory=list, description="Tags/keywords")
    view_count: int | None = Field(None, description="View count")
    average_rating: float | None = Field(None, description="Average rating (0-5)")
    statistics: Statistics = Field(default_factory=Statistics, description="View, like and dislike counts")
    loudness: float | None = Field(None, description="Relative loudness in dB")
    thumbnails: ThumbnailSet


class ClosedCaptionTrackInfo(BaseModel):
    """Location of a closed caption track."""

    model_config = ConfigDict(frozen=True)

    url: str = Field(..., description="Track URL with the format parameter forced")
    language_code: str = Field(..., description="Language code (e.g. 'en')")
    language_name: str | None = Field(None, description="Human-readable language name")
    is_auto_generated: bool = Field(False, description="Whether generated by speech recognition")
