"""Errors raised while resolving video data."""


class ResolverError(Exception):
    """Raised when video resolution fails."""

    def __init__(self, message: str, error_code: str | None = None):
        super().__init__(message)
        self.error_code = error_code


class InvalidVideoIdError(ResolverError, ValueError):
    """The video ID is not syntactically valid."""

    def __init__(self, video_id: str):
        super().__init__(f"Invalid YouTube video ID [{video_id}].", error_code="video.invalid_id")
        self.video_id = video_id


class VideoUnavailableError(ResolverError):
    """YouTube reports the video as missing or restricted."""

    def __init__(self, video_id: str, native_code: int, native_reason: str | None):
        super().__init__(
            f"Video [{video_id}] is unavailable (code {native_code}): {native_reason or 'no reason given'}",
            error_code="video.unavailable",
        )
        self.video_id = video_id
        self.native_code = native_code
        self.native_reason = native_reason


class VideoRequiresPurchaseError(ResolverError):
    """The video is paid content; a free preview may exist."""

    def __init__(self, video_id: str, preview_video_id: str):
        super().__init__(
            f"Video [{video_id}] requires purchase (preview: {preview_video_id}).",
            error_code="video.requires_purchase",
        )
        self.video_id = video_id
        self.preview_video_id = preview_video_id


class ParseError(ResolverError):
    """An expected field, function or header could not be located."""

    def __init__(self, context: str):
        super().__init__(f"Could not parse {context}.", error_code="parse.failed")
        self.context = context
