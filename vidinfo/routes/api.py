"""
API route definitions for the vidinfo service.
"""

import asyncio
import logging
from collections.abc import Awaitable
from typing import TypeVar

import httpx
from fastapi import APIRouter, Depends, HTTPException, Request

from ..client import YoutubeClient
from ..config import get_settings
from ..core.video_id import parse_video_id
from ..exceptions import (
    InvalidVideoIdError,
    ParseError,
    ResolverError,
    VideoRequiresPurchaseError,
    VideoUnavailableError,
)
from ..models.streams import MediaStreamInfoSet
from ..models.video import Channel, ClosedCaptionTrackInfo, Video

logger = logging.getLogger(__name__)

router = APIRouter()

T = TypeVar("T")

_ERROR_STATUS: list[tuple[type[ResolverError], int]] = [
    (InvalidVideoIdError, 400),
    (VideoRequiresPurchaseError, 402),
    (VideoUnavailableError, 404),
    (ParseError, 502),
]


def get_client(request: Request) -> YoutubeClient:
    """The client created by the application lifespan."""
    return request.app.state.client


async def _run(video_id: str, operation: Awaitable[T]) -> T:
    """Await a client operation, mapping failures to HTTP errors."""
    try:
        return await operation
    except ResolverError as e:
        status_code = next((code for cls, code in _ERROR_STATUS if isinstance(e, cls)), 500)
        logger.info(f"Resolution of {video_id} failed: {e}")
        raise HTTPException(
            status_code=status_code,
            detail={
                "success": False,
                "error": str(e),
                "error_code": e.error_code or "resolution.failed",
            },
        )
    except asyncio.TimeoutError:
        timeout = get_settings().resolve_timeout
        logger.warning(f"Resolution of {video_id} timed out after {timeout}s")
        raise HTTPException(
            status_code=504,
            detail={
                "success": False,
                "error": f"Resolution of {video_id} timed out.",
                "error_code": "resolution.timeout",
            },
        )
    except httpx.HTTPError as e:
        logger.warning(f"Upstream request for {video_id} failed: {e}")
        message = str(e) if get_settings().debug else "Upstream request to YouTube failed."
        raise HTTPException(
            status_code=502,
            detail={"success": False, "error": message, "error_code": "upstream.failed"},
        )


@router.get(
    "/videos/{video_id}",
    response_model=Video,
    summary="Video metadata",
    description=(
        "Title, author, upload date, description, duration, keywords "
        "and statistics of a video."
    ),
)
async def get_video(video_id: str, client: YoutubeClient = Depends(get_client)):
    return await _run(video_id, client.get_video(video_id))


@router.get(
    "/videos/{video_id}/channel",
    response_model=Channel,
    summary="Uploader channel",
)
async def get_channel(video_id: str, client: YoutubeClient = Depends(get_client)):
    return await _run(video_id, client.get_video_author_channel(video_id))


@router.get(
    "/videos/{video_id}/streams",
    response_model=MediaStreamInfoSet,
    summary="Media streams",
    description=(
        "Muxed, audio-only and video-only streams with deciphered URLs, "
        "each list sorted best first."
    ),
)
async def get_streams(video_id: str, client: YoutubeClient = Depends(get_client)):
    return await _run(video_id, client.get_media_streams(video_id))


@router.get(
    "/videos/{video_id}/captions",
    response_model=list[ClosedCaptionTrackInfo],
    summary="Closed caption tracks",
)
async def get_captions(video_id: str, client: YoutubeClient = Depends(get_client)):
    return await _run(video_id, client.get_caption_tracks(video_id))


@router.get(
    "/parse",
    summary="Extract a video ID from a YouTube URL",
)
async def parse_url(url: str):
    video_id = parse_video_id(url)
    if video_id is None:
        raise HTTPException(
            status_code=400,
            detail={
                "success": False,
                "error": f"No YouTube video ID found in URL: {url}",
                "error_code": "url.unsupported",
            },
        )
    return {"video_id": video_id}


@router.get(
    "/health",
    summary="Health check",
)
async def health_check(client: YoutubeClient = Depends(get_client)):
    return {
        "status": "healthy",
        "cached_players": len(client.player_cache),
    }
