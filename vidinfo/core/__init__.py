"""Core utilities: HTTP, signature cipher, player cache, DASH parsing, video IDs."""

from .cipher import (
    CompiledCipher,
    ReverseOperation,
    SignatureOperation,
    SliceOperation,
    SwapOperation,
    compile_cipher,
    decipher,
)
from .http_client import HTTPClient
from .player_source import PlayerSourceCache
from .video_id import parse_video_id, validate_video_id

__all__ = [
    "CompiledCipher",
    "HTTPClient",
    "PlayerSourceCache",
    "ReverseOperation",
    "SignatureOperation",
    "SliceOperation",
    "SwapOperation",
    "compile_cipher",
    "decipher",
    "parse_video_id",
    "validate_video_id",
]
