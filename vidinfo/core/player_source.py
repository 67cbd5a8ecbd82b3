"""
Per-client cache of compiled signature ciphers, keyed by player script URL.

YouTube serves a handful of player versions at a time, so the cache is never
evicted; it lives exactly as long as the client that owns it.
"""

import logging
import threading
from collections.abc import Awaitable, Callable

from .cipher import CompiledCipher, compile_cipher

logger = logging.getLogger(__name__)


class PlayerSourceCache:
    """
    Maps player script URLs to compiled ciphers.

    The lock only guards the dict; it is never held while the script is
    downloaded. Two concurrent misses for the same URL both compile, and
    the first one stored wins for every caller.
    """

    def __init__(self, fetch_source: Callable[[str], Awaitable[str]]):
        self._fetch_source = fetch_source
        self._ciphers: dict[str, CompiledCipher] = {}
        self._lock = threading.Lock()

    async def get_cipher(self, source_url: str) -> CompiledCipher:
        with self._lock:
            cached = self._ciphers.get(source_url)
        if cached is not None:
            logger.debug("Cipher cache hit for %s", source_url)
            return cached

        logger.info("Compiling signature cipher from %s", source_url)
        player_js = await self._fetch_source(source_url)
        compiled = compile_cipher(player_js, source_url)

        with self._lock:
            return self._ciphers.setdefault(source_url, compiled)

    async def decipher(self, source_url: str, signature: str) -> str:
        """Decipher a signature with the cipher of the given player script."""
        cipher = await self.get_cipher(source_url)
        return cipher.decipher(signature)

    def clear(self):
        with self._lock:
            self._ciphers.clear()

    def __contains__(self, source_url: object) -> bool:
        with self._lock:
            return source_url in self._ciphers

    def __len__(self) -> int:
        with self._lock:
            return len(self._ciphers)
