"""Tests for the per-client compiled cipher cache."""

import asyncio
from pathlib import Path

import pytest

from vidinfo.core.player_source import PlayerSourceCache
from vidinfo.exceptions import ParseError

PLAYER_JS = (Path(__file__).parent / "data" / "player_base.js").read_text(encoding="utf-8")
PLAYER_URL = "https://www.youtube.com/s/player/abc123/base.js"


class _CountingFetcher:
    def __init__(self, source: str = PLAYER_JS, delay: float = 0.0):
        self.source = source
        self.delay = delay
        self.calls: list[str] = []

    async def __call__(self, url: str) -> str:
        self.calls.append(url)
        if self.delay:
            await asyncio.sleep(self.delay)
        return self.source


class TestPlayerSourceCache:
    @pytest.mark.asyncio()
    async def test_compiles_on_first_use(self):
        fetcher = _CountingFetcher()
        cache = PlayerSourceCache(fetcher)

        cipher = await cache.get_cipher(PLAYER_URL)

        assert cipher.source_url == PLAYER_URL
        assert len(cipher.operations) == 4
        assert PLAYER_URL in cache
        assert len(cache) == 1

    @pytest.mark.asyncio()
    async def test_cache_hit_skips_fetch(self):
        fetcher = _CountingFetcher()
        cache = PlayerSourceCache(fetcher)

        first = await cache.get_cipher(PLAYER_URL)
        second = await cache.get_cipher(PLAYER_URL)

        assert first is second
        assert fetcher.calls == [PLAYER_URL]

    @pytest.mark.asyncio()
    async def test_separate_entries_per_url(self):
        fetcher = _CountingFetcher()
        cache = PlayerSourceCache(fetcher)

        await cache.get_cipher(PLAYER_URL)
        await cache.get_cipher(PLAYER_URL.replace("abc123", "def456"))

        assert len(cache) == 2
        assert len(fetcher.calls) == 2

    @pytest.mark.asyncio()
    async def test_concurrent_misses_share_one_cipher(self):
        fetcher = _CountingFetcher(delay=0.01)
        cache = PlayerSourceCache(fetcher)

        results = await asyncio.gather(*(cache.get_cipher(PLAYER_URL) for _ in range(5)))

        assert all(result is results[0] for result in results)
        assert len(cache) == 1

    @pytest.mark.asyncio()
    async def test_decipher(self):
        cache = PlayerSourceCache(_CountingFetcher())
        assert (
            await cache.decipher(PLAYER_URL, "ABCDEFGHIJKLMNOPQRSTUVWXYZ")
            == "SWVUTXRQPONMLKJIAGFEDCBH"
        )

    @pytest.mark.asyncio()
    async def test_compile_failure_is_not_cached(self):
        fetcher = _CountingFetcher(source="var nothing=1;")
        cache = PlayerSourceCache(fetcher)

        with pytest.raises(ParseError):
            await cache.get_cipher(PLAYER_URL)

        assert PLAYER_URL not in cache

    @pytest.mark.asyncio()
    async def test_clear(self):
        fetcher = _CountingFetcher()
        cache = PlayerSourceCache(fetcher)
        await cache.get_cipher(PLAYER_URL)

        cache.clear()
        await cache.get_cipher(PLAYER_URL)

        assert len(fetcher.calls) == 2
