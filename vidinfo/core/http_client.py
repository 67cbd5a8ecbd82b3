"""
Async HTTP client used for every YouTube request, with optional retries.

Retries are off by default (max_retries=0): every request is sent once and
the caller sees the first response. When enabled:
- Retries on network errors (timeouts, connect/read/write failures).
- Retries on HTTP 429 and 5xx gateway/server errors.
- Exponential back-off with jitter, capped at 30 s per wait.
- Respects Retry-After header on 429 responses.
- Never retries other 4xx responses; a HEAD request answered with 404/410 is
  returned as-is so the caller can drop the stream.
"""

import asyncio
import logging
import random
from typing import Any

import httpx

from ..config import Settings, get_settings

logger = logging.getLogger(__name__)

# Maximum back-off wait time (seconds) between retries
_MAX_BACKOFF = 30.0

# HTTP status codes that trigger an automatic retry
_RETRYABLE_STATUS_CODES = {429, 500, 502, 503, 504}

# All httpx exception types that represent transient network problems
_NETWORK_ERRORS = (
    httpx.TimeoutException,
    httpx.ConnectError,
    httpx.ReadError,
    httpx.WriteError,
    httpx.CloseError,
)


class HTTPClient:
    """
    Async HTTP client with retry logic. Wraps httpx.AsyncClient, which is
    created on first use and reused until close().
    """

    def __init__(
        self,
        settings: Settings | None = None,
        timeout: float | None = None,
        max_retries: int | None = None,
        headers: dict[str, str] | None = None,
    ):
        settings = settings or get_settings()
        self._timeout = timeout if timeout is not None else settings.request_timeout
        self._max_retries = max_retries if max_retries is not None else settings.max_retries

        self._default_headers = {
            "User-Agent": settings.user_agent,
            "Accept-Language": "en-US,en;q=0.9",
        }
        if headers:
            self._default_headers.update(headers)

        self._client: httpx.AsyncClient | None = None

    # ------------------------------------------------------------------
    # Client lifecycle
    # ------------------------------------------------------------------

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self._timeout, connect=10.0),
                follow_redirects=True,
                headers=self._default_headers,
                http2=True,
                limits=httpx.Limits(max_connections=20, max_keepalive_connections=10),
            )
        return self._client

    async def close(self):
        if self._client and not self._client.is_closed:
            await self._client.aclose()
        self._client = None

    # ------------------------------------------------------------------
    # Core request with retry
    # ------------------------------------------------------------------

    async def request(
        self,
        method: str,
        url: str,
        *,
        headers: dict[str, str] | None = None,
        params: dict[str, str] | None = None,
    ) -> httpx.Response:
        """
        Make an HTTP request, retrying transient failures.

        The final response is returned whatever its status; the last network
        error is re-raised once retries are exhausted.
        """
        client = self._get_client()
        last_error: Exception | None = None

        for attempt in range(self._max_retries + 1):
            try:
                response = await client.request(method, url, headers=headers, params=params)
            except _NETWORK_ERRORS as exc:
                last_error = exc
                if attempt < self._max_retries:
                    wait = self._backoff(attempt)
                    logger.warning(
                        "%s on %s %s (attempt %d/%d). Retrying in %.1fs...",
                        type(exc).__name__,
                        method,
                        url,
                        attempt + 1,
                        self._max_retries + 1,
                        wait,
                    )
                    await asyncio.sleep(wait)
                    continue
                logger.error(
                    "%s on %s %s after %d attempts: %s",
                    type(exc).__name__,
                    method,
                    url,
                    self._max_retries + 1,
                    exc,
                )
                raise

            if response.status_code in _RETRYABLE_STATUS_CODES and attempt < self._max_retries:
                wait = self._backoff(attempt, response)
                logger.warning(
                    "HTTP %d from %s %s (attempt %d/%d). Retrying in %.1fs...",
                    response.status_code,
                    method,
                    url,
                    attempt + 1,
                    self._max_retries + 1,
                    wait,
                )
                await asyncio.sleep(wait)
                continue

            return response

        # Only reachable with a negative retry count
        raise last_error or httpx.ReadError("All retries exhausted with no response")

    @staticmethod
    def _backoff(attempt: int, response: httpx.Response | None = None) -> float:
        """
        Exponential back-off with jitter, capped. A Retry-After header on a
        429 response is used as a floor.
        """
        base = min((2**attempt) + random.uniform(0, 1), _MAX_BACKOFF)

        if response is not None and response.status_code == 429:
            retry_after = response.headers.get("Retry-After")
            if retry_after:
                try:
                    base = max(base, min(float(retry_after), _MAX_BACKOFF))
                except ValueError:
                    pass

        return base

    # ------------------------------------------------------------------
    # Convenience methods
    # ------------------------------------------------------------------

    async def get(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self.request("GET", url, **kwargs)

    async def head(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self.request("HEAD", url, **kwargs)

    async def get_text(self, url: str, **kwargs: Any) -> str:
        """GET request returning response text. Raises for non-success status."""
        response = await self.get(url, **kwargs)
        response.raise_for_status()
        return response.text

    async def __aenter__(self):
        return self

    async def __aexit__(self, *args):
        await self.close()
