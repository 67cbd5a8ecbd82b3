"""Tests for HTTP client retry logic."""

import httpx
import pytest
import respx

from vidinfo.config import Settings
from vidinfo.core.http_client import (
    _MAX_BACKOFF,
    _NETWORK_ERRORS,
    _RETRYABLE_STATUS_CODES,
    HTTPClient,
)


class TestRetryConfig:
    def test_retryable_status_codes(self):
        assert 429 in _RETRYABLE_STATUS_CODES
        assert 500 in _RETRYABLE_STATUS_CODES
        assert 502 in _RETRYABLE_STATUS_CODES
        assert 503 in _RETRYABLE_STATUS_CODES
        assert 504 in _RETRYABLE_STATUS_CODES
        # Client errors (except 429) are NOT retried
        assert 400 not in _RETRYABLE_STATUS_CODES
        assert 403 not in _RETRYABLE_STATUS_CODES
        assert 404 not in _RETRYABLE_STATUS_CODES
        assert 410 not in _RETRYABLE_STATUS_CODES

    def test_retries_off_by_default(self):
        assert Settings().max_retries == 0
        assert HTTPClient(Settings())._max_retries == 0

    def test_max_backoff_is_capped(self):
        assert _MAX_BACKOFF == 30.0

    def test_network_error_types(self):
        error_names = {cls.__name__ for cls in _NETWORK_ERRORS}
        assert "TimeoutException" in error_names
        assert "ConnectError" in error_names
        assert "ReadError" in error_names
        assert "WriteError" in error_names
        # Pool timeouts are caught through TimeoutException
        assert issubclass(httpx.PoolTimeout, _NETWORK_ERRORS)


class TestBackoff:
    def test_attempt_0(self):
        wait = HTTPClient._backoff(0)
        assert 1.0 <= wait <= 2.0  # 2^0 + jitter(0,1)

    def test_attempt_1(self):
        wait = HTTPClient._backoff(1)
        assert 2.0 <= wait <= 3.0

    def test_caps_at_max(self):
        wait = HTTPClient._backoff(100)
        assert wait <= _MAX_BACKOFF

    def test_retry_after_is_a_floor(self):
        response = httpx.Response(429, headers={"Retry-After": "12"})
        assert HTTPClient._backoff(0, response) >= 12.0


class TestClientInit:
    def test_default_headers_set(self):
        client = HTTPClient(Settings())
        assert "User-Agent" in client._default_headers
        assert client._default_headers["Accept-Language"].startswith("en")

    def test_custom_headers_override(self):
        client = HTTPClient(Settings(), headers={"X-Custom": "test"})
        assert client._default_headers["X-Custom"] == "test"

    def test_settings_used_for_limits(self):
        client = HTTPClient(Settings(request_timeout=5, max_retries=1))
        assert client._timeout == 5
        assert client._max_retries == 1

    def test_explicit_arguments_win(self):
        client = HTTPClient(Settings(max_retries=4), max_retries=0)
        assert client._max_retries == 0


class TestRequests:
    @respx.mock
    @pytest.mark.asyncio()
    async def test_returns_client_errors_without_retry(self):
        route = respx.head("https://r1.googlevideo.com/videoplayback").respond(404)
        async with HTTPClient(Settings(max_retries=3)) as client:
            response = await client.head("https://r1.googlevideo.com/videoplayback")
        assert response.status_code == 404
        assert route.call_count == 1

    @respx.mock
    @pytest.mark.asyncio()
    async def test_get_text_raises_for_status(self):
        respx.get("https://www.youtube.com/get_video_info").respond(403)
        async with HTTPClient(Settings(max_retries=0)) as client:
            with pytest.raises(httpx.HTTPStatusError):
                await client.get_text("https://www.youtube.com/get_video_info")

    @respx.mock
    @pytest.mark.asyncio()
    async def test_get_text_passes_params(self):
        route = respx.get("https://www.youtube.com/get_video_info").respond(200, text="status=ok")
        async with HTTPClient(Settings(max_retries=0)) as client:
            text = await client.get_text(
                "https://www.youtube.com/get_video_info", params={"video_id": "dQw4w9WgXcQ"}
            )
        assert text == "status=ok"
        assert route.calls.last.request.url.params["video_id"] == "dQw4w9WgXcQ"

    @respx.mock
    @pytest.mark.asyncio()
    async def test_network_error_reraised_after_retries(self, monkeypatch):
        monkeypatch.setattr(HTTPClient, "_backoff", staticmethod(lambda attempt, response=None: 0.0))
        route = respx.get("https://www.youtube.com/embed/x").mock(
            side_effect=httpx.ConnectError("boom")
        )
        async with HTTPClient(Settings(max_retries=2)) as client:
            with pytest.raises(httpx.ConnectError):
                await client.get("https://www.youtube.com/embed/x")
        assert route.call_count == 3

    @respx.mock
    @pytest.mark.asyncio()
    async def test_retries_server_error_then_succeeds(self, monkeypatch):
        monkeypatch.setattr(HTTPClient, "_backoff", staticmethod(lambda attempt, response=None: 0.0))
        route = respx.get("https://www.youtube.com/embed/x")
        route.side_effect = [httpx.Response(503), httpx.Response(200, text="ok")]
        async with HTTPClient(Settings(max_retries=2)) as client:
            response = await client.get("https://www.youtube.com/embed/x")
        assert response.status_code == 200
        assert route.call_count == 2
