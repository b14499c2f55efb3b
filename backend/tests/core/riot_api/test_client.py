"""
Tests for the Riot API HTTP client.
"""

from unittest.mock import AsyncMock, patch

import httpx
import pytest

from riot_kernel.core.riot_api.client import RiotAPIClient
from riot_kernel.core.riot_api.errors import (
    AuthenticationError,
    DecodeError,
    ForbiddenError,
    NotFoundError,
    RateLimitError,
    RiotAPIError,
    ServiceUnavailableError,
)
from riot_kernel.core.riot_api.rate_limiter import RateLimiter

URL = "https://na1.api.riotgames.com/lol/match/v4/matches/123"


def make_client(handler, max_retries=2):
    return RiotAPIClient(
        api_key="RGAPI-test",
        max_retries=max_retries,
        backoff_base=0,
        rate_limiter=RateLimiter(request_spacing=0),
        transport=httpx.MockTransport(handler),
    )


async def test_get_success_sends_token_and_params():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"ok": True})

    async with make_client(handler) as client:
        data = await client.get(URL, params=[("queue", 400), ("queue", 420)])

    assert data == {"ok": True}
    assert seen[0].headers["X-Riot-Token"] == "RGAPI-test"
    assert seen[0].url.params.get_list("queue") == ["400", "420"]


@pytest.mark.parametrize(
    "status,error_class",
    [
        (401, AuthenticationError),
        (403, ForbiddenError),
        (404, NotFoundError),
    ],
)
async def test_client_errors_are_not_retried(status, error_class):
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(status, json={"status": {"status_code": status}})

    async with make_client(handler) as client:
        with pytest.raises(error_class) as exc_info:
            await client.get(URL)

    assert exc_info.value.status_code == status
    assert exc_info.value.response_data == {"status": {"status_code": status}}
    assert len(calls) == 1


async def test_rate_limited_then_success():
    responses = iter(
        [
            httpx.Response(429, headers={"Retry-After": "0"}),
            httpx.Response(200, json=[1, 2, 3]),
        ]
    )

    async with make_client(lambda request: next(responses)) as client:
        assert await client.get(URL) == [1, 2, 3]


async def test_rate_limit_exhausts_retries():
    def handler(request):
        return httpx.Response(
            429, headers={"Retry-After": "0", "X-App-Rate-Limit": "20:1"}
        )

    async with make_client(handler, max_retries=1) as client:
        with pytest.raises(RateLimitError) as exc_info:
            await client.get(URL)

    assert exc_info.value.status_code == 429
    assert exc_info.value.app_rate_limit == "20:1"


async def test_server_error_retried_then_service_unavailable():
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(503)

    async with make_client(handler, max_retries=2) as client:
        with pytest.raises(ServiceUnavailableError):
            await client.get(URL)

    assert len(calls) == 3


async def test_transport_error_becomes_riot_api_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    async with make_client(handler, max_retries=1) as client:
        with pytest.raises(RiotAPIError, match="Request failed"):
            await client.get(URL)


async def test_invalid_json_is_decode_error():
    def handler(request):
        return httpx.Response(200, content=b"not json")

    async with make_client(handler) as client:
        with pytest.raises(DecodeError) as exc_info:
            await client.get(URL)

    assert exc_info.value.status_code == 502


@pytest.mark.parametrize(
    "retry_after", ["Wed, 21 Oct 2026 07:28:00 GMT", "soon", "nan", "-3"]
)
async def test_unusable_retry_after_uses_default_delay(retry_after):
    responses = iter(
        [
            httpx.Response(429, headers={"Retry-After": retry_after}),
            httpx.Response(200, json=[1]),
        ]
    )

    with patch(
        "riot_kernel.core.riot_api.client.asyncio.sleep", new_callable=AsyncMock
    ) as mock_sleep:
        async with make_client(lambda request: next(responses)) as client:
            assert await client.get(URL) == [1]

    mock_sleep.assert_awaited_once_with(1.0)


async def test_unusable_retry_after_on_last_attempt_is_rate_limit_error():
    def handler(request):
        return httpx.Response(429, headers={"Retry-After": "later"})

    async with make_client(handler, max_retries=0) as client:
        with pytest.raises(RateLimitError) as exc_info:
            await client.get(URL)

    assert exc_info.value.retry_after == 1.0
