r"""Polling an HTTP service with eventually and until.

The service is simulated with ``httpx.MockTransport`` so no network
access is needed.
"""

from __future__ import annotations

import httpx
import pytest

from aeventually import EventuallyConfig, EventuallyTimeoutError, eventually, until

BASE_URL = "http://service.test"


def make_client(statuses: list[int], requests: list[httpx.Request]) -> httpx.AsyncClient:
    responses = iter(statuses)

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        status = next(responses)
        return httpx.Response(status, json={"status": "up" if status == 200 else "down"})

    return httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url=BASE_URL)


#####################################
#     Tests for HTTP polling        #
#####################################


@pytest.mark.asyncio
async def test_until_service_is_healthy() -> None:
    """Test polling a health endpoint until it returns 200."""
    requests = []
    async with make_client([503, 503, 200], requests) as client:

        async def is_healthy() -> bool:
            response = await client.get("/health")
            return response.status_code == 200

        await until(is_healthy, duration=5.0, interval=0.01)

    assert len(requests) == 3
    assert all(request.url.path == "/health" for request in requests)


@pytest.mark.asyncio
async def test_eventually_retries_http_status_errors() -> None:
    """Test HTTP status errors are retried when suppressed."""
    requests = []
    config = EventuallyConfig(
        duration=5.0, interval=0.01, suppress_exceptions=(httpx.HTTPStatusError,)
    )
    async with make_client([500, 502, 200], requests) as client:

        async def fetch_status() -> dict:
            response = await client.get("/status")
            response.raise_for_status()
            return response.json()

        assert await eventually(fetch_status, config) == {"status": "up"}

    assert len(requests) == 3


@pytest.mark.asyncio
async def test_eventually_http_timeout_reports_last_response() -> None:
    """Test the timeout error keeps the last HTTP error."""
    requests = []
    config = EventuallyConfig(
        duration=5.0,
        interval=0.01,
        max_attempts=3,
        suppress_exceptions=(httpx.HTTPStatusError,),
    )
    async with make_client([503, 503, 503], requests) as client:

        async def fetch_status() -> dict:
            response = await client.get("/status")
            response.raise_for_status()
            return response.json()

        with pytest.raises(EventuallyTimeoutError) as exc_info:
            await eventually(fetch_status, config)

    assert exc_info.value.attempts == 3
    assert isinstance(exc_info.value.last_error, httpx.HTTPStatusError)
    assert exc_info.value.last_error.response.status_code == 503


@pytest.mark.asyncio
async def test_eventually_connection_error_propagates() -> None:
    """Test an unsuppressed connection error propagates."""
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        msg = "connection refused"
        raise httpx.ConnectError(msg, request=request)

    config = EventuallyConfig(duration=5.0, suppress_exceptions=(httpx.HTTPStatusError,))
    async with httpx.AsyncClient(
        transport=httpx.MockTransport(handler), base_url=BASE_URL
    ) as client:
        with pytest.raises(httpx.ConnectError, match=r"connection refused"):
            await eventually(lambda: client.get("/status"), config)

    assert len(calls) == 1


@pytest.mark.asyncio
async def test_eventually_predicate_on_response() -> None:
    """Test a predicate on the HTTP response."""
    requests = []
    async with make_client([503, 200], requests) as client:
        response = await eventually(
            lambda: client.get("/status"),
            duration=5.0,
            interval=0.01,
            predicate=lambda state: state.result.status_code == 200,
        )

    assert response.json() == {"status": "up"}
    assert len(requests) == 2
