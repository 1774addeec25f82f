# ABOUTME: HTTP client factory for talking to api.weather.gov.
# ABOUTME: Retries live here in the transport; the forecast engine never retries.

import httpx
from pydantic_ai.retries import AsyncTenacityTransport, RetryConfig, wait_retry_after
from tenacity import retry_if_exception_type, stop_after_attempt

from nws_forecast.config import NwsConfig


def create_http_client(config: NwsConfig) -> httpx.AsyncClient:
    """Create an httpx client with tenacity retry on transient HTTP errors.

    Retries connection errors, timeouts, and 429/5xx responses with exponential backoff.
    The NWS API rejects requests without a User-Agent, so one is always set.
    """
    transport = AsyncTenacityTransport(
        RetryConfig(
            retry=retry_if_exception_type((httpx.ConnectError, httpx.ReadTimeout, httpx.HTTPStatusError)),
            wait=wait_retry_after(max_wait=30),
            stop=stop_after_attempt(3),
            reraise=True,
        ),
        validate_response=_raise_for_transient_status,
    )
    return httpx.AsyncClient(
        transport=transport,
        timeout=config.timeout_seconds,
        headers={"User-Agent": config.user_agent, "Accept": "application/geo+json"},
    )


def _raise_for_transient_status(response: httpx.Response) -> None:
    """Only 429 and 5xx are worth another attempt; other errors surface on the first try."""
    if response.status_code == 429 or response.status_code >= 500:
        response.raise_for_status()
