from __future__ import annotations

import asyncio
import logging

import httpx

from app.core.config import Settings


logger = logging.getLogger(__name__)

RETRYABLE_STATUS = frozenset({429, 500, 502, 503, 504})


def create_http_client(settings: Settings) -> httpx.AsyncClient:
    """Shared client; relative URLs resolve against the OpenWeather base URL."""
    return httpx.AsyncClient(
        base_url=settings.openweather_base_url,
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        limits=httpx.Limits(max_keepalive_connections=10, max_connections=20),
        headers={"User-Agent": "weatherhome-api/0.1"},
        follow_redirects=True,
    )


async def request_with_retries(
    client: httpx.AsyncClient,
    *,
    method: str,
    url: str,
    retries: int,
    backoff_seconds: float,
    **kwargs,
) -> httpx.Response:
    """Send a request, retrying transient statuses and transport errors.

    With ``retries=0`` this is a single attempt and the last response or
    error is returned to the caller unchanged.
    """
    attempt = 0
    while True:
        try:
            resp = await client.request(method, url, **kwargs)
        except (httpx.TimeoutException, httpx.NetworkError) as exc:
            if attempt >= retries:
                raise
            logger.warning("%s %s failed (%s), retrying", method, url.split("?", 1)[0], type(exc).__name__)
        else:
            if resp.status_code not in RETRYABLE_STATUS or attempt >= retries:
                return resp
            logger.warning("%s %s returned %d, retrying", method, url.split("?", 1)[0], resp.status_code)
        await asyncio.sleep(backoff_seconds * (2**attempt))
        attempt += 1
