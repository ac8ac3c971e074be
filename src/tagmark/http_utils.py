"""HTTP utilities for fetching documents with retry logic and a size ceiling."""

from __future__ import annotations

import asyncio
from typing import Final

import httpx

from tagmark.config import (
    TAGMARK_FETCH_BACKOFF_S,
    TAGMARK_FETCH_MAX_RETRIES,
    TAGMARK_FETCH_TIMEOUT_S,
    TAGMARK_MAX_INPUT_BYTES,
    TAGMARK_USER_AGENT,
)
from tagmark.exceptions import SourceError
from tagmark.utils.logging_config import get_logger

logger = get_logger(__name__)

RETRY_STATUS_CODES: Final[frozenset[int]] = frozenset({429, 500, 502, 503, 504})

_MAX_REDIRECTS: Final[int] = 5


async def fetch_with_retries(
    url: str,
    *,
    client: httpx.AsyncClient | None = None,
    max_bytes: int | None = None,
    on_404: type[Exception] | None = None,
    on_404_message: str | None = None,
) -> bytes:
    """Fetch a URL body with retry logic for transient failures.

    The body is streamed and reading stops once ``max_bytes`` have been
    received; anything beyond the ceiling is discarded.

    Args:
        url: The URL to fetch.
        client: Optional httpx.AsyncClient for connection pooling. If not
            provided, a new client is created for this request.
        max_bytes: Ceiling on the returned body size. Defaults to
            ``TAGMARK_MAX_INPUT_BYTES``.
        on_404: Custom exception class to raise on 404. Defaults to SourceError.
        on_404_message: Custom error message for 404 responses. If None,
            a generic message is used.

    Returns:
        The response body, at most ``max_bytes`` long.

    Raises:
        SourceError (or custom on_404 exception): If the fetch fails after all
            retries or returns 404.
    """
    timeout = httpx.Timeout(TAGMARK_FETCH_TIMEOUT_S)
    headers = {"User-Agent": TAGMARK_USER_AGENT}
    limit = TAGMARK_MAX_INPUT_BYTES if max_bytes is None else max_bytes
    last_exc: Exception | None = None
    not_found_exc_class = on_404 or SourceError

    async def do_fetch(http_client: httpx.AsyncClient) -> bytes:
        nonlocal last_exc

        for attempt in range(TAGMARK_FETCH_MAX_RETRIES + 1):
            try:
                async with http_client.stream("GET", url) as response:
                    if response.status_code == 404:
                        message = on_404_message or f"Resource not found at {url}"
                        raise not_found_exc_class(message)

                    if response.status_code in RETRY_STATUS_CODES:
                        last_exc = SourceError(f"HTTP {response.status_code} from {url}")
                    else:
                        response.raise_for_status()
                        return await _read_limited(response, limit, url)
            except (httpx.RequestError, httpx.HTTPStatusError) as exc:
                last_exc = exc

            if attempt < TAGMARK_FETCH_MAX_RETRIES:
                backoff = TAGMARK_FETCH_BACKOFF_S * (2**attempt)
                logger.debug("Retrying %s in %.2fs after: %s", url, backoff, last_exc)
                await asyncio.sleep(backoff)

        raise SourceError(f"Failed to fetch {url}: {last_exc}")

    if client is not None:
        return await do_fetch(client)

    async with httpx.AsyncClient(
        timeout=timeout,
        headers=headers,
        follow_redirects=True,
        max_redirects=_MAX_REDIRECTS,
    ) as new_client:
        return await do_fetch(new_client)


async def _read_limited(response: httpx.Response, limit: int, url: str) -> bytes:
    body = bytearray()
    async for chunk in response.aiter_bytes():
        remaining = limit - len(body)
        if len(chunk) > remaining:
            body.extend(chunk[:remaining])
            logger.warning("Response from %s exceeds %d bytes; body truncated", url, limit)
            break
        body.extend(chunk)
    return bytes(body)
