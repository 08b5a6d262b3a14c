"""HTTP utilities for fetching documents with retry logic."""

from __future__ import annotations

import asyncio
import logging
from typing import Final

import httpx

from amp_timeline.config import (
    AMP_TIMELINE_FETCH_BACKOFF_S,
    AMP_TIMELINE_FETCH_MAX_RETRIES,
    AMP_TIMELINE_FETCH_TIMEOUT_S,
    AMP_TIMELINE_USER_AGENT,
)
from amp_timeline.exceptions import DocumentNotFoundError, FetchError, RateLimitError

logger = logging.getLogger(__name__)

RETRY_STATUS_CODES: Final[frozenset[int]] = frozenset({429, 500, 502, 503, 504})

_MAX_REDIRECTS: Final[int] = 5


async def fetch_with_retries(
    url: str,
    *,
    client: httpx.AsyncClient | None = None,
) -> str:
    """Fetch a document from a URL, retrying transient failures.

    Args:
        url: The URL to fetch.
        client: Optional httpx.AsyncClient to reuse. If not provided, a new
            client is created for this request.

    Returns:
        The response body as text.

    Raises:
        DocumentNotFoundError: If the server answers 404.
        RateLimitError: If every attempt was answered with 429.
        FetchError: If the fetch fails after all retries.
    """
    timeout = httpx.Timeout(AMP_TIMELINE_FETCH_TIMEOUT_S)
    headers = {"User-Agent": AMP_TIMELINE_USER_AGENT}

    async def do_fetch(http_client: httpx.AsyncClient) -> str:
        last_exc: Exception | None = None
        rate_limited = True

        for attempt in range(AMP_TIMELINE_FETCH_MAX_RETRIES + 1):
            try:
                response = await http_client.get(url)

                if response.status_code == 404:
                    raise DocumentNotFoundError(f"Document not found at {url}")

                if response.status_code in RETRY_STATUS_CODES:
                    rate_limited = rate_limited and response.status_code == 429
                    last_exc = FetchError(f"HTTP {response.status_code} from {url}")
                else:
                    response.raise_for_status()
                    return response.text
            except (httpx.RequestError, httpx.HTTPStatusError) as exc:
                rate_limited = False
                last_exc = exc

            if attempt < AMP_TIMELINE_FETCH_MAX_RETRIES:
                backoff = AMP_TIMELINE_FETCH_BACKOFF_S * (2**attempt)
                logger.debug(
                    "Retrying %s in %.2fs after attempt %d: %s",
                    url,
                    backoff,
                    attempt + 1,
                    last_exc,
                )
                await asyncio.sleep(backoff)

        if rate_limited:
            raise RateLimitError(f"Rate limited while fetching {url}")
        raise FetchError(f"Failed to fetch {url}: {last_exc}")

    if client is not None:
        return await do_fetch(client)

    async with httpx.AsyncClient(
        timeout=timeout,
        headers=headers,
        follow_redirects=True,
        max_redirects=_MAX_REDIRECTS,
    ) as new_client:
        return await do_fetch(new_client)
