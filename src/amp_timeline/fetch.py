"""Load HTML documents from local files or URLs."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from urllib.parse import urlparse

from amp_timeline.exceptions import DocumentNotFoundError, FetchError
from amp_timeline.http_utils import fetch_with_retries

logger = logging.getLogger(__name__)

_REMOTE_SCHEMES = frozenset({"http", "https"})


def is_remote(source: str) -> bool:
    """Return True if ``source`` is an http(s) URL."""
    return urlparse(source).scheme.lower() in _REMOTE_SCHEMES


async def load_document(source: str) -> str:
    """Load the markup at ``source``.

    Args:
        source: An http(s) URL or a path to a local file.

    Returns:
        The document text.

    Raises:
        DocumentNotFoundError: If the file does not exist or the URL is a 404.
        FetchError: If a remote fetch fails after retries, or a local file
            cannot be read as UTF-8.
    """
    if is_remote(source):
        logger.debug("Fetching %s", source)
        return await fetch_with_retries(source)

    path = Path(source).expanduser()
    if not path.is_file():
        raise DocumentNotFoundError(f"HTML file not found: {path}")
    try:
        return await asyncio.to_thread(path.read_text, encoding="utf-8")
    except (UnicodeDecodeError, OSError) as exc:
        raise FetchError(f"Could not read {path}: {exc}") from exc
