"""Tests for document loading."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest

from amp_timeline.exceptions import DocumentNotFoundError, FetchError
from amp_timeline.fetch import is_remote, load_document


@pytest.mark.parametrize(
    ("source", "expected"),
    [
        ("https://example.com/timeline.html", True),
        ("HTTP://example.com", True),
        ("timeline.html", False),
        ("/tmp/timeline.html", False),
        ("file:///tmp/timeline.html", False),
    ],
)
def test_is_remote(source: str, expected: bool) -> None:
    assert is_remote(source) is expected


@pytest.mark.asyncio
async def test_reads_local_file(tmp_path: Path, valid_html: str) -> None:
    """Reads a local UTF-8 file."""
    path = tmp_path / "timeline.html"
    path.write_text(valid_html, encoding="utf-8")

    assert await load_document(str(path)) == valid_html


@pytest.mark.asyncio
async def test_missing_local_file(tmp_path: Path) -> None:
    """Raises DocumentNotFoundError for a missing file."""
    with pytest.raises(DocumentNotFoundError, match="HTML file not found"):
        await load_document(str(tmp_path / "missing.html"))


@pytest.mark.asyncio
async def test_fetches_urls() -> None:
    """Delegates http(s) sources to fetch_with_retries."""
    with patch("amp_timeline.fetch.fetch_with_retries", AsyncMock(return_value="<html></html>")) as mock_fetch:
        result = await load_document("https://example.com/timeline.html")

    assert result == "<html></html>"
    mock_fetch.assert_awaited_once_with("https://example.com/timeline.html")


@pytest.mark.asyncio
async def test_undecodable_local_file(tmp_path: Path) -> None:
    """Raises FetchError when a local file is not valid UTF-8."""
    path = tmp_path / "latin1.html"
    path.write_bytes(b"<html><body>caf\xe9</body></html>")

    with pytest.raises(FetchError, match="Could not read"):
        await load_document(str(path))
