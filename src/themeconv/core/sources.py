"""
Theme source reading.

A source is either a local file path or an http(s) URL. Reading either
returns the full text or raises SourceNotFoundError; there is no partial
result and no retry.
"""

from __future__ import annotations

import logging
from pathlib import Path
from urllib.parse import urlparse

import httpx

from .errors import make_source_error

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


def is_url(source: str) -> bool:
    """True for absolute http(s) URLs."""
    parsed = urlparse(source)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def read_file_text(path: str | Path) -> str:
    """Read a local theme file as UTF-8 text.

    Raises:
        SourceNotFoundError: If the file is missing, unreadable or not text.
    """
    file_path = Path(path)
    logger.debug(f"Reading file: {file_path}")
    try:
        return file_path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise make_source_error("Input file not found", str(file_path)) from e
    except (OSError, UnicodeDecodeError) as e:
        raise make_source_error("Input file could not be read", str(file_path), str(e)) from e


def fetch_url_text(
    url: str,
    *,
    client: httpx.Client | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> str:
    """Fetch a theme over HTTP with a plain GET.

    Args:
        url: Absolute http(s) URL.
        client: Optional pre-configured client (tests pass one with a mock transport).
        timeout: Timeout in seconds when a client is created here.

    Raises:
        SourceNotFoundError: On connection failure, timeout or non-2xx status.
    """
    logger.debug(f"Fetching URL: {url}")
    try:
        if client is not None:
            response = client.get(url)
        else:
            with httpx.Client(timeout=timeout, follow_redirects=True) as owned:
                response = owned.get(url)
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        raise make_source_error(
            "Theme URL returned an error", url, f"HTTP {e.response.status_code}"
        ) from e
    except httpx.HTTPError as e:
        raise make_source_error("Theme URL unreachable", url, str(e) or type(e).__name__) from e
    return response.text


def read_source_text(
    source: str | Path,
    *,
    client: httpx.Client | None = None,
) -> str:
    """Read a source, dispatching on whether it is a URL or a file path."""
    if isinstance(source, str) and is_url(source):
        return fetch_url_text(source, client=client)
    return read_file_text(source)
