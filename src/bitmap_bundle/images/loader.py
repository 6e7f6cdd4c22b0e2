"""
Raster loading utilities.

Reads bundle variants from local files or fetches them from http(s) URLs,
decoding with the configured image backend.
"""

import time
from pathlib import Path
from typing import Any

import httpx
from loguru import logger

from ..errors import InvalidRasterError, RasterLoadError
from .base import ImageBackend

FETCH_ATTEMPTS = 3


def is_url(source: str | Path) -> bool:
    """Return True if the source names an http(s) URL."""
    return isinstance(source, str) and source.startswith(("http://", "https://"))


def fetch_bytes(url: str, timeout: int = 30) -> bytes:
    """
    Fetch raw bytes from a URL, retrying with exponential backoff.

    Args:
        url: URL to fetch
        timeout: HTTP request timeout in seconds

    Returns:
        Response body

    Raises:
        RasterLoadError: If every attempt fails
    """
    for attempt in range(FETCH_ATTEMPTS):
        try:
            with httpx.Client(timeout=timeout, follow_redirects=True) as client:
                response = client.get(url)
                response.raise_for_status()
                logger.debug("Fetched {}: {} bytes", url[:60], len(response.content))
                return response.content
        except httpx.HTTPError as e:
            if attempt == FETCH_ATTEMPTS - 1:
                logger.warning(
                    "Failed to fetch image after {} attempts: {} - {}", FETCH_ATTEMPTS, url[:60], e
                )
                raise RasterLoadError(url, str(e)) from e
            logger.debug("Fetch attempt {} failed, retrying: {}", attempt + 1, e)
            time.sleep(2**attempt)  # Exponential backoff
    raise RasterLoadError(url, "no attempts made")


def load_raster(source: str | Path, backend: ImageBackend, timeout: int = 30) -> Any:
    """
    Load one raster from a file path or URL.

    Args:
        source: Local path or http(s) URL
        backend: Backend used to decode the data
        timeout: HTTP timeout for URL sources

    Returns:
        Decoded raster

    Raises:
        RasterLoadError: If the source cannot be read or decoded
    """
    if is_url(source):
        data = fetch_bytes(str(source), timeout=timeout)
    else:
        path = Path(source)
        try:
            data = path.read_bytes()
        except OSError as e:
            raise RasterLoadError(str(source), str(e)) from e

    try:
        raster = backend.decode(data)
    except InvalidRasterError as e:
        raise RasterLoadError(str(source), str(e)) from e

    logger.debug("Loaded {} ({})", source, backend.size(raster))
    return raster


def load_rasters(
    sources: list[str | Path], backend: ImageBackend, timeout: int = 30
) -> list[Any]:
    """Load several rasters, preserving the order of ``sources``."""
    return [load_raster(source, backend, timeout=timeout) for source in sources]
