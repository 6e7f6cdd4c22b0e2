"""Pytest fixtures and configuration for bitmap-bundle tests.

This module provides shared fixtures for building rasters, image files and
backends used by the bundle, resolver, loader and CLI tests.
"""

import tempfile
from collections.abc import Callable, Generator
from io import BytesIO
from pathlib import Path

import pytest
from loguru import logger
from PIL import Image

from bitmap_bundle.images.pillow import PillowBackend

# --- Temporary Directory Fixtures ---


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmp:
        yield Path(tmp)


# --- Raster Fixtures ---


@pytest.fixture
def backend() -> PillowBackend:
    """Create a Pillow backend with the default filter."""
    return PillowBackend()


@pytest.fixture
def make_raster() -> Callable[..., Image.Image]:
    """Return a factory creating solid RGBA rasters of a given size."""

    def _make(width: int, height: int | None = None, color: str = "red") -> Image.Image:
        return Image.new("RGBA", (width, height if height is not None else width), color=color)

    return _make


@pytest.fixture
def icon_rasters(make_raster) -> list[Image.Image]:
    """Create 32, 48 and 64 pixel variants of the same icon."""
    return [
        make_raster(32, color="red"),
        make_raster(48, color="green"),
        make_raster(64, color="blue"),
    ]


@pytest.fixture
def png_bytes() -> bytes:
    """Create encoded PNG bytes for a 24x24 image."""
    img = Image.new("RGBA", (24, 24), color=(255, 0, 0, 128))
    buffer = BytesIO()
    img.save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def variant_files(temp_dir: Path, icon_rasters) -> list[Path]:
    """Write the icon variants to PNG files."""
    paths = []
    for raster in icon_rasters:
        path = temp_dir / f"icon_{raster.width}.png"
        raster.save(path, format="PNG")
        paths.append(path)
    return paths


# --- Logging Fixtures ---


@pytest.fixture
def log_messages() -> Generator[list[str], None, None]:
    """Capture loguru records from the package while the test runs."""
    messages: list[str] = []
    logger.enable("bitmap_bundle")
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)
    logger.disable("bitmap_bundle")


# --- Settings Override Fixtures ---


@pytest.fixture
def mock_settings(monkeypatch):
    """Override settings with test values."""
    monkeypatch.setenv("RESAMPLE_FILTER", "nearest")
    monkeypatch.setenv("CACHE_WARN_THRESHOLD", "2")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    from bitmap_bundle.config import Settings

    return Settings()
