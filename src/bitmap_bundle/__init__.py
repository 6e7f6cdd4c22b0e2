"""
Bitmap bundles.

Keeps several resolutions of the same graphic together and hands back a
bitmap of any requested size, using a variant of that size when there is one
and otherwise rescaling (and caching) the closest one.

Usage:
    from bitmap_bundle import BitmapBundle

    bundle = BitmapBundle.from_files(["open_32.png", "open_48.png", "open_64.png"])
    bitmap = bundle.get_bitmap((56, 56))

    # Or from the command line
    bitmap-bundle resolve open_32.png open_48.png open_64.png --size 56x56
"""

__version__ = "0.1.0"

from loguru import logger

from .bundle import BitmapBundle, RasterVariant, RescaleCache, VariantSet, resolve
from .errors import (
    BitmapBundleError,
    InvalidBundleError,
    InvalidRasterError,
    InvalidSizeError,
    RasterLoadError,
)
from .images import ImageBackend, PillowBackend, Size, create_image_backend

# Silent unless the application calls setup_logging()
logger.disable(__name__)

__all__ = [
    "BitmapBundle",
    "BitmapBundleError",
    "ImageBackend",
    "InvalidBundleError",
    "InvalidRasterError",
    "InvalidSizeError",
    "PillowBackend",
    "RasterLoadError",
    "RasterVariant",
    "RescaleCache",
    "Size",
    "VariantSet",
    "create_image_backend",
    "resolve",
]
