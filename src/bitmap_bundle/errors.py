"""Exception types raised by bitmap bundles and their image backends."""


class BitmapBundleError(Exception):
    """Base class for all bitmap bundle errors."""


class InvalidBundleError(BitmapBundleError):
    """An operation needing at least one variant was called on an empty bundle."""


class InvalidSizeError(BitmapBundleError, ValueError):
    """A requested size is empty (zero or negative component) or unparsable."""


class InvalidRasterError(BitmapBundleError, ValueError):
    """A raster failed backend validation."""


class RasterLoadError(BitmapBundleError):
    """A raster could not be read from a file or fetched from a URL."""

    def __init__(self, source: str, reason: str):
        super().__init__(f"Could not load raster from {source}: {reason}")
        self.source = source
        self.reason = reason
