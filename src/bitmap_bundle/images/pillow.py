"""Pillow image backend implementation.

Rasters are ``PIL.Image.Image`` objects. Rescaling uses one of Pillow's
resampling filters, Lanczos by default.
"""

from io import BytesIO
from typing import Any

from loguru import logger
from PIL import Image as PILImage
from PIL import UnidentifiedImageError

from ..errors import InvalidRasterError
from .base import ImageBackend, Size

RESAMPLE_FILTERS = {
    "nearest": PILImage.Resampling.NEAREST,
    "box": PILImage.Resampling.BOX,
    "bilinear": PILImage.Resampling.BILINEAR,
    "hamming": PILImage.Resampling.HAMMING,
    "bicubic": PILImage.Resampling.BICUBIC,
    "lanczos": PILImage.Resampling.LANCZOS,
}


class PillowBackend(ImageBackend):
    """Image backend operating on Pillow images."""

    def __init__(self, resample: str = "lanczos"):
        """Initialize the backend.

        Args:
            resample: Resampling filter name, one of RESAMPLE_FILTERS

        Raises:
            ValueError: If the filter name is not recognized

        """
        key = resample.lower()
        if key not in RESAMPLE_FILTERS:
            raise ValueError(f"Unknown resample filter: {resample}")
        self.resample = key
        self._filter = RESAMPLE_FILTERS[key]
        logger.debug("PillowBackend initialized: resample={}", key)

    @property
    def name(self) -> str:
        return "pillow"

    def validate(self, raster: Any) -> bool:
        return isinstance(raster, PILImage.Image) and raster.width > 0 and raster.height > 0

    def size(self, raster: Any) -> Size:
        width, height = raster.size
        return Size(width=width, height=height)

    def resize(self, source: Any, target: Size) -> Any:
        logger.debug(
            "Rescaling {}x{} -> {} ({})", source.width, source.height, target, self.resample
        )
        return source.resize(target.as_tuple(), self._filter)

    def decode(self, data: bytes) -> Any:
        try:
            img = PILImage.open(BytesIO(data))
            img.load()
        except (UnidentifiedImageError, OSError) as e:
            raise InvalidRasterError(f"Cannot decode image data: {e}") from e

        # Palette and exotic modes rescale poorly, normalize like icons usually are
        has_transparency = img.mode in ("RGBA", "LA") or (
            img.mode == "P" and "transparency" in img.info
        )
        if img.mode == "P":
            img = img.convert("RGBA") if has_transparency else img.convert("RGB")
        elif img.mode not in ("RGB", "RGBA", "L", "LA"):
            img = img.convert("RGBA")
        return img
