"""
Size model and abstract image backend.

The backend is the only thing bundles know about pixels: it validates,
measures, decodes and rescales opaque raster objects. Enables swapping
Pillow for another raster library.
"""

from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..errors import InvalidSizeError


class Size(BaseModel):
    """A (width, height) pair in pixels."""

    model_config = ConfigDict(frozen=True)

    width: int = Field(description="Width in pixels")
    height: int = Field(description="Height in pixels")

    @property
    def is_empty(self) -> bool:
        """True if either component is zero or negative."""
        return self.width <= 0 or self.height <= 0

    @property
    def area(self) -> int:
        return self.width * self.height

    def as_tuple(self) -> tuple[int, int]:
        return (self.width, self.height)

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"

    @classmethod
    def coerce(cls, value: "Size | tuple[int, int] | str") -> "Size":
        """
        Build a Size from a Size, a (width, height) pair, or a string.

        Strings are either "WxH" or a single number meaning a square size.
        Emptiness is not checked here; callers decide whether an empty size
        is acceptable.

        Raises:
            InvalidSizeError: If the value cannot be interpreted as a size
        """
        if isinstance(value, Size):
            return value
        if isinstance(value, str):
            parts = value.lower().replace(" ", "").split("x")
            try:
                numbers = [int(p) for p in parts]
            except ValueError:
                raise InvalidSizeError(f"Cannot parse size: {value!r}") from None
            if len(numbers) == 1:
                return cls(width=numbers[0], height=numbers[0])
            if len(numbers) == 2:
                return cls(width=numbers[0], height=numbers[1])
            raise InvalidSizeError(f"Cannot parse size: {value!r}")
        if isinstance(value, (tuple, list)) and len(value) == 2:
            width, height = value
            if all(isinstance(n, int) and not isinstance(n, bool) for n in (width, height)):
                return cls(width=width, height=height)
        raise InvalidSizeError(f"Not a size: {value!r}")


class ImageBackend(ABC):
    """Abstract interface for the raster operations bundles depend on."""

    @abstractmethod
    def validate(self, raster: Any) -> bool:
        """Return True if the raster is usable: the right type and non-empty."""
        pass

    @abstractmethod
    def size(self, raster: Any) -> Size:
        """Return the intrinsic size of a raster."""
        pass

    @abstractmethod
    def resize(self, source: Any, target: Size) -> Any:
        """
        Produce a new raster of exactly ``target`` size from ``source``.

        Args:
            source: Raster to rescale (not modified)
            target: Non-empty output size

        Returns:
            A new raster whose size equals target
        """
        pass

    @abstractmethod
    def decode(self, data: bytes) -> Any:
        """
        Decode encoded image data (PNG, JPEG, ...) into a raster.

        Raises:
            InvalidRasterError: If the data is not a decodable image
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the backend identifier."""
        pass
