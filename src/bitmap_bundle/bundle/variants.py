"""
Variant models.

A variant is one raster of the bundled graphic at its natural size; a
VariantSet is the immutable, ordered collection of them.
"""

from collections.abc import Iterable, Iterator
from typing import Any

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

from ..errors import InvalidBundleError, InvalidRasterError
from ..images.base import ImageBackend, Size


class RasterVariant(BaseModel):
    """A raster together with its intrinsic size."""

    model_config = ConfigDict(frozen=True)

    raster: Any = Field(description="Opaque backend raster")
    size: Size = Field(description="Size reported by the backend for raster")

    @classmethod
    def from_raster(cls, raster: Any, backend: ImageBackend) -> "RasterVariant":
        """
        Wrap a raster, taking its size from the backend.

        Raises:
            InvalidRasterError: If the backend rejects the raster
        """
        if not backend.validate(raster):
            raise InvalidRasterError(f"Invalid raster: {type(raster).__name__}")
        return cls(raster=raster, size=backend.size(raster))


class VariantSet:
    """Immutable ordered collection of variants. Empty means invalid."""

    __slots__ = ("_variants",)

    def __init__(self, variants: Iterable[RasterVariant] = ()):
        self._variants: tuple[RasterVariant, ...] = tuple(variants)

    @classmethod
    def from_rasters(cls, rasters: Iterable[Any], backend: ImageBackend) -> "VariantSet":
        """
        Build a set from rasters, keeping their order.

        Returns the empty set if ``rasters`` is empty or if any raster is
        invalid; a partially valid input never produces a partial set.
        """
        variants = []
        for index, raster in enumerate(rasters):
            try:
                variants.append(RasterVariant.from_raster(raster, backend))
            except InvalidRasterError as e:
                logger.warning("Rejecting bundle, raster #{} is invalid: {}", index, e)
                return cls()
        if not variants:
            logger.debug("No rasters given, creating empty bundle")
        return cls(variants)

    @classmethod
    def from_single(cls, raster: Any, backend: ImageBackend) -> "VariantSet":
        """Build a one-element set, or the empty set if the raster is invalid."""
        return cls.from_rasters([raster], backend)

    def default_size(self) -> Size:
        """
        Return the size of the smallest variant by area.

        The first variant wins among equal areas.

        Raises:
            InvalidBundleError: If the set is empty
        """
        if not self._variants:
            raise InvalidBundleError("Empty bundle has no default size")
        # min() keeps the first of equal keys
        return min(self._variants, key=lambda v: v.size.area).size

    def find_exact(self, size: Size) -> RasterVariant | None:
        """Return the first variant of exactly ``size``, if any."""
        for variant in self._variants:
            if variant.size == size:
                return variant
        return None

    def sizes(self) -> list[Size]:
        return [v.size for v in self._variants]

    def __len__(self) -> int:
        return len(self._variants)

    def __iter__(self) -> Iterator[RasterVariant]:
        return iter(self._variants)

    def __getitem__(self, index: int) -> RasterVariant:
        return self._variants[index]

    def __bool__(self) -> bool:
        return bool(self._variants)

    def __repr__(self) -> str:
        sizes = ", ".join(str(s) for s in self.sizes())
        return f"VariantSet([{sizes}])"
