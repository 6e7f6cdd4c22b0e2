"""
BitmapBundle: one graphic in several resolutions, handled as a single value.

A bundle is a cheap handle on shared state made of an immutable VariantSet,
a grow-only RescaleCache and the image backend used to rescale. Copies of a
bundle share that state, including every raster already rescaled, and the
state lives as long as the longest-lived copy.

Example:
    >>> bundle = BitmapBundle.from_bitmaps([icon_32, icon_48, icon_64])
    >>> bundle.default_size()
    Size(width=32, height=32)
    >>> bitmap = bundle.get_bitmap((56, 56))  # rescaled from the 64px variant
"""

from collections.abc import Iterable
from pathlib import Path
from typing import Any

from loguru import logger

from ..errors import InvalidBundleError, InvalidRasterError, InvalidSizeError
from ..images import default_backend
from ..images.base import ImageBackend, Size
from ..images.loader import load_rasters
from .cache import RescaleCache
from .resolver import resolve
from .variants import VariantSet

SizeLike = Size | tuple[int, int] | str


class _BundleState:
    """State shared by all copies of a bundle."""

    __slots__ = ("variants", "cache", "backend")

    def __init__(self, variants: VariantSet, backend: ImageBackend):
        self.variants = variants
        self.cache = RescaleCache()
        self.backend = backend


class BitmapBundle:
    """Value-like handle on a set of variants and their rescale cache.

    ``BitmapBundle()`` is the empty, invalid bundle. Use the ``from_*``
    factories to create usable ones.
    """

    __slots__ = ("_state",)

    def __init__(self, state: _BundleState | None = None):
        if state is None:
            state = _BundleState(VariantSet(), default_backend())
        self._state = state

    # --- Factories ---

    @classmethod
    def from_variants(
        cls, variants: VariantSet, backend: ImageBackend | None = None
    ) -> "BitmapBundle":
        """Wrap an existing VariantSet in a new bundle with a fresh cache."""
        return cls(_BundleState(variants, backend or default_backend()))

    @classmethod
    def from_bitmaps(cls, *bitmaps: Any, backend: ImageBackend | None = None) -> "BitmapBundle":
        """
        Create a bundle from a collection of rasters, or from exactly two rasters.

        ``from_bitmaps([a, b, c])`` and ``from_bitmaps(a, b)`` are both accepted.
        An empty collection, or any invalid raster in it, gives an empty bundle.

        Raises:
            TypeError: If called with no arguments or more than two
        """
        if len(bitmaps) == 1:
            rasters: Iterable[Any] = bitmaps[0]
        elif len(bitmaps) == 2:
            rasters = bitmaps
        else:
            raise TypeError(
                f"from_bitmaps() takes a collection or two rasters, got {len(bitmaps)} arguments"
            )
        backend = backend or default_backend()
        return cls.from_variants(VariantSet.from_rasters(rasters, backend), backend)

    @classmethod
    def from_bitmap(cls, bitmap: Any, backend: ImageBackend | None = None) -> "BitmapBundle":
        """Create a single-variant bundle; an invalid raster gives an empty bundle."""
        backend = backend or default_backend()
        return cls.from_variants(VariantSet.from_single(bitmap, backend), backend)

    @classmethod
    def from_image(
        cls, image: Any | bytes, backend: ImageBackend | None = None
    ) -> "BitmapBundle":
        """
        Create a single-variant bundle from a raster or encoded image data.

        Undecodable data gives an empty bundle, like an invalid raster does.
        """
        backend = backend or default_backend()
        if isinstance(image, (bytes, bytearray)):
            try:
                image = backend.decode(bytes(image))
            except InvalidRasterError as e:
                logger.warning("Cannot create bundle from image data: {}", e)
                return cls.from_variants(VariantSet(), backend)
        return cls.from_bitmap(image, backend=backend)

    @classmethod
    def from_files(
        cls,
        sources: Iterable[str | Path],
        backend: ImageBackend | None = None,
        timeout: int | None = None,
    ) -> "BitmapBundle":
        """
        Create a bundle from image files or http(s) URLs, one variant each.

        A single path or URL is accepted as a one-element collection.

        Raises:
            RasterLoadError: If any source cannot be read or decoded
        """
        if timeout is None:
            from ..config import settings

            timeout = settings.fetch_timeout
        if isinstance(sources, (str, Path)):
            sources = [sources]
        backend = backend or default_backend()
        rasters = load_rasters(list(sources), backend, timeout=timeout)
        return cls.from_bitmaps(rasters, backend=backend)

    # --- Queries ---

    def is_ok(self) -> bool:
        """Return True if the bundle holds at least one variant."""
        return bool(self._state.variants)

    def __bool__(self) -> bool:
        return self.is_ok()

    @property
    def variants(self) -> VariantSet:
        return self._state.variants

    @property
    def backend(self) -> ImageBackend:
        return self._state.backend

    def default_size(self) -> Size:
        """
        Return the size at 100% scaling, i.e. that of the smallest variant.

        Raises:
            InvalidBundleError: If the bundle is empty
        """
        return self._state.variants.default_size()

    def cached_sizes(self) -> list[Size]:
        """Return the sizes rescaled so far, shared by all copies."""
        return self._state.cache.sizes()

    def is_cached(self, size: SizeLike) -> bool:
        return Size.coerce(size) in self._state.cache

    def get_bitmap(self, size: SizeLike) -> Any:
        """
        Get a raster of exactly ``size``, rescaling the closest variant if needed.

        Variants of the requested size are returned as is. Any other size is
        rescaled once and then served from the cache, which is never evicted:
        avoid requesting many distinct sizes.

        Args:
            size: Requested size as a Size, (width, height) pair or "WxH" string

        Returns:
            A raster of the requested size

        Raises:
            InvalidBundleError: If the bundle is empty
            InvalidSizeError: If size is empty or cannot be parsed
        """
        state = self._state
        if not state.variants:
            raise InvalidBundleError("Cannot get a bitmap from an empty bundle")
        target = Size.coerce(size)
        if target.is_empty:
            raise InvalidSizeError(f"Requested size {target} is empty")

        exact = state.variants.find_exact(target)
        if exact is not None:
            return exact.raster

        cached = state.cache.lookup(target)
        if cached is not None:
            logger.debug("Cache hit for {}", target)
            return cached

        # Rescale outside the cache lock; a concurrent duplicate is harmless
        source = resolve(state.variants, target)
        logger.debug("Cache miss for {}, rescaling from {}", target, source.size)
        raster = state.backend.resize(source.raster, target)
        state.cache.store(target, raster)
        return raster

    # --- Value semantics ---

    def __copy__(self) -> "BitmapBundle":
        return BitmapBundle(self._state)

    def __deepcopy__(self, memo: dict) -> "BitmapBundle":
        # Variants are immutable and the cache is meant to be shared
        return BitmapBundle(self._state)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BitmapBundle):
            return NotImplemented
        if self._state is other._state:
            return True
        return not self.is_ok() and not other.is_ok()

    def __hash__(self) -> int:
        return 0 if not self.is_ok() else id(self._state)

    def __repr__(self) -> str:
        if not self.is_ok():
            return "BitmapBundle(<empty>)"
        sizes = ", ".join(str(s) for s in self._state.variants.sizes())
        return f"BitmapBundle([{sizes}], cached={len(self._state.cache)})"
