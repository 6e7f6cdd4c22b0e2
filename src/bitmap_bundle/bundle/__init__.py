"""Bundle package.

Variant sets, best-match resolution, the rescale cache and the BitmapBundle
value type built from them.
"""

from .bundle import BitmapBundle
from .cache import RescaleCache
from .resolver import resolve, scale_factor
from .variants import RasterVariant, VariantSet

__all__ = [
    "BitmapBundle",
    "RasterVariant",
    "RescaleCache",
    "VariantSet",
    "resolve",
    "scale_factor",
]
