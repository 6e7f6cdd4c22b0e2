"""Image backend package.

Provides the Size model, the backend interface bundles rescale through, and
a factory function to create the configured backend.
"""

from .base import ImageBackend, Size
from .loader import load_raster, load_rasters
from .pillow import PillowBackend


def create_image_backend(
    backend_type: str = "pillow",
    resample: str = "lanczos",
) -> ImageBackend:
    """Create an image backend instance.

    Args:
        backend_type: Type of backend ("pillow")
        resample: Resampling filter used for rescaling

    Returns:
        Configured ImageBackend instance

    Raises:
        ValueError: If backend_type or resample is not recognized

    Example:
        >>> backend = create_image_backend(resample="bicubic")
        >>> backend.name
        'pillow'

    """
    if backend_type == "pillow":
        return PillowBackend(resample=resample)
    else:
        raise ValueError(f"Unknown image backend: {backend_type}")


def default_backend() -> ImageBackend:
    """Create the backend named by the current settings."""
    from ..config import settings

    return create_image_backend(
        backend_type=settings.image_backend,
        resample=settings.resample_filter,
    )


__all__ = [
    "ImageBackend",
    "PillowBackend",
    "Size",
    "create_image_backend",
    "default_backend",
    "load_raster",
    "load_rasters",
]
