"""
Best-match variant selection.

Given the variants of a bundle and a requested size, pick the variant to
rescale from. An exact size match always wins. Otherwise each variant is
scored by the uniform scale factor needed to make it cover the target on
both axes, and the factor closest to 1 wins. Equal distances prefer
downscaling (factor <= 1) over upscaling, then insertion order.

Factors are exact fractions so that equal distances compare equal.
"""

from fractions import Fraction

from ..errors import InvalidBundleError, InvalidSizeError
from ..images.base import Size
from .variants import RasterVariant, VariantSet


def scale_factor(source: Size, target: Size) -> Fraction:
    """Return the smallest uniform factor making ``source`` cover ``target``."""
    return max(
        Fraction(target.width, source.width),
        Fraction(target.height, source.height),
    )


def resolve(variants: VariantSet, target: Size) -> RasterVariant:
    """
    Select the variant to use as the rescale source for ``target``.

    The returned variant is not resized.

    Args:
        variants: Non-empty variant set
        target: Non-empty requested size

    Returns:
        The exact match if one exists, otherwise the closest variant

    Raises:
        InvalidBundleError: If variants is empty
        InvalidSizeError: If target is empty
    """
    if not variants:
        raise InvalidBundleError("Cannot resolve a size in an empty bundle")
    if target.is_empty:
        raise InvalidSizeError(f"Cannot resolve empty size {target}")

    exact = variants.find_exact(target)
    if exact is not None:
        return exact

    def cost(item: tuple[int, RasterVariant]) -> tuple[Fraction, bool, int]:
        index, variant = item
        factor = scale_factor(variant.size, target)
        return (abs(factor - 1), factor > 1, index)

    _, best = min(enumerate(variants), key=cost)
    return best
