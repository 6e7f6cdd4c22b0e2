"""
Tests for variant sets and best-match resolution.

Tests RasterVariant, VariantSet construction and default size, and the
scale-factor based resolve() selection including its tie-breaking.
"""

from fractions import Fraction

import pytest

from bitmap_bundle.bundle.resolver import resolve, scale_factor
from bitmap_bundle.bundle.variants import RasterVariant, VariantSet
from bitmap_bundle.errors import InvalidBundleError, InvalidRasterError, InvalidSizeError
from bitmap_bundle.images.base import Size


def square(n: int) -> Size:
    return Size(width=n, height=n)


class TestRasterVariant:
    """Test RasterVariant model."""

    def test_size_taken_from_raster(self, backend, make_raster):
        """Test that the variant size comes from the raster itself."""
        raster = make_raster(40, 20)

        variant = RasterVariant.from_raster(raster, backend)

        assert variant.raster is raster
        assert variant.size == Size(width=40, height=20)

    def test_invalid_raster_raises(self, backend):
        """Test that invalid rasters are rejected."""
        with pytest.raises(InvalidRasterError):
            RasterVariant.from_raster(None, backend)


class TestVariantSet:
    """Test VariantSet construction and queries."""

    def test_from_rasters_preserves_order(self, backend, make_raster):
        """Test that insertion order is kept and duplicates are not removed."""
        rasters = [make_raster(64), make_raster(32), make_raster(64, color="blue")]

        variants = VariantSet.from_rasters(rasters, backend)

        assert variants.sizes() == [square(64), square(32), square(64)]
        assert [v.raster for v in variants] == rasters

    def test_empty_input_gives_empty_set(self, backend):
        """Test that no rasters gives the empty sentinel."""
        variants = VariantSet.from_rasters([], backend)

        assert len(variants) == 0
        assert not variants

    def test_one_invalid_raster_rejects_all(self, backend, icon_rasters, log_messages):
        """Test that an invalid raster yields the empty set, not a subset."""
        rasters = [icon_rasters[0], None, icon_rasters[2]]

        variants = VariantSet.from_rasters(rasters, backend)

        assert len(variants) == 0
        assert any("raster #1 is invalid" in m for m in log_messages)

    def test_from_single(self, backend, make_raster):
        """Test single raster construction."""
        assert len(VariantSet.from_single(make_raster(16), backend)) == 1
        assert len(VariantSet.from_single("nope", backend)) == 0

    def test_accepts_generator(self, backend, make_raster):
        """Test that any iterable of rasters is accepted."""
        variants = VariantSet.from_rasters((make_raster(n) for n in (16, 24)), backend)

        assert variants.sizes() == [square(16), square(24)]

    def test_default_size_is_smallest_by_area(self, backend, make_raster):
        """Test that the default size is the smallest variant."""
        variants = VariantSet.from_rasters([make_raster(64), make_raster(32), make_raster(48)], backend)

        assert variants.default_size() == square(32)

    def test_default_size_uses_area_not_width(self, backend, make_raster):
        """Test that area, not a single dimension, decides."""
        variants = VariantSet.from_rasters([make_raster(40, 40), make_raster(10, 100)], backend)

        assert variants.default_size() == Size(width=10, height=100)

    def test_default_size_tie_first_wins(self, backend, make_raster):
        """Test that the first of equal-area variants is the default."""
        variants = VariantSet.from_rasters(
            [make_raster(64), make_raster(32, 16), make_raster(16, 32)], backend
        )

        assert variants.default_size() == Size(width=32, height=16)

    def test_default_size_empty_raises(self):
        """Test that an empty set has no default size."""
        with pytest.raises(InvalidBundleError):
            VariantSet().default_size()

    def test_find_exact(self, backend, icon_rasters):
        """Test exact size lookup."""
        variants = VariantSet.from_rasters(icon_rasters, backend)

        assert variants.find_exact(square(48)).raster is icon_rasters[1]
        assert variants.find_exact(square(50)) is None

    def test_repr(self, backend, icon_rasters):
        """Test the readable representation."""
        variants = VariantSet.from_rasters(icon_rasters, backend)

        assert repr(variants) == "VariantSet([32x32, 48x48, 64x64])"


class TestScaleFactor:
    """Test scale_factor function."""

    def test_uniform_factor_covers_both_axes(self):
        """Test that the larger per-axis ratio is used."""
        factor = scale_factor(Size(width=32, height=16), square(64))

        assert factor == 4

    def test_downscale_factor(self):
        """Test factor below one for downscaling."""
        assert scale_factor(square(64), square(56)) == Fraction(7, 8)

    def test_exact_fraction(self):
        """Test that factors are exact fractions."""
        assert scale_factor(square(48), square(56)) == Fraction(7, 6)


class TestResolve:
    """Test resolve function."""

    @pytest.fixture
    def icons(self, backend, icon_rasters) -> VariantSet:
        """Create a 32/48/64 variant set."""
        return VariantSet.from_rasters(icon_rasters, backend)

    @pytest.mark.parametrize("n", [32, 48, 64])
    def test_exact_match_returned(self, icons, n):
        """Test that an exact size returns that exact variant."""
        assert resolve(icons, square(n)).size == square(n)

    def test_first_exact_match_among_duplicates(self, backend, make_raster):
        """Test that the first of duplicate exact matches wins."""
        first, second = make_raster(32, color="red"), make_raster(32, color="blue")
        variants = VariantSet.from_rasters([first, second], backend)

        assert resolve(variants, square(32)).raster is first

    def test_prefers_downscale_between_48_and_64(self, icons, icon_rasters):
        """Test that 56px resolves to the 64px variant (downscale) over 48px."""
        result = resolve(icons, square(56))

        assert result.raster is icon_rasters[2]

    def test_equal_distance_prefers_downscale(self, backend, make_raster):
        """Test that an exact distance tie goes to the variant needing no upscaling."""
        small, large = make_raster(40), make_raster(60)
        variants = VariantSet.from_rasters([small, large], backend)

        # 48/40 = 1.2 and 48/60 = 0.8 are both 0.2 away from 1
        assert resolve(variants, square(48)).raster is large

    def test_equal_distance_and_direction_prefers_first(self, backend, make_raster):
        """Test that the first inserted wins a full tie."""
        first, second = make_raster(64, color="red"), make_raster(64, color="blue")
        variants = VariantSet.from_rasters([first, second], backend)

        assert resolve(variants, square(56)).raster is first

    def test_largest_used_for_big_target(self, icons, icon_rasters):
        """Test that targets above every variant upscale the largest."""
        assert resolve(icons, square(128)).raster is icon_rasters[2]

    def test_smallest_used_for_tiny_target(self, icons, icon_rasters):
        """Test that tiny targets downscale the closest variant."""
        assert resolve(icons, square(16)).raster is icon_rasters[0]

    def test_closer_upscale_beats_far_downscale(self, backend, make_raster):
        """Test that closeness to 1 wins over the downscale preference."""
        small, huge = make_raster(30), make_raster(100)
        variants = VariantSet.from_rasters([small, huge], backend)

        # 32/30 is ~1.07, 32/100 is 0.32
        assert resolve(variants, square(32)).raster is small

    def test_non_square_target(self, backend, make_raster):
        """Test that both axes are considered."""
        wide, tall = make_raster(64, 32), make_raster(32, 64)
        variants = VariantSet.from_rasters([wide, tall], backend)

        # wide needs max(1, 2) = 2, tall needs max(2, 1) = 2 -> tie, both upscale
        assert resolve(variants, square(64)).raster is wide
        # wide: max(60/64, 30/32) = 0.9375; tall: max(60/32, 30/64) = 1.875
        assert resolve(variants, Size(width=60, height=30)).raster is wide

    def test_empty_set_raises(self):
        """Test that resolving in an empty set raises InvalidBundleError."""
        with pytest.raises(InvalidBundleError):
            resolve(VariantSet(), square(16))

    def test_empty_target_raises(self, icons):
        """Test that an empty target raises InvalidSizeError."""
        with pytest.raises(InvalidSizeError):
            resolve(icons, Size(width=0, height=16))
