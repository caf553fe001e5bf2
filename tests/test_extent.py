"""Unit tests for max-extent and placement helpers."""

import logging
import math

import pytest

from crop_geometry.extent import calculate_max_crop, center_crop, centered_aspect_crop, get_max_crop
from crop_geometry.models import Crop


def _box(crop: Crop) -> tuple:
    return crop.x, crop.y, crop.width, crop.height


class TestGetMaxCropFree:
    """Tests for get_max_crop() without an aspect lock."""

    @pytest.mark.parametrize(
        "ordinal, expected",
        [
            ("n", (10, 0, 30, 60)),
            ("ne", (10, 0, 90, 60)),
            ("e", (10, 20, 90, 40)),
            ("se", (10, 20, 90, 180)),
            ("s", (10, 20, 30, 180)),
            ("sw", (0, 20, 40, 60)),
            ("w", (0, 20, 40, 40)),
            ("nw", (0, 0, 40, 60)),
        ],
    )
    def test_rule_table(self, ordinal, expected):
        """Test each handle grows towards its own edges."""
        crop = Crop(x=10, y=20, width=30, height=40, unit="px")

        result = get_max_crop(crop, ordinal, 100, 200)

        assert _box(result) == expected

    def test_input_not_mutated(self):
        """Test the caller's crop is left alone."""
        crop = Crop(x=10, y=20, width=30, height=40, unit="px")
        get_max_crop(crop, "nw", 100, 200)

        assert crop == Crop(x=10, y=20, width=30, height=40, unit="px")

    def test_unknown_ordinal(self):
        """Test an unknown handle raises ValueError."""
        with pytest.raises(ValueError, match="ordinal"):
            get_max_crop(Crop(x=0, y=0, width=10, height=10, unit="px"), "up", 100, 100)


class TestGetMaxCropAspect:
    """Tests for get_max_crop() with an aspect lock."""

    def test_se_limited_by_height(self):
        """Test the nearest container edge decides the size."""
        crop = Crop(x=10, y=10, width=50, height=50, aspect=1)

        result = get_max_crop(crop, "se", 200, 100)

        assert _box(result) == pytest.approx((10, 10, 90, 90))
        assert result.aspect == 1
        assert result.unit == "px"

    def test_se_limited_by_width(self):
        """Test a wide aspect hits the right edge first."""
        crop = Crop(x=0, y=0, width=40, height=20, unit="px", aspect=2)

        result = get_max_crop(crop, "se", 100, 100)

        assert _box(result) == pytest.approx((0, 0, 100, 50))

    def test_ne_anchors_bottom_left(self):
        """Test the bottom-left corner stays put for the ne handle."""
        crop = Crop(x=10, y=40, width=20, height=20, unit="px", aspect=1)

        result = get_max_crop(crop, "ne", 100, 100)

        assert _box(result) == pytest.approx((10, 0, 60, 60))
        assert result.y + result.height == pytest.approx(60)

    def test_sw_anchors_top_right(self):
        """Test the top-right corner stays put for the sw handle."""
        crop = Crop(x=50, y=10, width=20, height=20, unit="px", aspect=1)

        result = get_max_crop(crop, "sw", 100, 100)

        assert _box(result) == pytest.approx((0, 10, 70, 70))
        assert result.x + result.width == pytest.approx(70)

    def test_nw_anchors_bottom_right(self):
        """Test the bottom-right corner stays put for the nw handle."""
        crop = Crop(x=30, y=50, width=20, height=20, unit="px", aspect=1)

        result = get_max_crop(crop, "nw", 100, 100)

        assert _box(result) == pytest.approx((0, 20, 50, 50))

    @pytest.mark.parametrize("ordinal", ["n", "e", "s", "w"])
    def test_edge_handles_are_degenerate(self, ordinal, caplog):
        """Test edge handles under an aspect lock give a zero-sized crop and a warning."""
        crop = Crop(x=10, y=10, width=20, height=20, unit="px", aspect=1)

        with caplog.at_level(logging.WARNING, logger="crop_geometry.extent"):
            result = get_max_crop(crop, ordinal, 100, 100)

        assert result.width == 0
        assert result.height == 0
        assert (result.x, result.y) == (10, 10)
        assert "aspect lock" in caplog.text

    @pytest.mark.parametrize(
        "crop, ordinal",
        [
            (Crop(x=10, y=100, width=50, height=0, unit="px", aspect=1), "se"),
            (Crop(x=200, y=10, width=0, height=50, unit="px", aspect=1), "ne"),
        ],
    )
    def test_zero_size_at_edge_gives_nan(self, crop, ordinal):
        """Test a zero-sized crop on a container edge has no max extent on either axis."""
        result = get_max_crop(crop, ordinal, 200, 100)

        assert math.isnan(result.width)
        assert math.isnan(result.height)


class TestPlacementHelpers:
    """Tests for calculate_max_crop(), center_crop() and centered_aspect_crop()."""

    @pytest.mark.parametrize(
        "size, aspect, expected",
        [
            ((1920, 1080), 16 / 9, (1920, 1080)),
            ((1000, 1000), 2, (1000, 500)),
            ((1000, 500), 1, (500, 500)),
        ],
    )
    def test_calculate_max_crop(self, size, aspect, expected):
        """Test the largest size for an aspect fits the image."""
        assert calculate_max_crop(*size, aspect) == pytest.approx(expected)

    def test_centered_aspect_crop_pixels(self):
        """Test the largest square in a landscape image is centred horizontally."""
        result = centered_aspect_crop(1, 200, 100)

        assert _box(result) == pytest.approx((50, 0, 100, 100))
        assert result.aspect == 1
        assert result.unit == "px"

    def test_centered_aspect_crop_percent(self):
        """Test the centred crop can be returned in percent."""
        result = centered_aspect_crop(1, 200, 100, unit="%")

        assert result.unit == "%"
        assert _box(result) == pytest.approx((25, 0, 50, 100))

    def test_center_pixel_crop(self):
        """Test a pixel crop is moved to the centre, keeping its size."""
        result = center_crop(Crop(x=0, y=0, width=50, height=20, unit="px"), 200, 100)

        assert result.unit == "px"
        assert _box(result) == pytest.approx((75, 40, 50, 20))

    def test_center_percent_crop(self):
        """Test a percent crop is centred in percent."""
        result = center_crop(Crop(width=50, height=20, unit="%"), 200, 100)

        assert result.unit == "%"
        assert _box(result) == pytest.approx((25, 40, 50, 20))
