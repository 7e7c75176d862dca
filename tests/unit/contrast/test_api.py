"""Tests for the public contrast API."""

from __future__ import annotations

import logging

import pytest

from shadewise.core.color import (
    BLACK,
    WHITE,
    BrightnessMethod,
    ColorSample,
    ComponentExtractionError,
    InvalidParameterError,
    contrast_ratio,
)
from shadewise.core.contrast import (
    Anchor,
    BlendStyle,
    ContrastDirection,
    contrasting_color,
    contrasting_shade,
    has_good_contrast,
    optimize_contrast,
    recommended_weight,
)


class TestContrastingColor:
    """Tests for contrasting_color."""

    def test_white_on_white_target_one_is_unchanged(self):
        # Already sufficient: no blending at all
        result = contrasting_color(
            ColorSample(1, 1, 1), against=ColorSample(1, 1, 1), target_ratio=1.0
        )
        assert result == ColorSample(1, 1, 1)

    def test_blue_on_blue_reaches_aa(self, blue):
        result = contrasting_color(
            ColorSample(0, 0, 1), against=ColorSample(0, 0, 1), target_ratio=4.5
        )
        assert result != blue
        assert contrast_ratio(result, blue) >= 4.5

    def test_sufficient_color_is_returned_exactly(self, black, white):
        assert contrasting_color(black, against=white) == black

    def test_red_on_blue(self, blue):
        result = contrasting_color("#FF0000", against=blue, target_ratio=4.5)
        assert contrast_ratio(result, blue) >= 4.5

    def test_force_dark_moves_toward_black(self, blue):
        result = contrasting_color(blue, against=blue, direction=ContrastDirection.FORCE_DARK)
        assert result.r == 0.0
        assert result.g == 0.0
        assert 0.0 <= result.b < 1.0
        # Black can never reach AA against pure blue
        assert contrast_ratio(result, blue) < 4.5

    def test_direction_accepts_strings(self, blue):
        forced = contrasting_color(blue, against=blue, direction="force_light")
        assert forced.r > 0.0

    def test_blend_style_maximum_gives_anchor(self, blue, white):
        assert contrasting_color(blue, against=blue, blend_style=BlendStyle.MAXIMUM) == white

    def test_minimum_blend(self, blue):
        result = optimize_contrast(blue, blue, minimum_blend=0.8)
        assert result.blend_ratio >= 0.8

    def test_higher_target_needs_more_blend(self, blue):
        aa = optimize_contrast(blue, blue, target_ratio=4.5)
        aaa = optimize_contrast(blue, blue, target_ratio=7.0)
        assert aaa.blend_ratio > aa.blend_ratio
        assert aaa.contrast_ratio >= 7.0

    def test_accepts_platform_style_values(self):
        result = contrasting_color({"r": 0.5, "g": 0.5, "b": 0.5}, against=(1.0, 1.0, 1.0))
        assert contrast_ratio(result, WHITE) >= 4.5


class TestParameterValidation:
    """Invalid parameters are rejected before any search runs."""

    @pytest.mark.parametrize("target", [0.5, 22.0])
    def test_target_ratio_out_of_range(self, target):
        # Rejected even though black on white needs no search
        with pytest.raises(InvalidParameterError):
            contrasting_color(BLACK, against=WHITE, target_ratio=target)

    def test_unknown_direction(self, blue):
        with pytest.raises(InvalidParameterError):
            contrasting_color(blue, against=blue, direction="sideways")

    def test_invalid_blend_range(self, blue):
        with pytest.raises(InvalidParameterError):
            contrasting_color(blue, against=blue, blend_range=(0.8, 0.2))

    def test_unreadable_color(self):
        with pytest.raises(ComponentExtractionError):
            contrasting_color("#XYZ", against=WHITE)

    def test_unknown_method(self, black, white):
        # Rejected even when no search would run
        with pytest.raises(InvalidParameterError):
            contrasting_color(black, against=white, method="bogus")


class TestOptimizeContrast:
    """Tests for the detailed result."""

    def test_unchanged_result(self, black, white):
        result = optimize_contrast(black, white)
        assert result.unchanged
        assert result.anchor is None
        assert result.contrast_ratio == pytest.approx(21.0)

    def test_blended_result(self, blue):
        result = optimize_contrast(blue, blue)
        assert result.anchor is Anchor.WHITE
        assert result.target_met
        assert result.target_ratio == 4.5
        assert 0.0 < result.blend_ratio <= 1.0

    def test_method_given_as_string(self, blue, caplog):
        caplog.set_level(logging.DEBUG, logger="shadewise.core.contrast")
        from_string = optimize_contrast(blue, blue, method="rgb")
        from_enum = optimize_contrast(blue, blue, method=BrightnessMethod.RGB)
        assert from_string == from_enum
        assert from_string.color.to_hex() == "B7B7FF"
        assert "Optimizing contrast (rgb)" in caplog.text

    def test_contrasting_color_method_string(self, blue):
        assert contrasting_color(blue, against=blue, method="rgb") == contrasting_color(
            blue, against=blue, method=BrightnessMethod.RGB
        )


class TestContrastingShade:
    """contrasting_shade is contrasting_color against the color itself."""

    def test_matches_self_contrast(self, blue):
        assert contrasting_shade(blue) == contrasting_color(blue, against=blue)

    def test_forwards_options(self, yellow):
        shade = contrasting_shade(yellow, target_ratio=7.0, direction=ContrastDirection.PREFER_DARK)
        assert contrast_ratio(shade, yellow) >= 7.0
        assert shade.b == 0.0


class TestHasGoodContrast:
    """Tests for the AA quick check."""

    def test_black_on_white(self):
        assert has_good_contrast(ColorSample(0, 0, 0), ColorSample(1, 1, 1))

    def test_close_grays(self):
        assert not has_good_contrast(ColorSample(0.5, 0.5, 0.5), ColorSample(0.6, 0.6, 0.6))


class TestRecommendedWeight:
    """Tests for contrast-driven text weight selection."""

    WEIGHTS = ["regular", "medium", "bold"]

    def test_high_contrast_uses_lightest(self, black, white):
        assert recommended_weight(black, white, self.WEIGHTS) == "regular"

    def test_medium_contrast_uses_middle(self, mid_gray, white):
        # ~3.98:1, between 3 and AA
        assert recommended_weight(mid_gray, white, self.WEIGHTS) == "medium"

    def test_low_contrast_uses_heaviest(self, white):
        assert recommended_weight(ColorSample(0.6, 0.6, 0.6), white, self.WEIGHTS) == "bold"

    def test_any_weight_values(self, black, white):
        assert recommended_weight(black, white, [400, 600, 700]) == 400

    def test_empty_weights_raise(self, black, white):
        with pytest.raises(InvalidParameterError):
            recommended_weight(black, white, [])
