"""Tests for blend range resolution and the bisection search."""

from __future__ import annotations

import pytest

from shadewise.core.color import InvalidParameterError, blend, contrast_ratio
from shadewise.core.contrast import (
    Anchor,
    BlendRange,
    BlendStyle,
    SearchSettings,
    resolve_blend_range,
    search_blend,
    validate_target_ratio,
)

# Smallest blend toward white that lifts pure blue to 4.5:1 against itself
BLUE_AA_BLEND = 0.709


class TestValidateTargetRatio:
    """Tests for target ratio validation."""

    @pytest.mark.parametrize("value", [1.0, 4.5, 21.0])
    def test_accepts_wcag_range(self, value):
        assert validate_target_ratio(value) == value

    @pytest.mark.parametrize("value", [0.0, 0.99, 21.5, -3])
    def test_rejects_outside_range(self, value):
        with pytest.raises(InvalidParameterError) as exc_info:
            validate_target_ratio(value)
        assert exc_info.value.parameter == "target_ratio"

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            validate_target_ratio(30)


class TestResolveBlendRange:
    """Tests for blend constraint precedence."""

    def test_default_is_full_range(self):
        assert resolve_blend_range() == BlendRange(lower=0.0, upper=1.0)

    def test_minimum_blend_wins(self):
        result = resolve_blend_range(
            minimum_blend=0.2, blend_style=BlendStyle.STRONG, blend_range=(0.9, 1.0)
        )
        assert result == BlendRange(lower=0.2, upper=1.0)

    def test_style_beats_range(self):
        result = resolve_blend_range(blend_style="moderate", blend_range=(0.9, 1.0))
        assert result == BlendRange(lower=0.5, upper=1.0)

    @pytest.mark.parametrize(
        "style,lower",
        [
            (BlendStyle.MINIMAL, 0.0),
            (BlendStyle.MODERATE, 0.5),
            (BlendStyle.STRONG, 0.7),
            (BlendStyle.MAXIMUM, 1.0),
        ],
    )
    def test_style_minimums(self, style, lower):
        assert resolve_blend_range(blend_style=style).lower == lower

    def test_explicit_range(self):
        assert resolve_blend_range(blend_range=(0.1, 0.3)) == BlendRange(lower=0.1, upper=0.3)
        custom = BlendRange(lower=0.25, upper=0.75)
        assert resolve_blend_range(blend_range=custom) is custom

    @pytest.mark.parametrize("minimum", [-0.1, 1.5])
    def test_invalid_minimum_blend(self, minimum):
        with pytest.raises(InvalidParameterError):
            resolve_blend_range(minimum_blend=minimum)

    def test_invalid_style(self):
        with pytest.raises(InvalidParameterError):
            resolve_blend_range(blend_style="extreme")

    @pytest.mark.parametrize("bad", [(0.6, 0.2), (0.0, 2.0), (0.5,), "wide"])
    def test_invalid_range(self, bad):
        with pytest.raises(InvalidParameterError):
            resolve_blend_range(blend_range=bad)


class TestSearchBlend:
    """Tests for the bisection search."""

    def test_sufficient_color_is_unchanged(self, black, white):
        result = search_blend(black, white, Anchor.WHITE, 4.5)
        assert result.color == black
        assert result.blend_ratio == 0.0
        assert result.unchanged
        assert result.iterations == 0

    def test_reaches_target(self, blue):
        result = search_blend(blue, blue, Anchor.WHITE, 4.5)
        assert result.target_met
        assert result.contrast_ratio == pytest.approx(contrast_ratio(result.color, blue))
        assert result.blend_ratio == pytest.approx(0.71875)
        assert result.iterations == 5
        assert result.anchor is Anchor.WHITE

    def test_minimal_up_to_resolution(self, blue, white):
        result = search_blend(blue, blue, Anchor.WHITE, 4.5)
        step = 1.0 / 2**5
        assert result.blend_ratio >= BLUE_AA_BLEND
        assert contrast_ratio(blend(blue, white, result.blend_ratio - step), blue) < 4.5

    def test_more_iterations_refine(self, blue):
        coarse = search_blend(blue, blue, Anchor.WHITE, 4.5)
        fine = search_blend(
            blue, blue, Anchor.WHITE, 4.5, settings=SearchSettings(max_iterations=10)
        )
        assert fine.target_met
        assert BLUE_AA_BLEND <= fine.blend_ratio <= coarse.blend_ratio
        # Early exit once within tolerance of the target
        assert fine.iterations < 10
        assert fine.contrast_ratio - 4.5 < 0.05

    def test_unreachable_target_returns_best_effort(self, blue):
        result = search_blend(blue, blue, Anchor.BLACK, 4.5)
        assert not result.target_met
        assert result.blend_ratio == pytest.approx(0.96875)
        assert result.color.rgb == pytest.approx((0.0, 0.0, 0.03125))

    def test_capped_range_stays_within_bounds(self, blue):
        result = search_blend(
            blue, blue, Anchor.WHITE, 4.5, search_range=BlendRange(lower=0.0, upper=0.5)
        )
        assert result.blend_ratio <= 0.5
        assert not result.target_met

    def test_minimum_blend_is_respected(self, blue):
        result = search_blend(
            blue, blue, Anchor.WHITE, 4.5, search_range=BlendRange.at_least(0.8)
        )
        assert result.blend_ratio >= 0.8
        assert result.target_met

    def test_degenerate_range_is_fully_blended(self, blue, white):
        result = search_blend(blue, blue, Anchor.WHITE, 4.5, search_range=BlendRange.at_least(1.0))
        assert result.color == white
        assert result.blend_ratio == 1.0


class TestMonotonicity:
    """Contrast grows with the blend ratio toward the anchor."""

    @pytest.mark.parametrize("anchor", [Anchor.WHITE, Anchor.BLACK])
    def test_self_contrast_is_non_decreasing(self, anchor, blue, yellow, mid_gray):
        for color in (blue, yellow, mid_gray):
            ratios = [
                contrast_ratio(blend(color, anchor.color, t / 20), color) for t in range(21)
            ]
            assert ratios == sorted(ratios)

    def test_darker_color_toward_black(self, mid_gray, white):
        ratios = [
            contrast_ratio(blend(mid_gray, Anchor.BLACK.color, t / 20), white) for t in range(21)
        ]
        assert ratios == sorted(ratios)
