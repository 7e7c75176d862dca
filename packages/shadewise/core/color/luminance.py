"""Luminance and contrast math (WCAG 2.1).

Pure functions over color-like values. Every function reads its inputs
through :func:`shadewise.core.color.components.read_components`, so a value
that cannot be decomposed raises instead of producing a default number.

Example:
    >>> from shadewise.core.color.models import BLACK, WHITE
    >>> round(contrast_ratio(WHITE, BLACK), 2)
    21.0
"""

from __future__ import annotations

from typing import TypeAlias

from shadewise.core.color.components import ColorLike, read_components
from shadewise.core.color.errors import (
    InvalidColorCalculationError,
    InvalidParameterError,
)
from shadewise.core.color.models import (
    BrightnessMethod,
    ColorClassification,
    ColorScheme,
)

# WCAG standards
WCAG_AA_THRESHOLD = 4.5
WCAG_AAA_THRESHOLD = 7.0
DEFAULT_THRESHOLD = WCAG_AA_THRESHOLD

# Contrast ratio bounds
MIN_CONTRAST_RATIO = 1.0
MAX_CONTRAST_RATIO = 21.0

# sRGB transfer function
LINEAR_CUTOFF = 0.03928
LINEAR_SLOPE = 12.92
GAMMA_OFFSET = 0.055
GAMMA_SCALE = 1.055
GAMMA = 2.4

# Rec. 709 luminance coefficients (r, g, b)
LUMINANCE_WEIGHTS: tuple[float, float, float] = (0.2126, 0.7152, 0.0722)

# Flare term added to both luminances in the contrast ratio
CONTRAST_FLARE = 0.05

RatioOrPair: TypeAlias = float | tuple[ColorLike, ColorLike]


def linearize(value: float) -> float:
    """Convert one sRGB channel to linear light."""
    if value <= LINEAR_CUTOFF:
        return value / LINEAR_SLOPE
    return ((value + GAMMA_OFFSET) / GAMMA_SCALE) ** GAMMA


def relative_luminance(color: ColorLike) -> float:
    """WCAG 2.1 relative luminance of a color.

    Args:
        color: Color to analyze.

    Returns:
        Luminance in [0, 1] for canonical sRGB input.

    Raises:
        ComponentExtractionError: If components cannot be read.
    """
    sample = read_components(color)
    r_weight, g_weight, b_weight = LUMINANCE_WEIGHTS
    return (
        r_weight * linearize(sample.r)
        + g_weight * linearize(sample.g)
        + b_weight * linearize(sample.b)
    )


def rgb_brightness(color: ColorLike) -> float:
    """Arithmetic mean of the r, g and b channels."""
    sample = read_components(color)
    return (sample.r + sample.g + sample.b) / 3.0


def coerce_method(method: BrightnessMethod | str) -> BrightnessMethod:
    """Resolve a brightness method given as an enum member or its value.

    Raises:
        InvalidParameterError: If ``method`` names no known method.
    """
    try:
        return BrightnessMethod(method)
    except ValueError as e:
        raise InvalidParameterError(
            "method", method, expected=", ".join(m.value for m in BrightnessMethod)
        ) from e


def brightness(
    color: ColorLike, method: BrightnessMethod | str = BrightnessMethod.LUMINANCE
) -> float:
    """Brightness of a color using the given method.

    Raises:
        InvalidParameterError: If ``method`` is not a known brightness method.
    """
    resolved = coerce_method(method)
    if resolved is BrightnessMethod.RGB:
        return rgb_brightness(color)
    if resolved is BrightnessMethod.LUMINANCE:
        return relative_luminance(color)
    raise InvalidParameterError("method", method, expected="luminance or rgb")


def contrast_ratio(color1: ColorLike, color2: ColorLike) -> float:
    """WCAG contrast ratio between two colors.

    Always uses relative luminance, regardless of any brightness method
    used elsewhere. The result is symmetric in its arguments and lies in
    [1, 21] for sRGB input.

    Args:
        color1: First color.
        color2: Second color.

    Returns:
        ``(L_max + 0.05) / (L_min + 0.05)``.

    Raises:
        ComponentExtractionError: If either color cannot be read.
        InvalidColorCalculationError: If an out-of-gamut color drives the
            darker luminance to or below -0.05.
    """
    l1 = relative_luminance(color1)
    l2 = relative_luminance(color2)
    lighter = max(l1, l2)
    darker = min(l1, l2)

    denominator = darker + CONTRAST_FLARE
    if denominator <= 0:
        raise InvalidColorCalculationError(
            "contrast_ratio", detail=f"luminance {darker:.4f} is below the representable range"
        )
    return (lighter + CONTRAST_FLARE) / denominator


def classify(
    color: ColorLike,
    threshold: float = 0.5,
    method: BrightnessMethod | str = BrightnessMethod.LUMINANCE,
) -> ColorClassification:
    """Classify a color as light or dark.

    Args:
        color: Color to classify.
        threshold: Brightness cutoff; strictly above is light.
        method: Brightness calculation method (enum member or its value).

    Returns:
        ColorClassification.LIGHT or ColorClassification.DARK.

    Raises:
        InvalidParameterError: If ``method`` is not a known brightness method.
    """
    value = brightness(color, method)
    return ColorClassification.LIGHT if value > threshold else ColorClassification.DARK


def color_scheme(
    color: ColorLike,
    method: BrightnessMethod | str = BrightnessMethod.LUMINANCE,
) -> ColorScheme:
    """Recommended color scheme for content placed on ``color``."""
    return classify(color, method=method).scheme


def meets_threshold(ratio_or_pair: RatioOrPair, threshold: float = DEFAULT_THRESHOLD) -> bool:
    """Check a contrast ratio (or a pair of colors) against a threshold.

    Args:
        ratio_or_pair: Precomputed contrast ratio, or a ``(color1, color2)`` pair.
        threshold: Minimum acceptable ratio.

    Returns:
        True if the ratio is at least ``threshold``.
    """
    if isinstance(ratio_or_pair, tuple):
        if len(ratio_or_pair) != 2:
            raise InvalidParameterError(
                "ratio_or_pair", ratio_or_pair, expected="a ratio or a (color, color) pair"
            )
        color1, color2 = ratio_or_pair
        ratio = contrast_ratio(color1, color2)
    else:
        ratio = float(ratio_or_pair)
    return ratio >= threshold


def meets_wcag_aa(ratio_or_pair: RatioOrPair) -> bool:
    """True if the ratio (or pair) meets WCAG AA (4.5:1)."""
    return meets_threshold(ratio_or_pair, WCAG_AA_THRESHOLD)


def meets_wcag_aaa(ratio_or_pair: RatioOrPair) -> bool:
    """True if the ratio (or pair) meets WCAG AAA (7:1)."""
    return meets_threshold(ratio_or_pair, WCAG_AAA_THRESHOLD)


__all__ = [
    "CONTRAST_FLARE",
    "DEFAULT_THRESHOLD",
    "GAMMA",
    "GAMMA_OFFSET",
    "GAMMA_SCALE",
    "LINEAR_CUTOFF",
    "LINEAR_SLOPE",
    "LUMINANCE_WEIGHTS",
    "MAX_CONTRAST_RATIO",
    "MIN_CONTRAST_RATIO",
    "WCAG_AAA_THRESHOLD",
    "WCAG_AA_THRESHOLD",
    "brightness",
    "classify",
    "coerce_method",
    "color_scheme",
    "contrast_ratio",
    "linearize",
    "meets_threshold",
    "meets_wcag_aa",
    "meets_wcag_aaa",
    "relative_luminance",
    "rgb_brightness",
]
