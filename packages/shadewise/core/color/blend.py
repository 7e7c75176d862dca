"""Blend and adjustment primitives for ColorSample."""

from __future__ import annotations

import colorsys

from shadewise.core.color.components import ColorLike, read_components
from shadewise.core.color.models import ColorSample
from shadewise.core.utils.math import clamp, lerp


def blend(base: ColorLike, other: ColorLike, ratio: float) -> ColorSample:
    """Linearly interpolate two colors channel by channel (alpha included).

    ``ratio`` is not clamped. A ratio of 0 returns ``base``, 1 returns
    ``other``; values outside [0, 1] extrapolate past either end.

    Args:
        base: Starting color.
        other: Color to blend toward.
        ratio: Interpolation factor.

    Returns:
        ``base * (1 - ratio) + other * ratio``.

    Example:
        >>> blend(ColorSample(1, 1, 1), ColorSample(0, 0, 0), 0.5).rgb
        (0.5, 0.5, 0.5)
    """
    start = read_components(base)
    end = read_components(other)
    return ColorSample(
        lerp(start.r, end.r, ratio),
        lerp(start.g, end.g, ratio),
        lerp(start.b, end.b, ratio),
        lerp(start.a, end.a, ratio),
    )


def adjust_brightness(color: ColorLike, percentage: float) -> ColorSample:
    """Scale r, g and b by ``1 + percentage``, clamped to [0, 1].

    Args:
        color: Color to adjust.
        percentage: -1.0 to 1.0; positive lightens, negative darkens.

    Returns:
        Adjusted color with the original alpha.
    """
    sample = read_components(color)
    factor = 1.0 + percentage
    return ColorSample(
        clamp(sample.r * factor, 0.0, 1.0),
        clamp(sample.g * factor, 0.0, 1.0),
        clamp(sample.b * factor, 0.0, 1.0),
        sample.a,
    )


def hsb(color: ColorLike) -> tuple[float, float, float]:
    """Hue (degrees), saturation and brightness of a color."""
    sample = read_components(color)
    h, s, v = colorsys.rgb_to_hsv(
        clamp(sample.r, 0.0, 1.0),
        clamp(sample.g, 0.0, 1.0),
        clamp(sample.b, 0.0, 1.0),
    )
    return (h * 360.0, s, v)


def from_hsb(hue: float, saturation: float, brightness: float, alpha: float = 1.0) -> ColorSample:
    """Build a sample from hue in degrees, saturation and brightness."""
    r, g, b = colorsys.hsv_to_rgb((hue % 360.0) / 360.0, saturation, brightness)
    return ColorSample(r, g, b, alpha)


def adjust_luminance(color: ColorLike, factor: float) -> ColorSample:
    """Multiply the HSB brightness of a color by ``factor``.

    Args:
        color: Color to adjust.
        factor: 1.0 keeps the color, > 1 brightens, < 1 darkens.

    Returns:
        Adjusted color with the original hue, saturation and alpha.
    """
    sample = read_components(color)
    hue, saturation, value = hsb(sample)
    return from_hsb(hue, saturation, clamp(value * factor, 0.0, 1.0), sample.a)


__all__ = [
    "adjust_brightness",
    "adjust_luminance",
    "blend",
    "from_hsb",
    "hsb",
]
