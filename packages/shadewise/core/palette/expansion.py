"""Palette expansion and contraction.

Grows a short list of colors into a longer one (for gradients, meshes,
multi-slot palettes) or shrinks a long list down to a few representative
colors. The default expansion strategy is "harmonic flow": every source
color keeps its position in the sequence and is spread into a run of
subtle HSB variations, so the expanded palette stays recognizably the
same family.
"""

from __future__ import annotations

from collections.abc import Sequence
import logging
import math

from shadewise.core.color.blend import from_hsb, hsb
from shadewise.core.color.components import ColorLike, read_components
from shadewise.core.color.errors import InvalidParameterError
from shadewise.core.color.luminance import relative_luminance
from shadewise.core.color.models import ColorSample
from shadewise.core.utils.math import clamp, lerp

logger = logging.getLogger(__name__)

# 4x4 gradient mesh
GRADIENT_MESH_SIZE = 16

# Variations never drop below this brightness
_MIN_VARIATION_BRIGHTNESS = 0.2


def _samples(colors: Sequence[ColorLike]) -> list[ColorSample]:
    return [read_components(c) for c in colors]


def _shifted(
    sample: ColorSample, hue_shift: float, saturation_shift: float, brightness_shift: float
) -> ColorSample:
    hue, saturation, value = hsb(sample)
    return from_hsb(
        (hue + hue_shift) % 360.0,
        clamp(saturation + saturation_shift, 0.0, 1.0),
        clamp(value + brightness_shift, _MIN_VARIATION_BRIGHTNESS, 1.0),
    )


def select_primary_color(colors: Sequence[ColorLike]) -> ColorSample:
    """Most representative color: the median by relative luminance.

    Raises:
        InvalidParameterError: If ``colors`` is empty.
    """
    if not colors:
        raise InvalidParameterError("colors", colors, expected="at least one color")

    samples = _samples(colors)
    if len(samples) == 1:
        return samples[0]

    ranked = sorted(samples, key=relative_luminance)
    return ranked[len(ranked) // 2]


def contract(colors: Sequence[ColorLike], count: int) -> list[ColorSample]:
    """Reduce ``colors`` to ``count`` entries by even sampling.

    A single target picks the primary color. Lists already at or below
    ``count`` are returned as is.
    """
    if count <= 0:
        return []

    samples = _samples(colors)
    if len(samples) <= count:
        return samples

    if count == 1:
        return [select_primary_color(samples)]

    step = (len(samples) - 1) / (count - 1)
    return [samples[min(int(i * step), len(samples) - 1)] for i in range(count)]


def generate_variations(color: ColorLike, count: int) -> list[ColorSample]:
    """Spread one color into ``count`` harmonious variations.

    Hue swings up to +/-30 degrees, saturation and brightness up to +/-0.2,
    following sine and cosine curves over the run.
    """
    if count <= 0:
        return []

    sample = read_components(color)
    if count == 1:
        return [sample]

    variations = []
    for i in range(count):
        progress = i / (count - 1)
        variations.append(
            _shifted(
                sample,
                math.sin(progress * math.pi * 2) * 30.0,
                math.cos(progress * math.pi * 2) * 0.2,
                math.sin(progress * math.pi * 3) * 0.2,
            )
        )
    return variations


def _subtle_variations(sample: ColorSample, count: int) -> list[ColorSample]:
    if count == 1:
        return [sample]

    variations = []
    for i in range(count):
        offset = i / (count - 1) - 0.5
        variations.append(_shifted(sample, offset * 10.0, offset * 0.1, offset * 0.1))
    return variations


def expand(colors: Sequence[ColorLike], count: int) -> list[ColorSample]:
    """Grow ``colors`` to ``count`` entries using harmonic flow.

    Args:
        colors: Source colors, in order.
        count: Target length.

    Returns:
        ``count`` colors. Empty input or a non-positive count gives ``[]``;
        a source at least ``count`` long is contracted instead.

    Example:
        >>> len(expand(["#FF0000", "#0000FF"], 5))
        5
    """
    if not colors or count <= 0:
        return []

    samples = _samples(colors)
    if len(samples) >= count:
        return contract(samples, count)

    if len(samples) == 1:
        return generate_variations(samples[0], count)

    base_repeats, remainder = divmod(count, len(samples))
    result: list[ColorSample] = []
    for index, sample in enumerate(samples):
        repeats = base_repeats + (1 if index < remainder else 0)
        result.extend(_subtle_variations(sample, repeats))

    logger.debug(f"Expanded {len(samples)} colors to {len(result)}")
    return result


def _interpolate_hue(start: float, end: float, fraction: float) -> float:
    # Shortest way around the wheel
    diff = (end - start + 180.0) % 360.0 - 180.0
    return start + diff * fraction


def _interpolate(first: ColorSample, second: ColorSample, fraction: float) -> ColorSample:
    h1, s1, v1 = hsb(first)
    h2, s2, v2 = hsb(second)
    return from_hsb(
        _interpolate_hue(h1, h2, fraction),
        lerp(s1, s2, fraction),
        lerp(v1, v2, fraction),
    )


def linear_interpolation(colors: Sequence[ColorLike], count: int) -> list[ColorSample]:
    """Smooth HSB gradient through ``colors`` with ``count`` stops.

    Hue takes the shortest path around the color wheel. With fewer than two
    source colors, or a count that does not exceed the source length, this
    falls back to :func:`expand`.
    """
    if len(colors) < 2 or count <= len(colors):
        return expand(colors, count)

    samples = _samples(colors)
    step = (len(samples) - 1) / (count - 1)
    result: list[ColorSample] = []
    for i in range(count):
        position = i * step
        lower = int(position)
        upper = min(lower + 1, len(samples) - 1)
        if lower == upper:
            result.append(samples[lower])
        else:
            result.append(_interpolate(samples[lower], samples[upper], position - lower))
    return result


def simple_repeat(colors: Sequence[ColorLike], count: int) -> list[ColorSample]:
    """Cycle through ``colors`` until ``count`` entries are produced."""
    if not colors or count <= 0:
        return []
    samples = _samples(colors)
    return [samples[i % len(samples)] for i in range(count)]


def expand_for_gradient(colors: Sequence[ColorLike]) -> list[ColorSample]:
    """Expand to a 4x4 gradient mesh."""
    return expand(colors, GRADIENT_MESH_SIZE)


def expand_to_gradient_mesh(color: ColorLike, size: int = GRADIENT_MESH_SIZE) -> list[ColorSample]:
    return generate_variations(color, size)


def contract_to_solid(colors: Sequence[ColorLike]) -> ColorSample:
    """Collapse a palette to its single most representative color."""
    return select_primary_color(colors)


__all__ = [
    "GRADIENT_MESH_SIZE",
    "contract",
    "contract_to_solid",
    "expand",
    "expand_for_gradient",
    "expand_to_gradient_mesh",
    "generate_variations",
    "linear_interpolation",
    "select_primary_color",
    "simple_repeat",
]
