"""Public contrast API.

Two use cases, one algorithm:

1. Monochromatic - "give me a shade of blue that reads on blue":
   :func:`contrasting_shade`.
2. Bichromatic - "give me a version of red that reads on blue":
   :func:`contrasting_color`.

Both validate their parameters eagerly, select an anchor with the
direction selector and run the blend search.

Example:
    >>> from shadewise.core.color import ColorSample
    >>> text = contrasting_color("#FF0000", against="#0000FF")
    >>> has_good_contrast(text, "#0000FF")
    True
"""

from __future__ import annotations

from collections.abc import Sequence
import logging
from typing import TypeVar

from shadewise.core.color.components import ColorLike, read_components
from shadewise.core.color.errors import InvalidParameterError
from shadewise.core.color.luminance import (
    DEFAULT_THRESHOLD,
    WCAG_AA_THRESHOLD,
    coerce_method,
    contrast_ratio,
)
from shadewise.core.color.models import BrightnessMethod, ColorSample
from shadewise.core.contrast.direction import select_anchor
from shadewise.core.contrast.models import (
    BlendRange,
    BlendStyle,
    ContrastDirection,
    ContrastResult,
    SearchSettings,
)
from shadewise.core.contrast.search import (
    resolve_blend_range,
    search_blend,
    validate_target_ratio,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Below this ratio text needs the heaviest weight on offer
LOW_CONTRAST_WEIGHT_THRESHOLD = 3.0


def _coerce_direction(direction: ContrastDirection | str) -> ContrastDirection:
    try:
        return ContrastDirection(direction)
    except ValueError as e:
        raise InvalidParameterError(
            "direction", direction, expected=", ".join(d.value for d in ContrastDirection)
        ) from e


def optimize_contrast(
    color: ColorLike,
    against: ColorLike,
    method: BrightnessMethod | str = BrightnessMethod.LUMINANCE,
    target_ratio: float = DEFAULT_THRESHOLD,
    direction: ContrastDirection | str = ContrastDirection.AUTO,
    minimum_blend: float | None = None,
    blend_style: BlendStyle | str | None = None,
    blend_range: BlendRange | tuple[float, float] | None = None,
    settings: SearchSettings | None = None,
) -> ContrastResult:
    """Optimize ``color`` against ``against`` and report how it was done.

    Same parameters and semantics as :func:`contrasting_color`; returns
    the full :class:`ContrastResult` (blend ratio, achieved ratio, anchor).
    """
    target = validate_target_ratio(target_ratio)
    brightness_method = coerce_method(method)
    policy = _coerce_direction(direction)
    search_range = resolve_blend_range(minimum_blend, blend_style, blend_range)

    subject = read_components(color)
    background = read_components(against)

    # Short-circuit before the direction selector evaluates anything
    current = contrast_ratio(subject, background)
    if current >= target:
        return ContrastResult(
            color=subject,
            blend_ratio=0.0,
            contrast_ratio=current,
            target_ratio=target,
        )

    anchor = select_anchor(subject, background, policy, target)
    logger.debug(
        f"Optimizing contrast ({brightness_method.value}): current={current:.2f} "
        f"target={target:.2f} anchor={anchor.value} "
        f"range=[{search_range.lower}, {search_range.upper}]"
    )
    return search_blend(subject, background, anchor, target, search_range, settings)


def contrasting_color(
    color: ColorLike,
    against: ColorLike,
    method: BrightnessMethod | str = BrightnessMethod.LUMINANCE,
    target_ratio: float = DEFAULT_THRESHOLD,
    direction: ContrastDirection | str = ContrastDirection.AUTO,
    minimum_blend: float | None = None,
    blend_style: BlendStyle | str | None = None,
    blend_range: BlendRange | tuple[float, float] | None = None,
    settings: SearchSettings | None = None,
) -> ColorSample:
    """Optimize one color to read well against a background.

    If the color already meets ``target_ratio`` it is returned unchanged.
    Otherwise it is blended toward black or white (chosen by
    ``direction``) by the smallest amount that reaches the target within
    the allowed blend range. An unreachable target yields the best blend
    found rather than an error; check the result's contrast if you need a
    guarantee.

    Args:
        color: Color to optimize.
        against: Background color.
        method: Brightness method. Contrast itself is always computed from
            WCAG relative luminance; the method is recorded for tracing.
        target_ratio: Minimum contrast ratio, in [1, 21] (default WCAG AA 4.5).
        direction: Anchor policy (default AUTO).
        minimum_blend: Smallest blend allowed (highest precedence).
        blend_style: Named minimum blend preset.
        blend_range: Explicit (lower, upper) blend range (lowest precedence).
        settings: Search iteration budget and tolerance.

    Returns:
        Optimized color.

    Raises:
        InvalidParameterError: If a parameter is out of range or names an
            unknown method, direction or blend style.
        ComponentExtractionError: If either color cannot be read.
        ColorSpaceConversionError: If either color is not sRGB.
    """
    return optimize_contrast(
        color,
        against,
        method=method,
        target_ratio=target_ratio,
        direction=direction,
        minimum_blend=minimum_blend,
        blend_style=blend_style,
        blend_range=blend_range,
        settings=settings,
    ).color


def contrasting_shade(
    color: ColorLike,
    method: BrightnessMethod | str = BrightnessMethod.LUMINANCE,
    target_ratio: float = DEFAULT_THRESHOLD,
    direction: ContrastDirection | str = ContrastDirection.AUTO,
    minimum_blend: float | None = None,
    blend_style: BlendStyle | str | None = None,
    blend_range: BlendRange | tuple[float, float] | None = None,
    settings: SearchSettings | None = None,
) -> ColorSample:
    """Shade of ``color`` that contrasts with ``color`` itself.

    Equivalent to ``contrasting_color(color, against=color, ...)``.
    """
    return contrasting_color(
        color,
        against=color,
        method=method,
        target_ratio=target_ratio,
        direction=direction,
        minimum_blend=minimum_blend,
        blend_style=blend_style,
        blend_range=blend_range,
        settings=settings,
    )


def has_good_contrast(color1: ColorLike, color2: ColorLike) -> bool:
    """Quick accessibility check: contrast ratio >= WCAG AA (4.5)."""
    return contrast_ratio(color1, color2) >= WCAG_AA_THRESHOLD


def recommended_weight(
    color: ColorLike,
    against: ColorLike,
    weights: Sequence[T],
) -> T:
    """Pick a text weight from ``weights`` (ordered lightest to heaviest).

    Contrast below 3.0 picks the heaviest weight, below WCAG AA the middle
    one, and anything at or above AA the lightest.

    Args:
        color: Text color.
        against: Background color.
        weights: Candidate weights, lightest first. Any values work
            (names, numeric CSS weights, font objects).

    Returns:
        One element of ``weights``.

    Raises:
        InvalidParameterError: If ``weights`` is empty.
    """
    if not weights:
        raise InvalidParameterError("weights", weights, expected="at least one weight")

    ratio = contrast_ratio(color, against)
    if ratio < LOW_CONTRAST_WEIGHT_THRESHOLD:
        choice = weights[-1]
    elif ratio < WCAG_AA_THRESHOLD:
        choice = weights[len(weights) // 2]
    else:
        choice = weights[0]

    logger.debug(f"Contrast {ratio:.2f} -> weight {choice!r}")
    return choice


__all__ = [
    "LOW_CONTRAST_WEIGHT_THRESHOLD",
    "contrasting_color",
    "contrasting_shade",
    "has_good_contrast",
    "optimize_contrast",
    "recommended_weight",
]
