"""Blend search - finds the smallest blend toward an anchor that meets a target.

Blending a color toward black or white changes its luminance
monotonically, so the contrast against a fixed background is monotonic in
the blend ratio. That is what makes bisection valid here: any change to
how anchors are chosen must keep them at a luminance extreme.
"""

from __future__ import annotations

import logging

from shadewise.core.color.blend import blend
from shadewise.core.color.errors import InvalidParameterError
from shadewise.core.color.luminance import (
    MAX_CONTRAST_RATIO,
    MIN_CONTRAST_RATIO,
    contrast_ratio,
)
from shadewise.core.color.models import ColorSample
from shadewise.core.contrast.models import (
    Anchor,
    BlendRange,
    BlendStyle,
    ContrastResult,
    SearchSettings,
)
from shadewise.core.utils.math import midpoint

logger = logging.getLogger(__name__)

DEFAULT_SEARCH_SETTINGS = SearchSettings()


def validate_target_ratio(target_ratio: float) -> float:
    """Reject target ratios outside the achievable WCAG range [1, 21]."""
    value = float(target_ratio)
    if not MIN_CONTRAST_RATIO <= value <= MAX_CONTRAST_RATIO:
        raise InvalidParameterError(
            "target_ratio",
            target_ratio,
            expected=f"a ratio between {MIN_CONTRAST_RATIO:g} and {MAX_CONTRAST_RATIO:g}",
        )
    return value


def resolve_blend_range(
    minimum_blend: float | None = None,
    blend_style: BlendStyle | str | None = None,
    blend_range: BlendRange | tuple[float, float] | None = None,
) -> BlendRange:
    """Resolve the search range from the caller's blend constraints.

    Exactly one constraint is honored, in precedence order:
    ``minimum_blend``, then ``blend_style``, then ``blend_range``. With none
    given, the full range [0, 1] is searched.

    Args:
        minimum_blend: Smallest blend allowed; searches ``[minimum_blend, 1]``.
        blend_style: Named minimum blend preset.
        blend_range: Explicit ``[lower, upper]`` range.

    Returns:
        BlendRange to search.

    Raises:
        InvalidParameterError: If the honored constraint is out of [0, 1].
    """
    if minimum_blend is not None:
        if not 0.0 <= minimum_blend <= 1.0:
            raise InvalidParameterError(
                "minimum_blend", minimum_blend, expected="a value in [0, 1]"
            )
        return BlendRange.at_least(minimum_blend)

    if blend_style is not None:
        try:
            style = BlendStyle(blend_style)
        except ValueError as e:
            raise InvalidParameterError(
                "blend_style", blend_style, expected=", ".join(s.value for s in BlendStyle)
            ) from e
        return BlendRange.at_least(style.minimum_blend)

    if blend_range is None:
        return BlendRange.full()

    if isinstance(blend_range, BlendRange):
        return blend_range

    try:
        lower, upper = blend_range
        return BlendRange(lower=lower, upper=upper)
    except (TypeError, ValueError) as e:
        # pydantic's ValidationError is a ValueError
        raise InvalidParameterError(
            "blend_range", blend_range, expected="(lower, upper) within [0, 1]"
        ) from e


def search_blend(
    color: ColorSample,
    background: ColorSample,
    anchor: Anchor,
    target_ratio: float,
    search_range: BlendRange | None = None,
    settings: SearchSettings | None = None,
) -> ContrastResult:
    """Find the smallest blend toward ``anchor`` that meets ``target_ratio``.

    If ``color`` already meets the target it is returned unchanged. When
    the target cannot be reached inside ``search_range`` the best
    provisional blend is returned; this is not an error, so callers that
    need a guarantee must check ``ContrastResult.target_met``.

    Args:
        color: Color being adjusted.
        background: Reference color.
        anchor: Anchor to blend toward (from the direction selector).
        target_ratio: Minimum contrast ratio to reach.
        search_range: Blend ratios the search may return (default [0, 1]).
        settings: Iteration budget and tolerance.

    Returns:
        ContrastResult describing the chosen blend.
    """
    search_range = search_range or BlendRange.full()
    settings = settings or DEFAULT_SEARCH_SETTINGS

    current = contrast_ratio(color, background)
    if current >= target_ratio:
        logger.debug(f"Contrast {current:.2f} already meets target {target_ratio:.2f}")
        return ContrastResult(
            color=color,
            blend_ratio=0.0,
            contrast_ratio=current,
            target_ratio=target_ratio,
        )

    anchor_color = anchor.color
    low, high = search_range.lower, search_range.upper
    best_blend = low
    best_ratio = current
    found = False
    iterations = 0

    for iterations in range(1, settings.max_iterations + 1):
        test_blend = midpoint(low, high)
        test_ratio = contrast_ratio(blend(color, anchor_color, test_blend), background)

        if test_ratio >= target_ratio:
            if not found or test_blend < best_blend:
                best_blend, best_ratio, found = test_blend, test_ratio, True
            high = test_blend
        else:
            low = test_blend
            if not found:
                best_blend, best_ratio = test_blend, test_ratio

        logger.debug(
            f"Search step {iterations}: blend={test_blend:.4f} ratio={test_ratio:.3f} "
            f"best={best_blend:.4f}"
        )

        if found and abs(best_ratio - target_ratio) < settings.tolerance:
            break

    if not found:
        logger.debug(
            f"Target {target_ratio:.2f} not reachable toward {anchor.value} within "
            f"[{search_range.lower}, {search_range.upper}]; best ratio {best_ratio:.2f}"
        )

    return ContrastResult(
        color=blend(color, anchor_color, best_blend),
        blend_ratio=best_blend,
        contrast_ratio=best_ratio,
        target_ratio=target_ratio,
        anchor=anchor,
        iterations=iterations,
    )


__all__ = [
    "DEFAULT_SEARCH_SETTINGS",
    "resolve_blend_range",
    "search_blend",
    "validate_target_ratio",
]
