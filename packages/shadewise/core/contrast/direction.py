"""Direction selector - picks the anchor (black or white) for the blend search."""

from __future__ import annotations

import logging

from shadewise.core.color.blend import blend
from shadewise.core.color.luminance import contrast_ratio
from shadewise.core.color.models import ColorSample
from shadewise.core.contrast.models import Anchor, ContrastDirection

logger = logging.getLogger(__name__)


def max_contrast_toward(color: ColorSample, background: ColorSample, anchor: Anchor) -> float:
    """Contrast achieved when ``color`` is fully blended toward ``anchor``."""
    fully_blended = blend(color, anchor.color, 1.0)
    return contrast_ratio(fully_blended, background)


def select_anchor(
    color: ColorSample,
    background: ColorSample,
    direction: ContrastDirection,
    target_ratio: float,
) -> Anchor:
    """Choose the anchor the search blends ``color`` toward.

    - FORCE_DARK / FORCE_LIGHT return their anchor without evaluation.
    - AUTO compares the fully blended contrast toward each anchor and picks
      the higher one. Equal contrasts pick black.
    - PREFER_* keeps the preferred anchor when fully blending toward it
      reaches ``target_ratio``, otherwise switches to the opposite anchor.

    Args:
        color: Color being adjusted.
        background: Reference color.
        direction: Direction policy.
        target_ratio: Contrast ratio the search will aim for.

    Returns:
        Anchor.BLACK or Anchor.WHITE.
    """
    if direction is ContrastDirection.FORCE_DARK:
        return Anchor.BLACK
    if direction is ContrastDirection.FORCE_LIGHT:
        return Anchor.WHITE

    if direction is ContrastDirection.AUTO:
        black_ratio = max_contrast_toward(color, background, Anchor.BLACK)
        white_ratio = max_contrast_toward(color, background, Anchor.WHITE)
        anchor = Anchor.BLACK if black_ratio >= white_ratio else Anchor.WHITE
        logger.debug(
            f"Auto direction: black={black_ratio:.2f} white={white_ratio:.2f} -> {anchor.value}"
        )
        return anchor

    preferred = Anchor.WHITE if direction is ContrastDirection.PREFER_LIGHT else Anchor.BLACK
    reachable = max_contrast_toward(color, background, preferred)
    anchor = preferred if reachable >= target_ratio else preferred.opposite
    logger.debug(
        f"Prefer direction {direction.value}: max ratio {reachable:.2f} "
        f"vs target {target_ratio:.2f} -> {anchor.value}"
    )
    return anchor


__all__ = [
    "max_contrast_toward",
    "select_anchor",
]
