"""Palette contrast audit.

Vectorized WCAG luminance and contrast over whole palettes, for checking
every foreground/background pairing at once instead of pair by pair.

Example:
    >>> matrix = contrast_matrix(["#000000", "#FFFFFF"])
    >>> round(float(matrix[0, 1]), 1)
    21.0
"""

from __future__ import annotations

from collections.abc import Sequence
import logging

import numpy as np
from numpy.typing import NDArray
from pydantic import BaseModel, ConfigDict

from shadewise.core.color.components import ColorLike, read_components
from shadewise.core.color.errors import InvalidColorCalculationError
from shadewise.core.color.luminance import (
    CONTRAST_FLARE,
    DEFAULT_THRESHOLD,
    GAMMA,
    GAMMA_OFFSET,
    GAMMA_SCALE,
    LINEAR_CUTOFF,
    LINEAR_SLOPE,
    LUMINANCE_WEIGHTS,
)
from shadewise.core.color.models import ColorSample
from shadewise.core.utils.logging import log_performance

logger = logging.getLogger(__name__)

_WEIGHTS = np.array(LUMINANCE_WEIGHTS)


class ContrastPair(BaseModel):
    """Two palette entries whose mutual contrast falls below a threshold.

    Attributes:
        first: Index of the first color in the audited palette.
        second: Index of the second color.
        ratio: Contrast ratio between them.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    first: int
    second: int
    ratio: float


def _rgb_array(colors: Sequence[ColorLike]) -> NDArray[np.float64]:
    samples: list[ColorSample] = [read_components(c) for c in colors]
    return np.array([s.rgb for s in samples], dtype=np.float64).reshape(-1, 3)


def luminance_array(colors: Sequence[ColorLike]) -> NDArray[np.float64]:
    """Relative luminance of every color, shape ``(n,)``."""
    rgb = _rgb_array(colors)
    linear = np.where(
        rgb <= LINEAR_CUTOFF,
        rgb / LINEAR_SLOPE,
        ((np.maximum(rgb, LINEAR_CUTOFF) + GAMMA_OFFSET) / GAMMA_SCALE) ** GAMMA,
    )
    return linear @ _WEIGHTS


@log_performance
def contrast_matrix(colors: Sequence[ColorLike]) -> NDArray[np.float64]:
    """Symmetric ``(n, n)`` matrix of pairwise contrast ratios.

    The diagonal is 1.0 (every color against itself).

    Raises:
        InvalidColorCalculationError: If a luminance is so negative the
            ratio denominator is not positive.
    """
    lum = luminance_array(colors)
    if lum.size and float(lum.min()) + CONTRAST_FLARE <= 0:
        raise InvalidColorCalculationError(
            "contrast_matrix", detail="luminance denominator is not positive"
        )
    lighter = np.maximum.outer(lum, lum)
    darker = np.minimum.outer(lum, lum)
    return (lighter + CONTRAST_FLARE) / (darker + CONTRAST_FLARE)


def low_contrast_pairs(
    colors: Sequence[ColorLike],
    threshold: float = DEFAULT_THRESHOLD,
) -> list[ContrastPair]:
    """Every distinct pair of palette entries below ``threshold``.

    Args:
        colors: Palette to audit.
        threshold: Minimum acceptable contrast ratio (default WCAG AA).

    Returns:
        Pairs with ``first < second``, ordered by ascending ratio.
    """
    matrix = contrast_matrix(colors)
    rows, cols = np.triu_indices(len(matrix), k=1)
    ratios = matrix[rows, cols]
    failing = ratios < threshold

    pairs = [
        ContrastPair(first=int(i), second=int(j), ratio=float(r))
        for i, j, r in zip(rows[failing], cols[failing], ratios[failing], strict=True)
    ]
    pairs.sort(key=lambda p: p.ratio)
    logger.debug(f"Audited {len(matrix)} colors: {len(pairs)} pairs below {threshold}")
    return pairs


__all__ = [
    "ContrastPair",
    "contrast_matrix",
    "low_contrast_pairs",
    "luminance_array",
]
