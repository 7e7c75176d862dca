"""Contrast engine - direction selection, blend search, and the public API.

Usage:
    from shadewise.core.contrast import contrasting_color, ContrastDirection

    text = contrasting_color("#3366CC", against="#FFFFFF")
    dark = contrasting_color("#3366CC", against="#3366CC", direction=ContrastDirection.FORCE_DARK)
"""

from shadewise.core.contrast.api import (
    LOW_CONTRAST_WEIGHT_THRESHOLD,
    contrasting_color,
    contrasting_shade,
    has_good_contrast,
    optimize_contrast,
    recommended_weight,
)
from shadewise.core.contrast.direction import max_contrast_toward, select_anchor
from shadewise.core.contrast.models import (
    Anchor,
    BlendRange,
    BlendStyle,
    ContrastDirection,
    ContrastResult,
    SearchSettings,
)
from shadewise.core.contrast.search import (
    DEFAULT_SEARCH_SETTINGS,
    resolve_blend_range,
    search_blend,
    validate_target_ratio,
)

__all__ = [
    # Models
    "Anchor",
    "BlendRange",
    "BlendStyle",
    "ContrastDirection",
    "ContrastResult",
    "SearchSettings",
    # Direction
    "max_contrast_toward",
    "select_anchor",
    # Search
    "DEFAULT_SEARCH_SETTINGS",
    "resolve_blend_range",
    "search_blend",
    "validate_target_ratio",
    # API
    "LOW_CONTRAST_WEIGHT_THRESHOLD",
    "contrasting_color",
    "contrasting_shade",
    "has_good_contrast",
    "optimize_contrast",
    "recommended_weight",
]
