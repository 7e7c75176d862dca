"""Color domain - samples, luminance/contrast math, and blending.

Usage:
    from shadewise.core.color import ColorSample, contrast_ratio, blend

    ratio = contrast_ratio(ColorSample(1, 1, 1), "#000000")
"""

from shadewise.core.color.blend import (
    adjust_brightness,
    adjust_luminance,
    blend,
    from_hsb,
    hsb,
)
from shadewise.core.color.components import ColorLike, SupportsRGBA, read_components
from shadewise.core.color.errors import (
    ColorSpaceConversionError,
    ComponentExtractionError,
    InvalidColorCalculationError,
    InvalidParameterError,
    ShadewiseError,
)
from shadewise.core.color.hex import from_hex, to_hex
from shadewise.core.color.luminance import (
    DEFAULT_THRESHOLD,
    MAX_CONTRAST_RATIO,
    MIN_CONTRAST_RATIO,
    WCAG_AA_THRESHOLD,
    WCAG_AAA_THRESHOLD,
    brightness,
    classify,
    coerce_method,
    color_scheme,
    contrast_ratio,
    meets_threshold,
    meets_wcag_aa,
    meets_wcag_aaa,
    relative_luminance,
    rgb_brightness,
)
from shadewise.core.color.models import (
    BLACK,
    WHITE,
    BrightnessMethod,
    ColorClassification,
    ColorSample,
    ColorScheme,
)

__all__ = [
    # Models
    "BLACK",
    "WHITE",
    "BrightnessMethod",
    "ColorClassification",
    "ColorSample",
    "ColorScheme",
    # Components
    "ColorLike",
    "SupportsRGBA",
    "read_components",
    # Errors
    "ColorSpaceConversionError",
    "ComponentExtractionError",
    "InvalidColorCalculationError",
    "InvalidParameterError",
    "ShadewiseError",
    # Hex
    "from_hex",
    "to_hex",
    # Math
    "DEFAULT_THRESHOLD",
    "MAX_CONTRAST_RATIO",
    "MIN_CONTRAST_RATIO",
    "WCAG_AA_THRESHOLD",
    "WCAG_AAA_THRESHOLD",
    "brightness",
    "classify",
    "coerce_method",
    "color_scheme",
    "contrast_ratio",
    "meets_threshold",
    "meets_wcag_aa",
    "meets_wcag_aaa",
    "relative_luminance",
    "rgb_brightness",
    # Blending
    "adjust_brightness",
    "adjust_luminance",
    "blend",
    "from_hsb",
    "hsb",
]
