"""Color models - the RGBA sample and the enums the color math is keyed on.

All color math in shadewise operates on ``ColorSample``. Samples are
immutable; every operation returns a new sample.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from shadewise.core.contrast.models import ContrastDirection


class BrightnessMethod(str, Enum):
    """Method used to reduce a color to a single brightness value.

    Attributes:
        LUMINANCE: WCAG 2.1 relative luminance (gamma corrected, weighted).
        RGB: Arithmetic mean of the r, g and b channels.
    """

    LUMINANCE = "luminance"
    RGB = "rgb"


class ColorScheme(str, Enum):
    """Light or dark appearance recommended for content on a color."""

    LIGHT = "light"
    DARK = "dark"


class ColorClassification(str, Enum):
    """Light/dark label derived from a color's brightness."""

    LIGHT = "light"
    DARK = "dark"

    @property
    def scheme(self) -> ColorScheme:
        """Recommended color scheme for this classification."""
        return ColorScheme.LIGHT if self is ColorClassification.LIGHT else ColorScheme.DARK


class ColorSample(BaseModel):
    """Single RGBA color value.

    Channels are conceptually in [0, 1]. Values outside that range (wide
    gamut colors) are accepted and never crash the math, but WCAG results
    are only meaningful for canonical sRGB input. Non-finite channels are
    rejected.

    Attributes:
        r: Red channel.
        g: Green channel.
        b: Blue channel.
        a: Alpha channel (default 1.0).

    Example:
        >>> ColorSample(1, 1, 1) == ColorSample(r=1.0, g=1.0, b=1.0, a=1.0)
        True
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    r: float = Field(..., allow_inf_nan=False)
    g: float = Field(..., allow_inf_nan=False)
    b: float = Field(..., allow_inf_nan=False)
    a: float = Field(default=1.0, allow_inf_nan=False)

    def __init__(self, r: float, g: float, b: float, a: float = 1.0, **data: Any) -> None:
        super().__init__(r=r, g=g, b=b, a=a, **data)

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_hex(cls, value: str) -> ColorSample:
        """Parse a 3, 6 or 8 digit hex string (leading '#' optional)."""
        from shadewise.core.color.hex import from_hex

        return from_hex(value)

    @classmethod
    def from_rgb255(cls, r: int, g: int, b: int, a: int = 255) -> ColorSample:
        """Build a sample from 8-bit channel values."""
        return cls(r / 255.0, g / 255.0, b / 255.0, a / 255.0)

    @property
    def rgba(self) -> tuple[float, float, float, float]:
        return (self.r, self.g, self.b, self.a)

    @property
    def rgb(self) -> tuple[float, float, float]:
        return (self.r, self.g, self.b)

    def with_alpha(self, a: float) -> ColorSample:
        """Copy of this sample with a different alpha."""
        return ColorSample(self.r, self.g, self.b, a)

    def to_hex(self, *, alpha: bool = False) -> str:
        """Format as ``RRGGBB`` (or ``RRGGBBAA`` when ``alpha`` is set)."""
        from shadewise.core.color.hex import to_hex

        return to_hex(self, include_alpha=alpha)

    # ------------------------------------------------------------------
    # Math conveniences (thin wrappers over the module functions)
    # ------------------------------------------------------------------

    def relative_luminance(self) -> float:
        from shadewise.core.color.luminance import relative_luminance

        return relative_luminance(self)

    def brightness(self, method: BrightnessMethod | str = BrightnessMethod.LUMINANCE) -> float:
        from shadewise.core.color.luminance import brightness

        return brightness(self, method)

    def contrast_ratio(self, other: Any) -> float:
        from shadewise.core.color.luminance import contrast_ratio

        return contrast_ratio(self, other)

    def classify(
        self,
        threshold: float = 0.5,
        method: BrightnessMethod | str = BrightnessMethod.LUMINANCE,
    ) -> ColorClassification:
        from shadewise.core.color.luminance import classify

        return classify(self, threshold=threshold, method=method)

    def meets_wcag_aa(self, other: Any) -> bool:
        from shadewise.core.color.luminance import meets_wcag_aa

        return meets_wcag_aa((self, other))

    def meets_wcag_aaa(self, other: Any) -> bool:
        from shadewise.core.color.luminance import meets_wcag_aaa

        return meets_wcag_aaa((self, other))

    def contrasting_shade(self, **kwargs: Any) -> ColorSample:
        """Shade of this color that contrasts with itself.

        Keyword arguments are forwarded to
        :func:`shadewise.core.contrast.api.contrasting_shade`.
        """
        from shadewise.core.contrast.api import contrasting_shade

        return contrasting_shade(self, **kwargs)

    def optimized(
        self,
        against: Any,
        *,
        target_ratio: float | None = None,
        direction: ContrastDirection | None = None,
    ) -> ColorSample:
        """Version of this color adjusted to contrast with ``against``."""
        from shadewise.core.color.luminance import DEFAULT_THRESHOLD
        from shadewise.core.contrast.api import contrasting_color
        from shadewise.core.contrast.models import ContrastDirection

        return contrasting_color(
            self,
            against=against,
            target_ratio=DEFAULT_THRESHOLD if target_ratio is None else target_ratio,
            direction=direction or ContrastDirection.AUTO,
        )

    def __str__(self) -> str:
        return f"ColorSample(r={self.r:.4g}, g={self.g:.4g}, b={self.b:.4g}, a={self.a:.4g})"


BLACK = ColorSample(0.0, 0.0, 0.0)
WHITE = ColorSample(1.0, 1.0, 1.0)


__all__ = [
    "BLACK",
    "WHITE",
    "BrightnessMethod",
    "ColorClassification",
    "ColorSample",
    "ColorScheme",
]
