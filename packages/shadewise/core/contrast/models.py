"""Contrast search models - direction policy, blend range, and results."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

from shadewise.core.color.models import BLACK, WHITE, ColorSample


class ContrastDirection(str, Enum):
    """Policy for choosing the anchor a color is blended toward.

    Attributes:
        AUTO: Pick whichever of black/white gives the higher contrast.
        FORCE_LIGHT: Always blend toward white.
        FORCE_DARK: Always blend toward black.
        PREFER_LIGHT: Blend toward white unless white cannot reach the target.
        PREFER_DARK: Blend toward black unless black cannot reach the target.
    """

    AUTO = "auto"
    FORCE_LIGHT = "force_light"
    FORCE_DARK = "force_dark"
    PREFER_LIGHT = "prefer_light"
    PREFER_DARK = "prefer_dark"


class Anchor(str, Enum):
    """Luminance extreme a color is blended toward."""

    BLACK = "black"
    WHITE = "white"

    @property
    def color(self) -> ColorSample:
        return BLACK if self is Anchor.BLACK else WHITE

    @property
    def opposite(self) -> Anchor:
        return Anchor.WHITE if self is Anchor.BLACK else Anchor.BLACK


class BlendStyle(str, Enum):
    """Named minimum blend presets.

    Attributes:
        MINIMAL: No minimum blend (0%).
        MODERATE: At least 50% blend.
        STRONG: At least 70% blend.
        MAXIMUM: Always fully blended (100%).
    """

    MINIMAL = "minimal"
    MODERATE = "moderate"
    STRONG = "strong"
    MAXIMUM = "maximum"

    @property
    def minimum_blend(self) -> float:
        return _STYLE_MINIMUMS[self]


_STYLE_MINIMUMS: dict[BlendStyle, float] = {
    BlendStyle.MINIMAL: 0.0,
    BlendStyle.MODERATE: 0.5,
    BlendStyle.STRONG: 0.7,
    BlendStyle.MAXIMUM: 1.0,
}


class BlendRange(BaseModel):
    """Closed sub-range of [0, 1] the blend search must stay within.

    Attributes:
        lower: Smallest blend ratio the search may return.
        upper: Largest blend ratio the search may return.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    lower: float = Field(default=0.0, ge=0.0, le=1.0)
    upper: float = Field(default=1.0, ge=0.0, le=1.0)

    @model_validator(mode="after")
    def _check_order(self) -> BlendRange:
        if self.lower > self.upper:
            raise ValueError(f"lower ({self.lower}) must not exceed upper ({self.upper})")
        return self

    @classmethod
    def full(cls) -> BlendRange:
        return cls(lower=0.0, upper=1.0)

    @classmethod
    def at_least(cls, minimum: float) -> BlendRange:
        """Range ``[minimum, 1]``."""
        return cls(lower=minimum, upper=1.0)


class SearchSettings(BaseModel):
    """Tunables for the blend search.

    Attributes:
        max_iterations: Number of bisection steps.
        tolerance: Early exit once a sufficient ratio is within this
            distance of the target.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    max_iterations: int = Field(default=5, ge=1, le=64)
    tolerance: float = Field(default=0.05, ge=0.0)


class ContrastResult(BaseModel):
    """Outcome of a contrast optimization.

    Attributes:
        color: Resulting color.
        blend_ratio: Blend applied toward the anchor (0 when unchanged).
        contrast_ratio: Contrast of ``color`` against the background.
        target_ratio: Requested contrast ratio.
        anchor: Anchor blended toward, or None when no blend was needed.
        iterations: Search iterations performed.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    color: ColorSample
    blend_ratio: float
    contrast_ratio: float
    target_ratio: float
    anchor: Anchor | None = None
    iterations: int = 0

    @property
    def target_met(self) -> bool:
        return self.contrast_ratio >= self.target_ratio

    @property
    def unchanged(self) -> bool:
        return self.anchor is None


__all__ = [
    "Anchor",
    "BlendRange",
    "BlendStyle",
    "ContrastDirection",
    "ContrastResult",
    "SearchSettings",
]
