"""Error types for color analysis and contrast operations.

Every failure in the color core is raised as one of these exceptions.
Math functions never fall back to a default luminance or ratio, so a
caller either gets a real number or an exception it can handle.
"""

from __future__ import annotations

from typing import Any


class ShadewiseError(Exception):
    """Base exception for all shadewise color errors.

    Attributes:
        message: Human-readable error description.
        reason: Why the failure happened.
        suggestion: What the caller can try instead.
    """

    reason: str = "The color operation failed."
    suggestion: str = "Check the input values."

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ComponentExtractionError(ShadewiseError):
    """RGBA components could not be read from a color value."""

    reason = "The color uses a format that is not supported for component extraction."
    suggestion = (
        "Pass a ColorSample, a hex string, an RGB(A) sequence or a mapping with r/g/b keys."
    )

    def __init__(self, color: Any, *, detail: str | None = None) -> None:
        self.color = color
        self.detail = detail
        message = f"Failed to extract color components from {color!r}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class ColorSpaceConversionError(ShadewiseError):
    """A color could not be converted into the required color space."""

    reason = "The color could not be converted to the color space required for processing."
    suggestion = "Provide the color in sRGB."

    def __init__(self, color: Any, *, target_space: str) -> None:
        self.color = color
        self.target_space = target_space
        super().__init__(f"Failed to convert color {color!r} to {target_space} color space")


class InvalidParameterError(ShadewiseError, ValueError):
    """A parameter value was rejected before any computation started."""

    reason = "The provided parameter value is outside the expected range or format."

    def __init__(self, parameter: str, value: Any, *, expected: str | None = None) -> None:
        self.parameter = parameter
        self.value = value
        self.expected = expected
        self.suggestion = f"Check the valid values for the '{parameter}' parameter."
        message = f"Invalid value {value!r} provided for parameter '{parameter}'"
        if expected:
            message = f"{message} (expected {expected})"
        super().__init__(message)


class InvalidColorCalculationError(ShadewiseError):
    """A calculation produced a value that cannot be used."""

    reason = "The color calculation produced invalid or out-of-range values."
    suggestion = "Check that channel values are within a sensible range."

    def __init__(self, operation: str, *, detail: str | None = None) -> None:
        self.operation = operation
        message = f"Color calculation failed during operation: {operation}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


__all__ = [
    "ColorSpaceConversionError",
    "ComponentExtractionError",
    "InvalidColorCalculationError",
    "InvalidParameterError",
    "ShadewiseError",
]
