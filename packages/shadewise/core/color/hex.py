"""Hex string codec for ColorSample."""

from __future__ import annotations

import re

from shadewise.core.color.errors import ComponentExtractionError
from shadewise.core.color.models import ColorSample

_HEX_RE = re.compile(r"^[0-9A-Fa-f]+$")


def _channel_to_byte(value: float) -> int:
    # Round half away from zero, then clamp to a single byte
    scaled = int(value * 255 + 0.5) if value >= 0 else 0
    return max(0, min(255, scaled))


def to_hex(color: ColorSample, *, include_alpha: bool = False) -> str:
    """Format a sample as an uppercase hex string without a leading '#'.

    Args:
        color: Sample to format. Out-of-range channels are clamped.
        include_alpha: Append the alpha byte (8 digits instead of 6).

    Returns:
        Hex string, e.g. ``"FF0000"`` or ``"FF000080"``.
    """
    channels = [color.r, color.g, color.b]
    if include_alpha:
        channels.append(color.a)
    return "".join(f"{_channel_to_byte(c):02X}" for c in channels)


def from_hex(value: str) -> ColorSample:
    """Parse a hex color string.

    Supports ``RGB``, ``RRGGBB`` and ``RRGGBBAA`` with or without a
    leading ``#``. Surrounding whitespace is ignored.

    Args:
        value: Hex string.

    Returns:
        Parsed ColorSample.

    Raises:
        ComponentExtractionError: If the string is not a valid hex color.

    Example:
        >>> from_hex("#F00").rgba
        (1.0, 0.0, 0.0, 1.0)
    """
    digits = value.strip().removeprefix("#")
    if not digits or not _HEX_RE.match(digits):
        raise ComponentExtractionError(value, detail="not a hexadecimal color")

    number = int(digits, 16)
    length = len(digits)

    if length == 3:
        r = ((number & 0xF00) >> 8) / 15.0
        g = ((number & 0x0F0) >> 4) / 15.0
        b = (number & 0x00F) / 15.0
        a = 1.0
    elif length == 6:
        r = ((number & 0xFF0000) >> 16) / 255.0
        g = ((number & 0x00FF00) >> 8) / 255.0
        b = (number & 0x0000FF) / 255.0
        a = 1.0
    elif length == 8:
        r = ((number & 0xFF000000) >> 24) / 255.0
        g = ((number & 0x00FF0000) >> 16) / 255.0
        b = ((number & 0x0000FF00) >> 8) / 255.0
        a = (number & 0x000000FF) / 255.0
    else:
        raise ComponentExtractionError(value, detail=f"unsupported hex length {length}")

    return ColorSample(r, g, b, a)


__all__ = [
    "from_hex",
    "to_hex",
]
