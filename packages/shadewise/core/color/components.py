"""Component reader - turns color-like values into ColorSample.

This is the boundary between caller-provided color values and the color
math. Everything the math functions accept goes through
:func:`read_components`, which either returns a ``ColorSample`` or raises.

Accepted inputs:
    - ``ColorSample`` (returned as is)
    - hex strings (``"#RGB"``, ``"#RRGGBB"``, ``"#RRGGBBAA"``)
    - sequences of 3 or 4 numbers in [0, 1] (tuples, lists, numpy arrays)
    - mappings with ``r``/``g``/``b`` (and optional ``a``) keys, optionally
      tagged with a ``space`` key
    - objects implementing :class:`SupportsRGBA`
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
import logging
from typing import Any, Protocol, TypeAlias, runtime_checkable

import numpy as np
from pydantic import ValidationError

from shadewise.core.color.errors import (
    ColorSpaceConversionError,
    ComponentExtractionError,
)
from shadewise.core.color.models import ColorSample

logger = logging.getLogger(__name__)

# Color spaces whose components are used directly
_SRGB_SPACES = frozenset({"srgb", "extended_srgb", "device_rgb"})


@runtime_checkable
class SupportsRGBA(Protocol):
    """Object that can report its own RGBA components in [0, 1]."""

    def rgba(self) -> Sequence[float]: ...


ColorLike: TypeAlias = ColorSample | str | Sequence[float] | Mapping[str, Any] | SupportsRGBA


def _sample_from_values(color: Any, values: Sequence[Any]) -> ColorSample:
    if len(values) not in (3, 4):
        raise ComponentExtractionError(
            color, detail=f"expected 3 or 4 components, got {len(values)}"
        )
    try:
        channels = [float(v) for v in values]
    except (TypeError, ValueError) as e:
        raise ComponentExtractionError(color, detail=str(e)) from e
    try:
        return ColorSample(*channels)
    except ValidationError as e:
        raise ComponentExtractionError(color, detail="components must be finite") from e


def _sample_from_mapping(color: Mapping[str, Any]) -> ColorSample:
    space = color.get("space", color.get("color_space"))
    if space is not None and str(space).lower() not in _SRGB_SPACES:
        raise ColorSpaceConversionError(color, target_space="sRGB")

    missing = [key for key in ("r", "g", "b") if key not in color]
    if missing:
        raise ComponentExtractionError(color, detail=f"missing keys {missing}")

    values = [color["r"], color["g"], color["b"], color.get("a", 1.0)]
    return _sample_from_values(color, values)


def read_components(color: ColorLike) -> ColorSample:
    """Read the RGBA components of a color-like value.

    Args:
        color: Any supported color representation.

    Returns:
        ColorSample with the color's components.

    Raises:
        ComponentExtractionError: If the value cannot be decomposed into RGBA.
        ColorSpaceConversionError: If the value declares a non-sRGB color space.
    """
    if isinstance(color, ColorSample):
        return color

    if isinstance(color, str):
        from shadewise.core.color.hex import from_hex

        return from_hex(color)

    if isinstance(color, Mapping):
        return _sample_from_mapping(color)

    if isinstance(color, np.ndarray):
        return _sample_from_values(color, color.ravel().tolist())

    if isinstance(color, Sequence):
        return _sample_from_values(color, list(color))

    if isinstance(color, SupportsRGBA):
        try:
            values = list(color.rgba())
        except Exception as e:
            raise ComponentExtractionError(color, detail=f"rgba() failed: {e}") from e
        return _sample_from_values(color, values)

    logger.debug(f"Unsupported color value type: {type(color).__name__}")
    raise ComponentExtractionError(color, detail=f"unsupported type {type(color).__name__}")


__all__ = [
    "ColorLike",
    "SupportsRGBA",
    "read_components",
]
