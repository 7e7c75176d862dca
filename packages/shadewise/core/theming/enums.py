"""Theming enums - standard color keys.

Enums specific to the theming domain.
"""

from __future__ import annotations

from enum import Enum


class ColorKey(str, Enum):
    """Standard color roles every theme is expected to provide.

    Themes may define any number of additional custom keys; those are plain
    strings and are normalized with :func:`color_key_name`.

    Attributes:
        PRIMARY: Main brand/accent color.
        SECONDARY: Supporting accent color.
        TERTIARY: Third accent color.
        BACKGROUND: Main surface color.
        BACKGROUND_SECONDARY: Secondary surface (cards, sidebars).
    """

    PRIMARY = "primary"
    SECONDARY = "secondary"
    TERTIARY = "tertiary"
    BACKGROUND = "background"
    BACKGROUND_SECONDARY = "background_secondary"


# Keys shown in theme pickers
PREVIEW_KEYS: tuple[ColorKey, ...] = (
    ColorKey.PRIMARY,
    ColorKey.SECONDARY,
    ColorKey.BACKGROUND,
    ColorKey.BACKGROUND_SECONDARY,
)


def color_key_name(key: ColorKey | str) -> str:
    """Canonical name for a color key.

    Standard keys map to their enum value; custom keys are lowercased with
    spaces, dashes and camelCase humps turned into underscores, so
    ``"backgroundSecondary"`` and ``"background-secondary"`` both resolve to
    ``"background_secondary"``.

    Raises:
        ValueError: If the key is empty.
    """
    if isinstance(key, ColorKey):
        return key.value

    chars: list[str] = []
    previous = ""
    for ch in key.strip():
        if ch.isupper() and (previous.islower() or previous.isdigit()):
            chars.append("_")
        chars.append(ch.lower() if ch.isalnum() else "_")
        previous = ch
    name = "".join(chars).strip("_")

    if not name:
        raise ValueError(f"Color key must not be empty: {key!r}")
    return name


def is_standard_key(key: ColorKey | str) -> bool:
    """Whether ``key`` names one of the standard :class:`ColorKey` roles."""
    return color_key_name(key) in {k.value for k in ColorKey}


__all__ = [
    "PREVIEW_KEYS",
    "ColorKey",
    "color_key_name",
    "is_standard_key",
]
