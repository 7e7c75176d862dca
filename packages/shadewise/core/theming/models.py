"""Theming models - color pairs and theme definitions.

A theme maps color keys (standard :class:`ColorKey` roles or custom names)
to a light/dark pair of hex colors. Themes are immutable; use
:meth:`ThemeDefinition.with_color` to derive a modified copy.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from shadewise.core.color.hex import from_hex
from shadewise.core.color.luminance import DEFAULT_THRESHOLD
from shadewise.core.color.models import ColorSample, ColorScheme
from shadewise.core.theming.enums import PREVIEW_KEYS, ColorKey, color_key_name
from shadewise.core.theming.errors import ColorNotDefinedError

logger = logging.getLogger(__name__)

_HEX_PATTERN = r"^#?([0-9A-Fa-f]{3}|[0-9A-Fa-f]{6}|[0-9A-Fa-f]{8})$"

# Shown in theme pickers when a theme leaves a preview key undefined
_PREVIEW_FALLBACKS: dict[ColorKey, str] = {
    ColorKey.PRIMARY: "#007AFF",
    ColorKey.SECONDARY: "#34C759",
    ColorKey.BACKGROUND: "#FFFFFF",
    ColorKey.BACKGROUND_SECONDARY: "#8E8E93",
}


class ColorPair(BaseModel):
    """Light and dark variants of one theme color.

    Either side may be missing; such a pair is "incomplete" and looking up
    the missing side raises :class:`ColorNotDefinedError`.

    Attributes:
        light: Hex color used with the light scheme.
        dark: Hex color used with the dark scheme.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    light: str | None = Field(default=None, pattern=_HEX_PATTERN)
    dark: str | None = Field(default=None, pattern=_HEX_PATTERN)

    @model_validator(mode="after")
    def _check_not_empty(self) -> ColorPair:
        if self.light is None and self.dark is None:
            raise ValueError("ColorPair needs at least one of light/dark")
        return self

    @classmethod
    def same(cls, value: str) -> ColorPair:
        """Pair using one color for both schemes."""
        return cls(light=value, dark=value)

    def for_scheme(self, scheme: ColorScheme) -> str | None:
        return self.light if scheme is ColorScheme.LIGHT else self.dark

    @property
    def is_complete(self) -> bool:
        return self.light is not None and self.dark is not None


class ThemeDefinition(BaseModel):
    """Named set of scheme-aware colors.

    Attributes:
        theme_id: Stable theme identifier (e.g. 'default', 'ocean').
        title: Human-readable theme name.
        description: Optional theme description.
        colors: Color key name -> light/dark pair.

    Example:
        >>> theme = ThemeDefinition(
        ...     theme_id="mono",
        ...     title="Mono",
        ...     colors={"primary": {"light": "#000000", "dark": "#FFFFFF"}},
        ... )
        >>> theme.color("primary", ColorScheme.DARK).to_hex()
        'FFFFFF'
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    theme_id: str = Field(..., min_length=1)
    title: str
    description: str | None = None
    colors: dict[str, ColorPair] = Field(default_factory=dict)

    @field_validator("colors", mode="before")
    @classmethod
    def _normalize_keys(cls, value: Any) -> Any:
        if not isinstance(value, dict):
            return value
        normalized: dict[str, Any] = {}
        for key, pair in value.items():
            name = color_key_name(key)
            if name in normalized:
                raise ValueError(f"Duplicate color key after normalization: {key!r}")
            normalized[name] = pair
        return normalized

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def color(self, key: ColorKey | str, scheme: ColorScheme = ColorScheme.LIGHT) -> ColorSample:
        """Color for ``key`` in ``scheme``.

        Raises:
            ColorNotDefinedError: If the key, or its variant for ``scheme``,
                is not defined.
        """
        name = color_key_name(key)
        pair = self.colors.get(name)
        if pair is None:
            raise ColorNotDefinedError(name, self.theme_id)

        value = pair.for_scheme(scheme)
        if value is None:
            raise ColorNotDefinedError(name, self.theme_id, scheme)
        return from_hex(value)

    def has_color(self, key: ColorKey | str) -> bool:
        return color_key_name(key) in self.colors

    def has_complete_color(self, key: ColorKey | str) -> bool:
        """Whether ``key`` defines both its light and dark variants."""
        pair = self.colors.get(color_key_name(key))
        return pair is not None and pair.is_complete

    @property
    def defined_keys(self) -> list[str]:
        return sorted(self.colors)

    def preview_colors(self, scheme: ColorScheme = ColorScheme.LIGHT) -> dict[str, ColorSample]:
        """Colors for a theme picker swatch.

        Keys the theme does not define fall back to neutral system colors.
        """
        preview: dict[str, ColorSample] = {}
        for key in PREVIEW_KEYS:
            try:
                preview[key.value] = self.color(key, scheme)
            except ColorNotDefinedError:
                logger.debug(f"Theme {self.theme_id} has no {key.value}; using preview fallback")
                preview[key.value] = from_hex(_PREVIEW_FALLBACKS[key])
        return preview

    # ------------------------------------------------------------------
    # Derived colors
    # ------------------------------------------------------------------

    def readable_color(
        self,
        key: ColorKey | str,
        scheme: ColorScheme = ColorScheme.LIGHT,
        against: ColorKey | str | ColorSample | None = None,
        target_ratio: float = DEFAULT_THRESHOLD,
        **contrast_options: Any,
    ) -> ColorSample:
        """Theme color adjusted to stay readable on a theme surface.

        Args:
            key: Color to adjust.
            scheme: Scheme to read both colors from.
            against: Background key (or explicit color). Defaults to the
                theme's ``background``.
            target_ratio: Minimum contrast ratio.
            **contrast_options: Forwarded to
                :func:`shadewise.core.contrast.api.contrasting_color`
                (direction, blend_style, ...).

        Returns:
            Color meeting ``target_ratio`` against the background where
            reachable.
        """
        from shadewise.core.contrast.api import contrasting_color

        if against is None:
            background = self.color(ColorKey.BACKGROUND, scheme)
        elif isinstance(against, ColorSample):
            background = against
        else:
            background = self.color(against, scheme)

        return contrasting_color(
            self.color(key, scheme),
            against=background,
            target_ratio=target_ratio,
            **contrast_options,
        )

    # ------------------------------------------------------------------
    # Derivation
    # ------------------------------------------------------------------

    def with_color(
        self,
        key: ColorKey | str,
        *,
        light: str | None = None,
        dark: str | None = None,
    ) -> ThemeDefinition:
        """Copy of this theme with ``key`` set (or one side of it replaced).

        Only the sides that are passed change; an existing variant for the
        other scheme is kept.
        """
        name = color_key_name(key)
        existing = self.colors.get(name)
        pair = ColorPair(
            light=light if light is not None else (existing.light if existing else None),
            dark=dark if dark is not None else (existing.dark if existing else None),
        )
        return self.model_copy(update={"colors": {**self.colors, name: pair}})


__all__ = [
    "ColorPair",
    "ThemeDefinition",
]
