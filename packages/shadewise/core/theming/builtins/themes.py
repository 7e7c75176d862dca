"""Builtin theme definitions."""

from __future__ import annotations

from shadewise.core.theming.catalog import ThemeCatalog
from shadewise.core.theming.enums import ColorKey
from shadewise.core.theming.models import ColorPair, ThemeDefinition

DEFAULT_THEME_ID = "default"


def _pairs(**colors: tuple[str, str]) -> dict[str, ColorPair]:
    return {key: ColorPair(light=light, dark=dark) for key, (light, dark) in colors.items()}


BUILTIN_THEMES: tuple[ThemeDefinition, ...] = (
    ThemeDefinition(
        theme_id=DEFAULT_THEME_ID,
        title="Default",
        description="Neutral system-like palette; blue accent on white or near-black.",
        colors=_pairs(
            primary=("#007AFF", "#0A84FF"),
            secondary=("#34C759", "#30D158"),
            tertiary=("#FF9500", "#FF9F0A"),
            background=("#FFFFFF", "#000000"),
            background_secondary=("#F2F2F7", "#1C1C1E"),
        ),
    ),
    ThemeDefinition(
        theme_id="ocean",
        title="Ocean",
        description="Deep blues and teals with sandy accents.",
        colors=_pairs(
            primary=("#0B5394", "#6FA8DC"),
            secondary=("#138D90", "#45B8AC"),
            tertiary=("#E3B778", "#E3B778"),
            background=("#F3F8FC", "#06192B"),
            background_secondary=("#DCEBF5", "#0E2A45"),
        ),
    ),
    ThemeDefinition(
        theme_id="forest",
        title="Forest",
        description="Mossy greens and bark browns.",
        colors=_pairs(
            primary=("#2E7D32", "#81C784"),
            secondary=("#6D4C41", "#BCAAA4"),
            tertiary=("#F9A825", "#FFD54F"),
            background=("#F6F8F2", "#111A12"),
            background_secondary=("#E4EBDC", "#1E2B1F"),
        ),
    ),
    ThemeDefinition(
        theme_id="sunset",
        title="Sunset",
        description="Warm oranges and magentas on cream or dusk purple.",
        colors=_pairs(
            primary=("#E65100", "#FF8A50"),
            secondary=("#AD1457", "#F06292"),
            tertiary=("#6A1B9A", "#BA68C8"),
            background=("#FFF8F0", "#1F1024"),
            background_secondary=("#FCE8D8", "#2E1836"),
        ),
    ),
    ThemeDefinition(
        theme_id="high_contrast",
        title="High Contrast",
        description="Maximum legibility; every accent meets WCAG AAA on its background.",
        colors=_pairs(
            primary=("#0000CC", "#FFFF00"),
            secondary=("#000000", "#FFFFFF"),
            tertiary=("#8B0000", "#00FFFF"),
            background=("#FFFFFF", "#000000"),
            background_secondary=("#EEEEEE", "#1A1A1A"),
        ),
    ),
)


def register_builtin_themes(catalog: ThemeCatalog, *, replace: bool = False) -> ThemeCatalog:
    """Register every builtin theme with ``catalog`` and return it.

    Raises:
        ThemeAlreadyExistsError: If a builtin id is already registered and
            ``replace`` is False.
    """
    for theme in BUILTIN_THEMES:
        catalog.register(theme, replace=replace)
    return catalog


def create_default_catalog() -> ThemeCatalog:
    """New catalog holding only the builtin themes."""
    return register_builtin_themes(ThemeCatalog())


# Standard keys every builtin defines for both schemes
REQUIRED_KEYS: tuple[ColorKey, ...] = tuple(ColorKey)


__all__ = [
    "BUILTIN_THEMES",
    "DEFAULT_THEME_ID",
    "REQUIRED_KEYS",
    "create_default_catalog",
    "register_builtin_themes",
]
