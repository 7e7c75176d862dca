"""Theming domain - scheme-aware color themes, catalog, and current-theme context.

Usage:
    from shadewise.core.theming import ThemeContext, create_default_catalog

    ctx = ThemeContext(create_default_catalog(), state_path="theme_state.json")
    ctx.set_current("forest")
    text = ctx.current.readable_color("secondary")
"""

from shadewise.core.theming.builtins import (
    BUILTIN_THEMES,
    DEFAULT_THEME_ID,
    create_default_catalog,
    register_builtin_themes,
)
from shadewise.core.theming.catalog import ThemeCatalog, ThemeInfo, normalize_key
from shadewise.core.theming.context import ThemeContext
from shadewise.core.theming.enums import (
    PREVIEW_KEYS,
    ColorKey,
    color_key_name,
    is_standard_key,
)
from shadewise.core.theming.errors import (
    ColorNotDefinedError,
    ThemeAlreadyExistsError,
    ThemeError,
    ThemeNotFoundError,
)
from shadewise.core.theming.loader import load_theme_file, register_theme_files
from shadewise.core.theming.models import ColorPair, ThemeDefinition

__all__ = [
    # Enums
    "PREVIEW_KEYS",
    "ColorKey",
    "color_key_name",
    "is_standard_key",
    # Models
    "ColorPair",
    "ThemeDefinition",
    # Errors
    "ColorNotDefinedError",
    "ThemeAlreadyExistsError",
    "ThemeError",
    "ThemeNotFoundError",
    # Catalog
    "ThemeCatalog",
    "ThemeInfo",
    "normalize_key",
    # Builtins
    "BUILTIN_THEMES",
    "DEFAULT_THEME_ID",
    "create_default_catalog",
    "register_builtin_themes",
    # Files
    "load_theme_file",
    "register_theme_files",
    # Context
    "ThemeContext",
]
