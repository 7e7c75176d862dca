"""Builtin theme definitions."""

from shadewise.core.theming.builtins.themes import (
    BUILTIN_THEMES,
    DEFAULT_THEME_ID,
    REQUIRED_KEYS,
    create_default_catalog,
    register_builtin_themes,
)

__all__ = [
    "BUILTIN_THEMES",
    "DEFAULT_THEME_ID",
    "REQUIRED_KEYS",
    "create_default_catalog",
    "register_builtin_themes",
]
