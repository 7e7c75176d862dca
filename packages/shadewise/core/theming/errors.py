"""Theming errors."""

from __future__ import annotations

from shadewise.core.color.errors import ShadewiseError
from shadewise.core.color.models import ColorScheme


class ThemeError(ShadewiseError):
    """Base class for theme lookup and registration failures."""

    def __str__(self) -> str:
        # KeyError subclasses would otherwise repr-quote the message
        return self.message


class ThemeNotFoundError(ThemeError, KeyError):
    """Raised when a theme id is not registered."""

    suggestion = "Check that the theme name is correct or register the theme first."

    def __init__(self, theme_id: str) -> None:
        self.theme_id = theme_id
        super().__init__(f"Theme '{theme_id}' not found")


class ThemeAlreadyExistsError(ThemeError, ValueError):
    """Raised when registering a theme id that is already taken."""

    suggestion = "Use a different name or load the existing theme."

    def __init__(self, theme_id: str) -> None:
        self.theme_id = theme_id
        super().__init__(f"Theme '{theme_id}' already exists")


class ColorNotDefinedError(ThemeError, KeyError):
    """Raised when a theme has no color for a key (or scheme)."""

    suggestion = "Define the color for both light and dark schemes before accessing it."

    def __init__(self, key: str, theme_id: str, scheme: ColorScheme | None = None) -> None:
        self.key = key
        self.theme_id = theme_id
        self.scheme = scheme
        where = f" for {scheme.value} scheme" if scheme else ""
        super().__init__(f"Color '{key}' not defined in theme '{theme_id}'{where}")


__all__ = [
    "ColorNotDefinedError",
    "ThemeAlreadyExistsError",
    "ThemeError",
    "ThemeNotFoundError",
]
