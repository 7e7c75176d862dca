"""Current-theme context.

Holds the active theme for an application. The active theme id can be
persisted to a small JSON state file so it survives restarts; without a
state path the context is purely in-memory.
"""

from __future__ import annotations

import logging
from pathlib import Path

from shadewise.core.color.models import ColorSample, ColorScheme
from shadewise.core.theming.builtins import DEFAULT_THEME_ID
from shadewise.core.theming.catalog import ThemeCatalog
from shadewise.core.theming.enums import ColorKey
from shadewise.core.theming.errors import ThemeNotFoundError
from shadewise.core.theming.models import ThemeDefinition
from shadewise.core.utils.json import read_json, write_json

logger = logging.getLogger(__name__)

_STATE_KEY = "current_theme"


class ThemeContext:
    """Active theme plus fast color access.

    Example:
        >>> ctx = ThemeContext(create_default_catalog())
        >>> ctx.set_current("ocean")
        >>> ctx.primary(ColorScheme.DARK).to_hex()
        '6FA8DC'
    """

    def __init__(
        self,
        catalog: ThemeCatalog,
        state_path: str | Path | None = None,
        default_theme_id: str = DEFAULT_THEME_ID,
    ) -> None:
        self.catalog = catalog
        self.state_path = Path(state_path) if state_path is not None else None
        self.default_theme_id = default_theme_id
        self._current: ThemeDefinition | None = None

    def _stored_theme_id(self) -> str | None:
        if self.state_path is None or not self.state_path.exists():
            return None
        value = read_json(self.state_path).get(_STATE_KEY)
        return str(value) if value else None

    def _persist(self, theme_id: str) -> None:
        if self.state_path is None:
            return
        write_json(self.state_path, {_STATE_KEY: theme_id})
        logger.debug(f"Persisted current theme {theme_id} to {self.state_path}")

    @property
    def current(self) -> ThemeDefinition:
        """Active theme, loaded lazily on first access.

        The stored theme id is used when it is registered; otherwise the
        default theme is used and a warning is logged.

        Raises:
            ThemeNotFoundError: If the default theme itself is missing.
        """
        if self._current is not None:
            return self._current

        theme_id = self._stored_theme_id() or self.default_theme_id
        try:
            theme = self.catalog.get(theme_id)
        except ThemeNotFoundError:
            if theme_id == self.default_theme_id:
                raise
            logger.warning(
                f"Stored theme '{theme_id}' is not registered; "
                f"falling back to '{self.default_theme_id}'"
            )
            theme = self.catalog.get(self.default_theme_id)

        self._current = theme
        return theme

    def set_current(self, theme: ThemeDefinition | str) -> ThemeDefinition:
        """Make ``theme`` the active theme and persist its id.

        A ThemeDefinition that is not yet in the catalog is registered.

        Raises:
            ThemeNotFoundError: If a theme id is not registered.
        """
        if isinstance(theme, str):
            resolved = self.catalog.get(theme)
        else:
            if not self.catalog.has(theme.theme_id):
                self.catalog.register(theme)
            resolved = theme

        self._current = resolved
        self._persist(resolved.theme_id)
        logger.info(f"Current theme: {resolved.theme_id}")
        return resolved

    def load(self, theme_id: str) -> ThemeDefinition:
        """Look up a theme without changing the active one."""
        return self.catalog.get(theme_id)

    def reset(self) -> None:
        """Forget the cached theme so the next access reloads it."""
        self._current = None

    # ------------------------------------------------------------------
    # Fast color access
    # ------------------------------------------------------------------

    def color(self, key: ColorKey | str, scheme: ColorScheme = ColorScheme.LIGHT) -> ColorSample:
        return self.current.color(key, scheme)

    def primary(self, scheme: ColorScheme = ColorScheme.LIGHT) -> ColorSample:
        return self.color(ColorKey.PRIMARY, scheme)

    def secondary(self, scheme: ColorScheme = ColorScheme.LIGHT) -> ColorSample:
        return self.color(ColorKey.SECONDARY, scheme)

    def tertiary(self, scheme: ColorScheme = ColorScheme.LIGHT) -> ColorSample:
        return self.color(ColorKey.TERTIARY, scheme)

    def background(self, scheme: ColorScheme = ColorScheme.LIGHT) -> ColorSample:
        return self.color(ColorKey.BACKGROUND, scheme)

    def background_secondary(self, scheme: ColorScheme = ColorScheme.LIGHT) -> ColorSample:
        return self.color(ColorKey.BACKGROUND_SECONDARY, scheme)


__all__ = [
    "ThemeContext",
]
