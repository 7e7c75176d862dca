"""Theme file loading.

Theme files are JSON or YAML documents holding either a single theme or a
``themes`` list::

    themes:
      - theme_id: brand
        title: Brand
        colors:
          primary: {light: "#5B2A86", dark: "#C9A7EB"}
          background: {light: "#FFFFFF", dark: "#121212"}
"""

from __future__ import annotations

from collections.abc import Iterable
import logging
from pathlib import Path

from shadewise.core.config.loader import load_config
from shadewise.core.theming.catalog import ThemeCatalog
from shadewise.core.theming.models import ThemeDefinition

logger = logging.getLogger(__name__)


def load_theme_file(path: str | Path) -> list[ThemeDefinition]:
    """Load and validate every theme in a JSON/YAML file.

    Args:
        path: Path to theme file (.json, .yaml, or .yml)

    Returns:
        Validated themes, in file order.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the format is unsupported or the document has no themes
        ValidationError: If a theme is invalid
    """
    raw = load_config(path)

    if "themes" in raw:
        entries = raw["themes"]
        if not isinstance(entries, list):
            raise ValueError(f"'themes' must be a list in {path}")
    elif "theme_id" in raw:
        entries = [raw]
    else:
        raise ValueError(f"No themes found in {path}")

    themes = [ThemeDefinition.model_validate(entry) for entry in entries]
    logger.debug(f"Loaded {len(themes)} themes from {path}")
    return themes


def register_theme_files(
    catalog: ThemeCatalog,
    paths: Iterable[str | Path],
    *,
    replace: bool = True,
) -> list[str]:
    """Load theme files into ``catalog``.

    File themes replace same-id builtins by default so a project can
    override e.g. ``default``.

    Returns:
        Registered theme ids, in load order.
    """
    registered: list[str] = []
    for path in paths:
        for theme in load_theme_file(path):
            catalog.register(theme, replace=replace)
            registered.append(theme.theme_id)
    return registered


__all__ = [
    "load_theme_file",
    "register_theme_files",
]
