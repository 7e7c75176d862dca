"""Theme catalog registry.

Direct registration (not factories) since themes are immutable frozen
models. A catalog is an ordinary object: applications create one, fill it
with :func:`shadewise.core.theming.builtins.register_builtin_themes` and
theme files, and hand it to a :class:`ThemeContext`.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
import logging

from shadewise.core.theming.errors import ThemeAlreadyExistsError, ThemeNotFoundError
from shadewise.core.theming.models import ThemeDefinition

logger = logging.getLogger(__name__)


def normalize_key(s: str) -> str:
    """Normalize key for lookup (lowercase, alphanumeric/underscore only)."""
    return "".join(ch.lower() if ch.isalnum() else "_" for ch in s).strip("_")


@dataclass(frozen=True)
class ThemeInfo:
    """Lightweight theme metadata for listing."""

    theme_id: str
    title: str
    description: str | None
    color_count: int


class ThemeCatalog:
    """Registry for theme definitions.

    Example:
        >>> catalog = ThemeCatalog()
        >>> catalog.register(my_theme)
        >>> theme = catalog.get("ocean")
    """

    def __init__(self) -> None:
        """Initialize empty catalog."""
        self._items: dict[str, ThemeDefinition] = {}
        self._aliases: dict[str, str] = {}

    def _resolve(self, key: str) -> str:
        return self._aliases.get(normalize_key(key), key)

    def register(
        self,
        item: ThemeDefinition,
        *,
        aliases: Iterable[str] = (),
        replace: bool = False,
    ) -> None:
        """Register a theme.

        Args:
            item: Theme definition to register.
            aliases: Additional aliases for lookup.
            replace: Overwrite an existing theme with the same id.

        Raises:
            ThemeAlreadyExistsError: If theme_id already registered and
                ``replace`` is False.
        """
        tid = item.theme_id

        if tid in self._items:
            if not replace:
                raise ThemeAlreadyExistsError(tid)
            self.unregister(tid)

        self._items[tid] = item

        all_aliases = {tid, item.title, *aliases}
        for a in all_aliases:
            self._aliases[normalize_key(a)] = tid

        logger.debug(f"Registered theme: {tid}")

    def unregister(self, key: str) -> ThemeDefinition:
        """Remove a theme and its aliases.

        Raises:
            ThemeNotFoundError: If theme not found.
        """
        tid = self._resolve(key)
        item = self._items.pop(tid, None)
        if item is None:
            raise ThemeNotFoundError(key)

        self._aliases = {a: t for a, t in self._aliases.items() if t != tid}
        logger.debug(f"Unregistered theme: {tid}")
        return item

    def get(self, key: str) -> ThemeDefinition:
        """Lookup theme by id or alias.

        Args:
            key: Theme identifier or alias (case and punctuation insensitive).

        Returns:
            ThemeDefinition (immutable, no copy needed).

        Raises:
            ThemeNotFoundError: If theme not found.
        """
        item = self._items.get(self._resolve(key))

        if item is None:
            raise ThemeNotFoundError(key)

        return item

    def has(self, key: str) -> bool:
        """Check if theme exists."""
        return self._resolve(key) in self._items

    def list_all(self) -> list[ThemeInfo]:
        """List all registered themes."""
        infos = [
            ThemeInfo(
                theme_id=t.theme_id,
                title=t.title,
                description=t.description,
                color_count=len(t.colors),
            )
            for t in self._items.values()
        ]
        return sorted(infos, key=lambda x: x.theme_id)

    def list_ids(self) -> list[str]:
        """List all registered theme IDs."""
        return sorted(self._items.keys())

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, key: str) -> bool:
        return self.has(key)


__all__ = [
    "ThemeCatalog",
    "ThemeInfo",
    "normalize_key",
]
