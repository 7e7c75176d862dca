"""Shared pytest fixtures for shadewise tests."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from shadewise.core.color import BLACK, WHITE, ColorSample
from shadewise.core.theming import ThemeCatalog, ThemeContext, create_default_catalog

# ============================================================================
# Color Fixtures
# ============================================================================


@pytest.fixture
def black() -> ColorSample:
    return BLACK


@pytest.fixture
def white() -> ColorSample:
    return WHITE


@pytest.fixture
def blue() -> ColorSample:
    """Pure sRGB blue (relative luminance 0.0722)."""
    return ColorSample(0.0, 0.0, 1.0)


@pytest.fixture
def yellow() -> ColorSample:
    """Pure sRGB yellow (relative luminance 0.9278)."""
    return ColorSample(1.0, 1.0, 0.0)


@pytest.fixture
def mid_gray() -> ColorSample:
    return ColorSample(0.5, 0.5, 0.5)


# ============================================================================
# Theming Fixtures
# ============================================================================


@pytest.fixture
def catalog() -> ThemeCatalog:
    """Fresh catalog holding the builtin themes."""
    return create_default_catalog()


@pytest.fixture
def state_path(tmp_path: Path) -> Path:
    return tmp_path / "state" / "theme.json"


@pytest.fixture
def theme_context(catalog: ThemeCatalog, state_path: Path) -> ThemeContext:
    return ThemeContext(catalog, state_path=state_path)


# ============================================================================
# Logging isolation
# ============================================================================


@pytest.fixture(autouse=True)
def _restore_root_logging():
    """Undo root logger changes made by configure_logging."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
