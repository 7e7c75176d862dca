"""Tests for theme file loading."""

from __future__ import annotations

import json

from pydantic import ValidationError
import pytest

from shadewise.core.color import ColorScheme
from shadewise.core.theming import load_theme_file, register_theme_files

YAML_THEMES = """\
themes:
  - theme_id: brand
    title: Brand
    colors:
      primary: {light: "#5B2A86", dark: "#C9A7EB"}
      backgroundSecondary: {light: "#F4F0F8"}
  - theme_id: default
    title: Project Default
    colors:
      primary: {light: "#111111", dark: "#EEEEEE"}
"""


class TestLoadThemeFile:
    """Tests for load_theme_file."""

    def test_yaml_list(self, tmp_path):
        path = tmp_path / "themes.yaml"
        path.write_text(YAML_THEMES)

        themes = load_theme_file(path)

        assert [t.theme_id for t in themes] == ["brand", "default"]
        assert themes[0].color("primary", ColorScheme.DARK).to_hex() == "C9A7EB"
        assert themes[0].has_color("background_secondary")

    def test_json_single_theme(self, tmp_path):
        path = tmp_path / "brand.json"
        path.write_text(
            json.dumps(
                {"theme_id": "brand", "title": "Brand", "colors": {"primary": {"light": "#000"}}}
            )
        )
        (theme,) = load_theme_file(path)
        assert theme.theme_id == "brand"

    def test_no_themes(self, tmp_path):
        path = tmp_path / "empty.yml"
        path.write_text("title: nothing here\n")
        with pytest.raises(ValueError, match="No themes"):
            load_theme_file(path)

    def test_themes_not_a_list(self, tmp_path):
        path = tmp_path / "bad.yml"
        path.write_text("themes: brand\n")
        with pytest.raises(ValueError, match="must be a list"):
            load_theme_file(path)

    def test_invalid_theme(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("theme_id: bad\ntitle: Bad\ncolors:\n  primary: {light: purple}\n")
        with pytest.raises(ValidationError):
            load_theme_file(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_theme_file(tmp_path / "nope.yaml")


class TestRegisterThemeFiles:
    """Tests for register_theme_files."""

    def test_overrides_builtin(self, catalog, tmp_path):
        path = tmp_path / "themes.yaml"
        path.write_text(YAML_THEMES)

        registered = register_theme_files(catalog, [path])

        assert registered == ["brand", "default"]
        assert catalog.get("default").title == "Project Default"
        assert catalog.get("brand").title == "Brand"
        assert "ocean" in catalog
