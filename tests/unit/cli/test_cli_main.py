"""Unit tests for the shadewise command-line interface."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from shadewise.cli.main import build_arg_parser, build_theme_context, main
from shadewise.core.config import load_app_config


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a stray shadewise.json in the working directory out of the tests."""
    monkeypatch.chdir(tmp_path)


def _run(capsys: pytest.CaptureFixture[str], *argv: str) -> tuple[int, str]:
    code = main(list(argv))
    return code, capsys.readouterr().out


class TestParser:
    """Tests for argument parsing."""

    def test_requires_command(self):
        with pytest.raises(SystemExit):
            build_arg_parser().parse_args([])

    def test_blend_options_are_exclusive(self):
        with pytest.raises(SystemExit):
            build_arg_parser().parse_args(
                ["adjust", "#0000FF", "--style", "strong", "--minimum-blend", "0.2"]
            )

    def test_log_level_is_case_insensitive(self):
        args = build_arg_parser().parse_args(["--log-level", "debug", "ratio", "#000", "#FFF"])
        assert args.log_level == "DEBUG"


class TestRatioCommand:
    """Tests for `shadewise ratio`."""

    def test_black_on_white(self, capsys):
        code, out = _run(capsys, "ratio", "#000000", "#FFFFFF")
        assert code == 0
        assert "21.00:1" in out
        assert "FAIL" not in out

    def test_gray_fails_aa(self, capsys):
        code, out = _run(capsys, "ratio", "#777777", "#FFFFFF")
        assert code == 0
        assert "4.48:1" in out
        assert "FAIL" in out

    def test_invalid_color(self, capsys):
        code, out = _run(capsys, "ratio", "not-a-color", "#FFFFFF")
        assert code == 1
        assert "ERROR" in out


class TestClassifyCommand:
    """Tests for `shadewise classify`."""

    def test_light(self, capsys):
        code, out = _run(capsys, "classify", "#FFFF00")
        assert code == 0
        assert "light" in out

    def test_dark_with_rgb_method(self, capsys):
        code, out = _run(capsys, "classify", "#0000FF", "--method", "rgb")
        assert code == 0
        assert "dark" in out
        assert "Brightness (rgb): 0.3333" in out


class TestAdjustCommand:
    """Tests for `shadewise adjust`."""

    def test_blue_shade(self, capsys):
        code, out = _run(capsys, "adjust", "#0000FF")
        assert code == 0
        assert "#B7B7FF" in out
        assert "toward white" in out

    def test_already_sufficient(self, capsys):
        code, out = _run(capsys, "adjust", "#000000", "--against", "#FFFFFF")
        assert code == 0
        assert "unchanged" in out

    def test_unreachable_target_warns(self, capsys):
        code, out = _run(
            capsys, "adjust", "#0000FF", "--direction", "force_dark", "--range", "0", "0.5"
        )
        assert code == 0
        assert "WARNING" in out

    def test_invalid_target(self, capsys):
        code, out = _run(capsys, "adjust", "#0000FF", "--target", "30")
        assert code == 1
        assert "ERROR" in out

    def test_config_target(self, capsys, tmp_path):
        (tmp_path / "shadewise.json").write_text(json.dumps({"contrast": {"target_ratio": 7}}))
        code, out = _run(capsys, "adjust", "#0000FF")
        assert code == 0
        assert "target 7:1" in out


class TestAuditCommand:
    """Tests for `shadewise audit`."""

    def test_reports_failing_pairs(self, capsys):
        code, out = _run(capsys, "audit", "#FFFFFF", "#F2F2F7", "#000000")
        assert code == 0
        assert "#F2F2F7" in out
        assert "Pairs below 4.5:1" in out

    def test_all_pass(self, capsys):
        code, out = _run(capsys, "audit", "#FFFFFF", "#000000")
        assert code == 0
        assert "All 2 colors pass" in out


class TestThemesCommand:
    """Tests for `shadewise themes`."""

    def test_lists_builtins(self, capsys):
        code, out = _run(capsys, "themes")
        assert code == 0
        for theme_id in ("default", "ocean", "forest", "sunset", "high_contrast"):
            assert theme_id in out

    def test_show_theme(self, capsys):
        code, out = _run(capsys, "themes", "--theme", "ocean", "--scheme", "dark")
        assert code == 0
        assert "#6FA8DC" in out

    def test_unknown_theme(self, capsys):
        code, out = _run(capsys, "themes", "--theme", "nope")
        assert code == 1
        assert "not found" in out

    def test_use_persists(self, capsys, tmp_path):
        state = tmp_path / "state" / "theme.json"
        config_path = tmp_path / "app.yaml"
        config_path.write_text(f"themes:\n  state_file: {json.dumps(str(state))}\n")

        code, out = _run(capsys, "--app-config", str(config_path), "themes", "--use", "forest")

        assert code == 0
        assert "forest" in out
        assert json.loads(state.read_text()) == {"current_theme": "forest"}
        context = build_theme_context(load_app_config(config_path))
        assert context.current.theme_id == "forest"

    def test_theme_files_from_config(self, capsys, tmp_path):
        (tmp_path / "brand.yaml").write_text(
            "theme_id: brand\ntitle: Brand\ncolors:\n  primary: {light: '#5B2A86'}\n"
        )
        config_path = tmp_path / "app.json"
        config_path.write_text(json.dumps({"themes": {"theme_files": ["brand.yaml"]}}))

        code, out = _run(capsys, "--app-config", str(config_path), "themes", "--theme", "brand")

        assert code == 0
        assert "#5B2A86" in out


class TestConfigErrors:
    """Tests for config loading failures."""

    def test_missing_app_config(self, capsys, tmp_path):
        code, out = _run(capsys, "--app-config", str(tmp_path / "missing.yaml"), "themes")
        assert code == 1
        assert "Could not load config" in out

    def test_invalid_app_config(self, capsys, tmp_path):
        (tmp_path / "shadewise.json").write_text(json.dumps({"contrast": {"target_ratio": 99}}))
        code, out = _run(capsys, "ratio", "#000", "#FFF")
        assert code == 1
        assert "ERROR" in out
