"""Tests for config loading."""

from __future__ import annotations

import json
import logging

import pytest

from shadewise.core.config import (
    AppConfig,
    configure_logging,
    detect_format,
    load_app_config,
    load_config,
)


class TestDetectFormat:
    """Tests for detect_format."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [("a.json", "json"), ("a.yaml", "yaml"), ("a.YML", "yaml")],
    )
    def test_formats(self, name, expected):
        assert detect_format(name) == expected

    def test_unsupported(self):
        with pytest.raises(ValueError, match="Unsupported"):
            detect_format("a.toml")


class TestLoadConfig:
    """Tests for load_config."""

    def test_json(self, tmp_path):
        path = tmp_path / "c.json"
        path.write_text(json.dumps({"contrast": {"target_ratio": 7}}))
        assert load_config(path) == {"contrast": {"target_ratio": 7}}

    def test_yaml(self, tmp_path):
        path = tmp_path / "c.yaml"
        path.write_text("logging:\n  level: DEBUG\n")
        assert load_config(path) == {"logging": {"level": "DEBUG"}}

    def test_empty_yaml(self, tmp_path):
        path = tmp_path / "c.yml"
        path.write_text("")
        assert load_config(path) == {}

    def test_missing(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "c.json"
        path.write_text("{not json")
        with pytest.raises(ValueError, match="Invalid JSON"):
            load_config(path)

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "c.yaml"
        path.write_text("a: [unclosed\n")
        with pytest.raises(ValueError, match="Invalid YAML"):
            load_config(path)

    def test_yaml_must_be_mapping(self, tmp_path):
        path = tmp_path / "c.yaml"
        path.write_text("- one\n- two\n")
        with pytest.raises(ValueError, match="Expected mapping"):
            load_config(path)


class TestLoadAppConfig:
    """Tests for load_app_config."""

    def test_defaults_without_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert load_app_config() == AppConfig()

    def test_reads_default_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        payload = {"contrast": {"direction": "force_dark"}}
        (tmp_path / "shadewise.json").write_text(json.dumps(payload))
        assert load_app_config().contrast.direction.value == "force_dark"

    def test_explicit_yaml(self, tmp_path):
        path = tmp_path / "app.yaml"
        path.write_text("themes:\n  theme_files: [brand.yaml]\n  state_file: state.json\n")
        config = load_app_config(path)
        assert config.themes.theme_files == ["brand.yaml"]
        assert config.themes.state_file == "state.json"

    def test_explicit_path_must_exist(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_app_config(tmp_path / "app.yaml")


class TestConfigureLogging:
    """Tests for configure_logging from app config."""

    def test_applies_level(self):
        config = AppConfig.model_validate({"logging": {"level": "DEBUG"}})
        configure_logging(config)
        assert logging.getLogger().level == logging.DEBUG

    def test_writes_to_file(self, tmp_path):
        log_file = tmp_path / "app.log"
        config = AppConfig.model_validate(
            {"logging": {"level": "INFO", "filename": str(log_file)}}
        )
        configure_logging(config)
        logging.getLogger("shadewise.test").info("hello file")
        for handler in logging.getLogger().handlers:
            if isinstance(handler, logging.FileHandler):
                handler.close()
        assert "hello file" in log_file.read_text()
