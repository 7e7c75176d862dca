"""Configuration models for shadewise."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from shadewise.core.color.luminance import (
    DEFAULT_THRESHOLD,
    MAX_CONTRAST_RATIO,
    MIN_CONTRAST_RATIO,
)
from shadewise.core.color.models import BrightnessMethod
from shadewise.core.contrast.models import BlendStyle, ContrastDirection, SearchSettings


class ConfigBase(BaseModel):
    """Base class for all shadewise configurations.

    Ignores unknown keys so older releases can read newer config files.
    Subclasses that load from disk provide their own default_path() and
    load_or_default().
    """

    model_config = ConfigDict(extra="ignore")  # Forward compatibility


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    filename: str | None = Field(default=None, description="Log file (stderr when unset)")
    structured: bool = Field(default=False, description="Emit JSON lines instead of text")


class ContrastConfig(BaseModel):
    """Defaults for contrast optimization."""

    model_config = ConfigDict(extra="forbid")

    target_ratio: float = Field(
        default=DEFAULT_THRESHOLD,
        ge=MIN_CONTRAST_RATIO,
        le=MAX_CONTRAST_RATIO,
        description="Minimum contrast ratio (WCAG AA = 4.5, AAA = 7.0)",
    )
    direction: ContrastDirection = ContrastDirection.AUTO
    method: BrightnessMethod = BrightnessMethod.LUMINANCE
    blend_style: BlendStyle | None = Field(
        default=None, description="Default minimum blend preset (None searches [0, 1])"
    )
    max_iterations: int = Field(default=5, ge=1, le=64, description="Bisection steps")
    tolerance: float = Field(default=0.05, ge=0.0, description="Early-exit distance to target")

    def search_settings(self) -> SearchSettings:
        return SearchSettings(max_iterations=self.max_iterations, tolerance=self.tolerance)


class ThemeConfig(BaseModel):
    """Theme sources and current-theme persistence."""

    model_config = ConfigDict(extra="forbid")

    theme_files: list[str] = Field(
        default_factory=list, description="JSON/YAML theme files loaded after builtins"
    )
    default_theme: str = "default"
    state_file: str | None = Field(
        default=None, description="JSON file remembering the current theme"
    )


class AppConfig(ConfigBase):
    """Application-level configuration."""

    logging: LoggingConfig = LoggingConfig()
    contrast: ContrastConfig = ContrastConfig()
    themes: ThemeConfig = ThemeConfig()

    @classmethod
    def default_path(cls) -> Path:
        """Default path for application config."""
        return Path("shadewise.json")

    @classmethod
    def load_or_default(cls, path: Path | str | None = None) -> AppConfig:
        """Load app config, falling back to defaults when no file exists."""
        from shadewise.core.config.loader import load_app_config

        return load_app_config(path)


__all__ = [
    "AppConfig",
    "ConfigBase",
    "ContrastConfig",
    "LoggingConfig",
    "ThemeConfig",
]
