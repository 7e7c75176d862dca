"""Configuration models and loaders."""

from shadewise.core.config.loader import (
    configure_logging,
    detect_format,
    load_app_config,
    load_config,
)
from shadewise.core.config.models import (
    AppConfig,
    ConfigBase,
    ContrastConfig,
    LoggingConfig,
    ThemeConfig,
)

__all__ = [
    # Models
    "AppConfig",
    "ConfigBase",
    "ContrastConfig",
    "LoggingConfig",
    "ThemeConfig",
    # Loading
    "configure_logging",
    "detect_format",
    "load_app_config",
    "load_config",
]
