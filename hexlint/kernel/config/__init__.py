"""Configuration models and loading."""

from hexlint.kernel.config.loader import ConfigLoader, clear_config_cache, load_config
from hexlint.kernel.config.models import (
    DEFAULT_ENGINE,
    HexLintConfig,
    LinterOptions,
    LoggingConfig,
    OutputReportOptions,
)

__all__ = [
    "DEFAULT_ENGINE",
    "ConfigLoader",
    "HexLintConfig",
    "LinterOptions",
    "LoggingConfig",
    "OutputReportOptions",
    "clear_config_cache",
    "load_config",
]
