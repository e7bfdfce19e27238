"""Configuration loader for hexlint.

Supports two config sources:

1. **kind: Config YAML**, loaded via explicit path or ``HEXLINT_CONFIG_PATH``.
2. **pyproject.toml [tool.hexlint]**, discovered from the working directory
   upwards.

When neither exists the defaults are used.
"""

from __future__ import annotations

import os
import re
import tomllib
from collections.abc import Callable
from dataclasses import asdict
from functools import lru_cache
from pathlib import Path
from typing import Any, get_args

import yaml
from pydantic import ValidationError as PydanticValidationError

from hexlint.kernel.config.models import (
    HexLintConfig,
    LinterOptions,
    LogFormatName,
    LoggingConfig,
    LogLevelName,
)
from hexlint.kernel.exceptions import ConfigurationError
from hexlint.kernel.logging import get_logger

_TRUTHY_VALUES = frozenset({"true", "1", "yes", "on", "enabled"})
_FALSY_VALUES = frozenset({"false", "0", "no", "off", "disabled"})

logger = get_logger(__name__)


def _parse_bool_env(value: str) -> bool:
    """Parse a boolean environment variable value.

    Raises
    ------
    ValueError
        If value is not a recognized boolean string
    """
    normalized = value.lower().strip()
    if normalized in _TRUTHY_VALUES:
        return True
    if normalized in _FALSY_VALUES:
        return False
    expected = sorted(_TRUTHY_VALUES | _FALSY_VALUES)
    raise ValueError(f"Invalid boolean value: {value!r}. Expected one of: {expected}")


# (LoggingConfig field, environment variable, converter)
_LOGGING_ENV_OVERRIDES: tuple[tuple[str, str, Callable[[str], Any]], ...] = (
    ("level", "HEXLINT_LOG_LEVEL", str),
    ("format", "HEXLINT_LOG_FORMAT", str),
    ("output_file", "HEXLINT_LOG_FILE", str),
    ("use_color", "HEXLINT_LOG_COLOR", _parse_bool_env),
)


@lru_cache(maxsize=32)
def _load_and_parse_cached(path_str: str) -> HexLintConfig:
    """Cached configuration loader."""
    return ConfigLoader()._load_and_parse(Path(path_str))


class ConfigLoader:
    """Loads hexlint configuration from YAML or pyproject.toml."""

    ENV_VAR_PATTERN = re.compile(r"\$\{([^}:]+)(?::([^}]*))?\}")

    def load_config_file(self, path: str | Path | None = None) -> HexLintConfig:
        """Load configuration, falling back to defaults when nothing is found.

        Parameters
        ----------
        path : str | Path | None
            Path to config file. If None, searches using discovery order.

        Returns
        -------
        HexLintConfig
            Parsed configuration with environment variables substituted

        Raises
        ------
        FileNotFoundError
            If an explicit ``path`` does not exist
        ConfigurationError
            If the file content is not a valid configuration
        """
        config_path = self._find_config_file(path)
        if config_path is None:
            logger.debug("No configuration file found, using defaults")
            return get_default_config()
        return _load_and_parse_cached(str(config_path.absolute()))

    def _load_and_parse(self, config_path: Path) -> HexLintConfig:
        logger.info("Loading configuration from {path}", path=str(config_path))

        if config_path.suffix in (".yaml", ".yml"):
            return self._load_yaml_config(config_path)
        return self._load_toml_config(config_path)

    def _load_yaml_config(self, config_path: Path) -> HexLintConfig:
        """Load a ``kind: Config`` YAML manifest."""
        with config_path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

        if not isinstance(data, dict):
            raise ConfigurationError(
                str(config_path), f"expected a mapping, got {type(data).__name__}"
            )

        kind = data.get("kind")
        if kind != "Config":
            raise ConfigurationError(
                str(config_path), f"YAML config must use 'kind: Config', got 'kind: {kind}'"
            )

        spec = data.get("spec", {})
        if not isinstance(spec, dict):
            raise ConfigurationError(str(config_path), "'spec' must be a mapping")

        return self._parse_config(self._substitute_env_vars(spec))

    def _load_toml_config(self, config_path: Path) -> HexLintConfig:
        """Load ``[tool.hexlint]`` from pyproject.toml, or a flat TOML file."""
        with config_path.open("rb") as f:
            data = tomllib.load(f)

        if "tool" in data and "hexlint" in data.get("tool", {}):
            hexlint_data = data["tool"]["hexlint"]
        elif config_path.name == "pyproject.toml":
            logger.warning("No [tool.hexlint] section found in pyproject.toml, using defaults")
            return get_default_config()
        else:
            hexlint_data = data

        return self._parse_config(self._substitute_env_vars(hexlint_data))

    def _find_config_file(self, path: str | Path | None) -> Path | None:
        """Find the configuration file.

        Discovery order:
        1. Explicit path argument
        2. ``HEXLINT_CONFIG_PATH`` env var
        3. ``pyproject.toml`` with a ``[tool.hexlint]`` section in CWD or a parent
        """
        if path:
            config_path = Path(path)
            if not config_path.exists():
                raise FileNotFoundError(f"Configuration file not found: {config_path}")
            return config_path

        if env_path := os.getenv("HEXLINT_CONFIG_PATH"):
            config_path = Path(env_path)
            if config_path.exists():
                logger.debug("Using config from HEXLINT_CONFIG_PATH: {}", config_path)
                return config_path
            logger.warning("HEXLINT_CONFIG_PATH set but file not found: {}", config_path)

        current = Path.cwd()
        for directory in (current, *current.parents):
            pyproject = directory / "pyproject.toml"
            if pyproject.exists():
                with pyproject.open("rb") as f:
                    data = tomllib.load(f)
                if "hexlint" in data.get("tool", {}):
                    return pyproject

        return None

    def _substitute_env_vars(self, data: Any) -> Any:
        """Recursively replace ``${VAR}`` and ``${VAR:default}`` references.

        Unknown variables without a default keep their placeholder.
        """
        if isinstance(data, str):

            def replacer(match: re.Match[str]) -> str:
                var_name, default = match.group(1), match.group(2)
                value = os.environ.get(var_name)
                if value is not None:
                    return value
                if default is not None:
                    return default
                logger.debug(
                    "Environment variable ${{{var_name}}} not found, keeping placeholder",
                    var_name=var_name,
                )
                return match.group(0)

            return self.ENV_VAR_PATTERN.sub(replacer, data)

        if isinstance(data, dict):
            return {key: self._substitute_env_vars(value) for key, value in data.items()}

        if isinstance(data, list):
            return [self._substitute_env_vars(item) for item in data]

        return data

    def _parse_config(self, data: dict[str, Any]) -> HexLintConfig:
        """Parse raw configuration data into HexLintConfig."""
        unknown = set(data) - {"logging", "linter"}
        if unknown:
            raise ConfigurationError("hexlint", f"unknown sections: {sorted(unknown)}")

        config = HexLintConfig()
        config.logging = self._parse_logging_config(data.get("logging", {}))

        try:
            config.linter = LinterOptions.model_validate(data.get("linter", {}))
        except PydanticValidationError as e:
            raise ConfigurationError("linter", str(e)) from e

        return config

    def _parse_logging_config(self, logging_data: dict[str, Any]) -> LoggingConfig:
        """Build LoggingConfig; ``HEXLINT_LOG_*`` variables beat file values.

        ``HEXLINT_LOG_LEVEL``, ``HEXLINT_LOG_FORMAT``, ``HEXLINT_LOG_FILE`` and
        ``HEXLINT_LOG_COLOR`` (a boolean) are honoured.
        """
        values = {**asdict(LoggingConfig()), **logging_data}
        unknown = set(values) - set(asdict(LoggingConfig()))
        if unknown:
            raise ConfigurationError("logging", f"unknown keys: {sorted(unknown)}")

        for key, env_var, convert in _LOGGING_ENV_OVERRIDES:
            if raw := os.getenv(env_var):
                try:
                    values[key] = convert(raw)
                except ValueError as e:
                    logger.warning("Ignoring {var}: {error}", var=env_var, error=e)

        values["level"] = str(values["level"]).upper()
        values["format"] = str(values["format"]).lower()
        if values["level"] not in get_args(LogLevelName):
            raise ConfigurationError("logging", f"invalid level {values['level']!r}")
        if values["format"] not in get_args(LogFormatName):
            raise ConfigurationError("logging", f"invalid format {values['format']!r}")

        return LoggingConfig(**values)


def get_default_config() -> HexLintConfig:
    """Return the default configuration."""
    return HexLintConfig()


def load_config(path: str | Path | None = None) -> HexLintConfig:
    """Load hexlint configuration.

    Examples
    --------
    >>> config = load_config()  # doctest: +SKIP
    >>> config.linter.emit_warning  # doctest: +SKIP
    True
    """
    return ConfigLoader().load_config_file(path)


def clear_config_cache() -> None:
    """Clear the configuration cache (tests and reloads)."""
    _load_and_parse_cached.cache_clear()
