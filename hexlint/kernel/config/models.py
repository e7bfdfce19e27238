"""Configuration data models for hexlint."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_ENGINE = "hexlint.drivers.engines.local.LocalRuleEngine"

LogLevelName = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LogFormatName = Literal["console", "json", "structured", "rich"]


@dataclass(frozen=True, slots=True)
class LoggingConfig:
    """Logging configuration for hexlint.

    Attributes
    ----------
    level : str, default="WARNING"
        Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    format : str, default="structured"
        Output format (console, json, structured, rich)
    output_file : str | None, default=None
        Optional file path to write logs to
    use_color : bool, default=True
        Use ANSI color codes (auto-disabled for non-TTY)
    include_timestamp : bool, default=True
        Include timestamp in log output

    Examples
    --------
    TOML configuration:

    ```toml
    [tool.hexlint.logging]
    level = "DEBUG"
    format = "rich"
    ```
    """

    level: LogLevelName = "WARNING"
    format: LogFormatName = "structured"
    output_file: str | None = None
    use_color: bool = True
    include_timestamp: bool = True


class OutputReportOptions(BaseModel):
    """Where and how to persist the report asset.

    Attributes
    ----------
    file_path : str
        Target path; relative paths are resolved against the build output directory
    formatter : Callable | str | None
        Formatter override for the persisted asset only
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    file_path: str
    formatter: Callable[..., str] | str | None = None


class LinterOptions(BaseModel):
    """Options for one linter, immutable for the lifetime of a build context.

    Attributes
    ----------
    emit_error : bool
        Report error-severity messages
    emit_warning : bool
        Report warning-severity messages
    formatter : Callable | str | None
        Formatter callable or the name of an engine formatter
    output_report : OutputReportOptions | None
        Persist the full report to a file when set
    fail_on_error : bool
        Callers should fail the build when errors are reported
    fail_on_warning : bool
        Callers should fail the build when warnings are reported
    threads : int
        Number of files the engine analyses concurrently
    engine : str
        Import path of the engine class or factory
    engine_options : dict[str, Any]
        Extra keyword arguments passed to the engine factory

    Examples
    --------
    TOML configuration:

    ```toml
    [tool.hexlint.linter]
    emit_warning = false
    formatter = "compact"

    [tool.hexlint.linter.output_report]
    file_path = "reports/lint.json"
    formatter = "json"
    ```
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    emit_error: bool = True
    emit_warning: bool = True
    formatter: Callable[..., str] | str | None = None
    output_report: OutputReportOptions | None = None
    fail_on_error: bool = True
    fail_on_warning: bool = False
    threads: int = Field(default=1, ge=1)
    engine: str = DEFAULT_ENGINE
    engine_options: dict[str, Any] = Field(default_factory=dict)


@dataclass(slots=True)
class HexLintConfig:
    """Complete hexlint configuration.

    Examples
    --------
    TOML configuration in pyproject.toml:

    ```toml
    [tool.hexlint.logging]
    level = "DEBUG"

    [tool.hexlint.linter]
    emit_warning = true
    threads = 4

    [tool.hexlint.linter.engine_options]
    max_line_length = 100
    ignore_patterns = ["vendor/*"]
    ```
    """

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    linter: LinterOptions = field(default_factory=LinterOptions)
