"""hexlint: durable lint results across incremental build passes.

Files scheduled in one pass replace their previous results; files not
touched keep theirs, so every report covers the whole project.
"""

try:
    from importlib.metadata import version

    __version__ = version("hexlint")
except Exception:
    __version__ = "0.0.0.dev0"  # Fallback for development installs

from hexlint.kernel import (
    BuildContext,
    BuildPass,
    ConfigurationError,
    EngineSetupError,
    HexLintConfig,
    HexLintError,
    LintEngine,
    Linter,
    LinterOptions,
    LintMessage,
    LintReportError,
    LintResult,
    OutputFileSystem,
    OutputReportOptions,
    Report,
    ReportWriteError,
    load_config,
)

__all__ = [
    "BuildContext",
    "BuildPass",
    "ConfigurationError",
    "EngineSetupError",
    "HexLintConfig",
    "HexLintError",
    "LintEngine",
    "LintMessage",
    "LintReportError",
    "LintResult",
    "Linter",
    "LinterOptions",
    "OutputFileSystem",
    "OutputReportOptions",
    "Report",
    "ReportWriteError",
    "__version__",
    "load_config",
]
