"""hexlint kernel: result lifecycle, ports, configuration and errors.

The kernel knows nothing about concrete engines or filesystems; those are
plugged in through :mod:`hexlint.kernel.ports`.
"""

from hexlint.kernel.config import HexLintConfig, LinterOptions, OutputReportOptions, load_config
from hexlint.kernel.domain import BuildContext, BuildPass
from hexlint.kernel.exceptions import (
    ConfigurationError,
    EngineSetupError,
    HexLintError,
    LintReportError,
    ReportWriteError,
    ResolveError,
    ValidationError,
)
from hexlint.kernel.linting import (
    Linter,
    LintMessage,
    LintResult,
    Report,
    get_result_storage,
)
from hexlint.kernel.ports import LintEngine, OutputFileSystem

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
    "ResolveError",
    "ValidationError",
    "get_result_storage",
    "load_config",
]
