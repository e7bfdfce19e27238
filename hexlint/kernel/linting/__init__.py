"""Lint result lifecycle: storage, scheduling, aggregation and reporting."""

from hexlint.kernel.linting.formatting import format_results, load_formatter, parse_results
from hexlint.kernel.linting.linter import Linter
from hexlint.kernel.linting.models import (
    Formatter,
    FormatterSpec,
    LintMessage,
    LintResult,
    PartitionedResults,
    Report,
    Severity,
)
from hexlint.kernel.linting.report_writer import ReportWriter, resolve_report_path
from hexlint.kernel.linting.storage import get_result_storage

__all__ = [
    "Formatter",
    "FormatterSpec",
    "LintMessage",
    "LintResult",
    "Linter",
    "PartitionedResults",
    "Report",
    "ReportWriter",
    "Severity",
    "format_results",
    "get_result_storage",
    "load_formatter",
    "parse_results",
    "resolve_report_path",
]
