"""Partitioning results by severity and rendering them through a formatter."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from hexlint.kernel.exceptions import LintReportError
from hexlint.kernel.linting.models import (
    Formatter,
    FormatterSpec,
    LintResult,
    PartitionedResults,
)
from hexlint.kernel.logging import get_logger

if TYPE_CHECKING:
    from hexlint.kernel.config.models import LinterOptions
    from hexlint.kernel.ports.engine import LintEngine

__all__ = ["format_results", "load_formatter", "parse_results", "remove_ignored"]

logger = get_logger(__name__)


def remove_ignored(results: Iterable[LintResult]) -> list[LintResult]:
    """Drop results flagged as ignored."""
    return [result for result in results if not result.ignored]


def parse_results(options: LinterOptions, results: Iterable[LintResult]) -> PartitionedResults:
    """Split results into error and warning collections.

    Each collection holds copies of the results carrying only the messages of
    that severity, and only when the severity is enabled in ``options``. A
    file with no qualifying message is left out of the collection.

    Parameters
    ----------
    options : LinterOptions
        Provides ``emit_error`` and ``emit_warning``
    results : Iterable[LintResult]
        Aggregate result set

    Returns
    -------
    PartitionedResults
        Filtered copies grouped by severity
    """
    errors: list[LintResult] = []
    warnings: list[LintResult] = []

    for result in results:
        file_errors = [
            message
            for message in result.messages
            if options.emit_error and message.severity == "error"
        ]
        if file_errors:
            errors.append(result.with_messages(file_errors))

        file_warnings = [
            message
            for message in result.messages
            if options.emit_warning and message.severity == "warning"
        ]
        if file_warnings:
            warnings.append(result.with_messages(file_warnings))

    return PartitionedResults(errors=errors, warnings=warnings)


def load_formatter(engine: LintEngine, formatter: FormatterSpec = None) -> Formatter:
    """Resolve a formatter callable.

    A callable is used as is. A name is looked up in the engine's formatter
    registry; unknown names fall back to the engine's default formatter
    without raising.
    """
    if callable(formatter):
        return formatter

    if isinstance(formatter, str):
        named = engine.formatters.get(formatter)
        if named is not None:
            return named
        logger.debug(
            "Unknown formatter {name!r}, using {default!r}",
            name=formatter,
            default=engine.default_formatter,
        )

    return engine.formatters[engine.default_formatter]


def format_results(
    formatter: Formatter, results: PartitionedResults
) -> tuple[LintReportError | None, LintReportError | None]:
    """Render both collections, returning ``(errors, warnings)``.

    An empty collection yields ``None`` for that severity.
    """
    errors = None
    warnings = None

    if results.warnings:
        warnings = LintReportError("warnings", formatter(results.warnings))

    if results.errors:
        errors = LintReportError("errors", formatter(results.errors))

    return errors, warnings
