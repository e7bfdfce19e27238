"""Core exception hierarchy for hexlint.

All hexlint exceptions inherit from HexLintError so callers can catch the
whole family at once. Only engine setup failures and report-asset write
failures propagate to direct callers; failed analysis jobs are appended to
the build pass error sink instead.
"""

from __future__ import annotations

from typing import Literal

# ============================================================================
# Base Exception
# ============================================================================


class HexLintError(Exception):
    """Base exception for all hexlint errors.

    Catch this to handle all hexlint errors.
    """

    pass


# ============================================================================
# Configuration & Validation Errors
# ============================================================================


class ConfigurationError(HexLintError):
    """Raised when configuration is invalid or missing.

    Examples
    --------
    Example usage::

        raise ConfigurationError("linter", "emit_error must be a boolean")
    """

    def __init__(self, component: str, reason: str) -> None:
        """Initialize configuration error.

        Args
        ----
            component: Name of the component with invalid configuration
            reason: Explanation of what's wrong
        """
        super().__init__(f"Configuration error in '{component}': {reason}")
        self.component = component
        self.reason = reason


class ValidationError(HexLintError):
    """Raised when data validation fails.

    Examples
    --------
    Example usage::

        raise ValidationError("threads", "must be positive", value=0)
    """

    def __init__(self, field: str, constraint: str, value: object = None) -> None:
        """Initialize validation error.

        Args
        ----
            field: Name of the field that failed validation
            constraint: Description of the validation constraint
            value: The invalid value (optional)
        """
        if value is not None:
            msg = f"Validation failed for '{field}': {constraint} (got {value!r})"
        else:
            msg = f"Validation failed for '{field}': {constraint}"
        super().__init__(msg)
        self.field = field
        self.constraint = constraint
        self.value = value


# ============================================================================
# Engine Errors
# ============================================================================


class ResolveError(HexLintError):
    """Raised when an engine import path cannot be resolved."""

    def __init__(self, kind: str, reason: str) -> None:
        self.kind = kind
        self.reason = reason
        super().__init__(f"Cannot resolve '{kind}': {reason}")


class EngineSetupError(HexLintError):
    """Raised when the analysis engine cannot be acquired.

    This aborts construction of the linter; nothing is scheduled.

    Examples
    --------
    Example usage::

        raise EngineSetupError("No module named 'missing_engine'")
    """

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


# ============================================================================
# Report Errors
# ============================================================================


class LintReportError(HexLintError):
    """Formatted lint output for one severity, carried by a ``Report``.

    ``str(error)`` is the text produced by the formatter, so the value can be
    pushed straight into a build's error or warning list.

    Examples
    --------
    Example usage::

        LintReportError("warnings", "src/app.css\\n  1:1  warning  ...")
    """

    def __init__(self, kind: Literal["errors", "warnings"], text: str) -> None:
        super().__init__(text)
        self.kind = kind
        self.text = text

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LintReportError):
            return NotImplemented
        return self.kind == other.kind and self.text == other.text

    def __hash__(self) -> int:
        return hash((self.kind, self.text))

    def __repr__(self) -> str:
        return f"LintReportError(kind={self.kind!r}, text={self.text!r})"


class ReportWriteError(HexLintError):
    """Raised when a report asset cannot be persisted.

    Examples
    --------
    Example usage::

        raise ReportWriteError("/out/report.json", "permission denied")
    """

    def __init__(self, path: str, reason: str) -> None:
        """Initialize report write error.

        Args
        ----
            path: Target path of the report asset
            reason: Explanation of what went wrong
        """
        super().__init__(f"Cannot write report to '{path}': {reason}")
        self.path = path
        self.reason = reason


__all__ = [
    "HexLintError",
    "ConfigurationError",
    "ValidationError",
    "ResolveError",
    "EngineSetupError",
    "LintReportError",
    "ReportWriteError",
]
