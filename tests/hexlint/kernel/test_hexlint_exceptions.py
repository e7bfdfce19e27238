"""Tests for the hexlint exception hierarchy."""

import pytest

from hexlint.kernel.exceptions import (
    ConfigurationError,
    EngineSetupError,
    HexLintError,
    LintReportError,
    ReportWriteError,
    ResolveError,
    ValidationError,
)


@pytest.mark.parametrize(
    "error",
    [
        ConfigurationError("linter", "bad"),
        ValidationError("threads", "must be positive"),
        ResolveError("x.Y", "missing"),
        EngineSetupError("boom"),
        LintReportError("errors", "text"),
        ReportWriteError("/out/r.txt", "denied"),
    ],
)
def test_all_inherit_from_base(error: HexLintError) -> None:
    assert isinstance(error, HexLintError)


def test_configuration_error_message() -> None:
    error = ConfigurationError("linter", "emit_error must be a boolean")
    assert str(error) == "Configuration error in 'linter': emit_error must be a boolean"
    assert error.component == "linter"
    assert error.reason == "emit_error must be a boolean"


def test_validation_error_with_and_without_value() -> None:
    assert str(ValidationError("threads", "must be positive", value=0)) == (
        "Validation failed for 'threads': must be positive (got 0)"
    )
    assert str(ValidationError("threads", "must be positive")) == (
        "Validation failed for 'threads': must be positive"
    )


def test_resolve_error_message() -> None:
    error = ResolveError("pkg.Engine", "not found")
    assert str(error) == "Cannot resolve 'pkg.Engine': not found"
    assert error.kind == "pkg.Engine"


class TestLintReportError:
    def test_str_is_formatted_text(self) -> None:
        error = LintReportError("warnings", "a.css\n  1:1  warning  x")
        assert str(error) == "a.css\n  1:1  warning  x"
        assert error.kind == "warnings"

    def test_equality_by_kind_and_text(self) -> None:
        assert LintReportError("errors", "t") == LintReportError("errors", "t")
        assert LintReportError("errors", "t") != LintReportError("warnings", "t")
        assert LintReportError("errors", "t") != LintReportError("errors", "u")
        assert len({LintReportError("errors", "t"), LintReportError("errors", "t")}) == 1

    def test_not_equal_to_other_types(self) -> None:
        assert LintReportError("errors", "t") != "t"

    def test_repr(self) -> None:
        assert repr(LintReportError("errors", "t")) == "LintReportError(kind='errors', text='t')"


def test_report_write_error_message() -> None:
    error = ReportWriteError("/out/r.txt", "permission denied")
    assert str(error) == "Cannot write report to '/out/r.txt': permission denied"
    assert error.path == "/out/r.txt"
