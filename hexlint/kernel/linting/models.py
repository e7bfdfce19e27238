"""Core models for per-file lint results and aggregated reports."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from hexlint.kernel.domain.build import BuildPass
    from hexlint.kernel.exceptions import LintReportError

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class LintMessage:
    """A single message reported by the engine for one file."""

    rule_id: str
    severity: Severity
    text: str
    line: int = 0
    column: int = 0


@dataclass(frozen=True, slots=True)
class LintResult:
    """Outcome of analysing one file.

    ``ignored`` marks a file excluded from reporting altogether (for example
    because it matched an ignore pattern); such results never reach the
    result store.
    """

    source: str
    messages: tuple[LintMessage, ...] = ()
    ignored: bool = False

    @property
    def errors(self) -> list[LintMessage]:
        """Messages with severity 'error'."""
        return [m for m in self.messages if m.severity == "error"]

    @property
    def warnings(self) -> list[LintMessage]:
        """Messages with severity 'warning'."""
        return [m for m in self.messages if m.severity == "warning"]

    def with_messages(self, messages: Sequence[LintMessage]) -> LintResult:
        """Return a copy of this result carrying only ``messages``."""
        return replace(self, messages=tuple(messages))


Formatter = Callable[[Sequence[LintResult]], str]
"""Turns a sequence of results into renderable text."""

FormatterSpec = Formatter | str | None

GenerateReport = Callable[["BuildPass"], Awaitable[None]]


@dataclass(frozen=True, slots=True)
class PartitionedResults:
    """Results split by severity; each copy holds only matching messages."""

    errors: list[LintResult] = field(default_factory=list)
    warnings: list[LintResult] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class Report:
    """Output of one ``Linter.report()`` cycle.

    A missing ``errors`` or ``warnings`` payload means no file qualified for
    that severity in this cycle. ``generate_report_asset`` persists the
    configured report file when awaited.
    """

    errors: LintReportError | None = None
    warnings: LintReportError | None = None
    generate_report_asset: GenerateReport | None = None

    @property
    def is_empty(self) -> bool:
        """True if the report carries no payload and no asset action."""
        return self.errors is None and self.warnings is None and self.generate_report_asset is None
