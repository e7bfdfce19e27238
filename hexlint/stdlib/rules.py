"""Line-based lint rules used by the local rule engine."""

from __future__ import annotations

from typing import Protocol

from hexlint.kernel.linting.models import LintMessage, Severity

DEFAULT_MAX_LINE_LENGTH = 120


class LintRule(Protocol):
    """Protocol for a single lint rule."""

    rule_id: str
    severity: Severity
    description: str

    def check(self, text: str) -> list[LintMessage]:
        """Run this rule against a file's text and return messages."""
        ...


def run_rules(rules: list[LintRule], text: str) -> tuple[LintMessage, ...]:
    """Run rules against a file's text, ordering messages by position."""
    messages = [message for rule in rules for message in rule.check(text)]
    messages.sort(key=lambda m: (m.line, m.column))
    return tuple(messages)


class NoTrailingWhitespaceRule:
    """Lines must not end with spaces or tabs."""

    rule_id = "no-trailing-whitespace"
    severity: Severity = "warning"
    description = "Trailing whitespace"

    def check(self, text: str) -> list[LintMessage]:
        messages: list[LintMessage] = []
        for number, line in enumerate(text.splitlines(), start=1):
            stripped = line.rstrip(" \t")
            if stripped != line:
                messages.append(
                    LintMessage(
                        rule_id=self.rule_id,
                        severity=self.severity,
                        text=f"Unexpected trailing whitespace ({self.rule_id})",
                        line=number,
                        column=len(stripped) + 1,
                    )
                )
        return messages


class MaxLineLengthRule:
    """Lines must not exceed a maximum length."""

    rule_id = "max-line-length"
    severity: Severity = "warning"
    description = "Line too long"

    def __init__(self, max_length: int = DEFAULT_MAX_LINE_LENGTH) -> None:
        self.max_length = max_length

    def check(self, text: str) -> list[LintMessage]:
        return [
            LintMessage(
                rule_id=self.rule_id,
                severity=self.severity,
                text=f"Expected line length to be no more than {self.max_length} characters "
                f"({self.rule_id})",
                line=number,
                column=self.max_length + 1,
            )
            for number, line in enumerate(text.splitlines(), start=1)
            if len(line) > self.max_length
        ]


class NoTabsRule:
    """Indentation must not use tab characters."""

    rule_id = "no-tabs"
    severity: Severity = "error"
    description = "Tab indentation"

    def check(self, text: str) -> list[LintMessage]:
        messages: list[LintMessage] = []
        for number, line in enumerate(text.splitlines(), start=1):
            indent = line[: len(line) - len(line.lstrip(" \t"))]
            if "\t" in indent:
                messages.append(
                    LintMessage(
                        rule_id=self.rule_id,
                        severity=self.severity,
                        text=f"Unexpected tab indentation ({self.rule_id})",
                        line=number,
                        column=indent.index("\t") + 1,
                    )
                )
        return messages


class FinalNewlineRule:
    """Non-empty files must end with a newline."""

    rule_id = "final-newline"
    severity: Severity = "warning"
    description = "Missing final newline"

    def check(self, text: str) -> list[LintMessage]:
        if not text or text.endswith("\n"):
            return []
        lines = text.splitlines()
        return [
            LintMessage(
                rule_id=self.rule_id,
                severity=self.severity,
                text=f"Expected a newline at the end of the file ({self.rule_id})",
                line=len(lines),
                column=len(lines[-1]) + 1,
            )
        ]


def default_rules(max_line_length: int = DEFAULT_MAX_LINE_LENGTH) -> list[LintRule]:
    """Return one instance of every built-in rule."""
    return [
        NoTrailingWhitespaceRule(),
        MaxLineLengthRule(max_line_length),
        NoTabsRule(),
        FinalNewlineRule(),
    ]


ALL_RULE_IDS: frozenset[str] = frozenset(
    {
        NoTrailingWhitespaceRule.rule_id,
        MaxLineLengthRule.rule_id,
        NoTabsRule.rule_id,
        FinalNewlineRule.rule_id,
    }
)
