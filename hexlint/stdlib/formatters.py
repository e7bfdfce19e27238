"""Built-in report formatters.

Every formatter takes a sequence of results and returns text. ``string`` is
the default.
"""

from __future__ import annotations

import json
from collections.abc import Sequence

from hexlint.kernel.linting.models import Formatter, LintResult

DEFAULT_FORMATTER = "string"


def _summary(results: Sequence[LintResult]) -> tuple[int, int]:
    errors = sum(len(result.errors) for result in results)
    warnings = sum(len(result.warnings) for result in results)
    return errors, warnings


def _plural(count: int, word: str) -> str:
    return f"{count} {word}" if count == 1 else f"{count} {word}s"


def string_formatter(results: Sequence[LintResult]) -> str:
    """Group messages under each file, followed by a problem count."""
    lines: list[str] = []
    for result in results:
        if not result.messages:
            continue
        lines.append(result.source)
        for message in result.messages:
            lines.append(
                f"  {message.line}:{message.column}  {message.severity:<7}  "
                f"{message.text}  {message.rule_id}"
            )
        lines.append("")

    errors, warnings = _summary(results)
    if errors or warnings:
        total = _plural(errors + warnings, "problem")
        lines.append(f"{total} ({_plural(errors, 'error')}, {_plural(warnings, 'warning')})")
    return "\n".join(lines)


def compact_formatter(results: Sequence[LintResult]) -> str:
    """One line per message: ``path: line N, col M, severity - text``."""
    return "\n".join(
        f"{result.source}: line {message.line}, col {message.column}, "
        f"{message.severity} - {message.text}"
        for result in results
        for message in result.messages
    )


def unix_formatter(results: Sequence[LintResult]) -> str:
    """One ``path:line:column: text [severity]`` line per message, plus a total."""
    lines = [
        f"{result.source}:{message.line}:{message.column}: {message.text} [{message.severity}]"
        for result in results
        for message in result.messages
    ]
    if lines:
        lines.append("")
        lines.append(_plural(len(lines) - 1, "problem"))
    return "\n".join(lines)


def json_formatter(results: Sequence[LintResult]) -> str:
    """Machine-readable JSON array, one object per file."""
    payload = [
        {
            "source": result.source,
            "ignored": result.ignored,
            "errorCount": len(result.errors),
            "warningCount": len(result.warnings),
            "messages": [
                {
                    "rule": message.rule_id,
                    "severity": message.severity,
                    "text": message.text,
                    "line": message.line,
                    "column": message.column,
                }
                for message in result.messages
            ],
        }
        for result in results
    ]
    return json.dumps(payload, indent=2)


def verbose_formatter(results: Sequence[LintResult]) -> str:
    """``string`` output followed by per-file and per-rule tallies."""
    lines = [string_formatter(results), "", f"{_plural(len(results), 'source')} checked"]
    for result in results:
        lines.append(f" {result.source}")

    by_rule: dict[str, int] = {}
    for result in results:
        for message in result.messages:
            by_rule[message.rule_id] = by_rule.get(message.rule_id, 0) + 1

    if by_rule:
        lines.append("")
        lines.append(f"{_plural(sum(by_rule.values()), 'problem')} found")
        for rule_id, count in sorted(by_rule.items()):
            lines.append(f" {rule_id}: {count}")
    return "\n".join(lines)


FORMATTERS: dict[str, Formatter] = {
    "string": string_formatter,
    "compact": compact_formatter,
    "unix": unix_formatter,
    "json": json_formatter,
    "verbose": verbose_formatter,
}
