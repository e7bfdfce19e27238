"""Tests for the built-in line rules."""

import pytest

from hexlint.kernel.linting.models import LintMessage
from hexlint.stdlib.rules import (
    ALL_RULE_IDS,
    FinalNewlineRule,
    MaxLineLengthRule,
    NoTabsRule,
    NoTrailingWhitespaceRule,
    default_rules,
    run_rules,
)


class TestNoTrailingWhitespaceRule:
    def test_reports_column_after_content(self) -> None:
        (message,) = NoTrailingWhitespaceRule().check("ok\nbad  \n")
        assert (message.line, message.column) == (2, 4)
        assert message.severity == "warning"
        assert message.rule_id == "no-trailing-whitespace"

    def test_clean_text(self) -> None:
        assert NoTrailingWhitespaceRule().check("a\nb\n") == []


class TestMaxLineLengthRule:
    def test_reports_long_lines_only(self) -> None:
        messages = MaxLineLengthRule(5).check("12345\n123456\n")
        assert [(m.line, m.column) for m in messages] == [(2, 6)]
        assert "no more than 5 characters" in messages[0].text


class TestNoTabsRule:
    def test_tab_in_indent_is_error(self) -> None:
        (message,) = NoTabsRule().check("  \tx\n")
        assert message.severity == "error"
        assert message.column == 3

    def test_tab_after_content_is_allowed(self) -> None:
        assert NoTabsRule().check("x\ty\n") == []


class TestFinalNewlineRule:
    @pytest.mark.parametrize("text", ["", "a\n", "a\nb\n"])
    def test_accepts(self, text: str) -> None:
        assert FinalNewlineRule().check(text) == []

    def test_reports_end_of_last_line(self) -> None:
        (message,) = FinalNewlineRule().check("a\nbcd")
        assert (message.line, message.column) == (2, 4)


def test_run_rules_orders_by_position() -> None:
    messages = run_rules(default_rules(10), "\tx" + " " * 12 + "\nok")
    assert all(isinstance(message, LintMessage) for message in messages)
    positions = [(message.line, message.column) for message in messages]
    assert positions == sorted(positions)
    assert {message.rule_id for message in messages} == ALL_RULE_IDS


def test_default_rules_cover_all_ids() -> None:
    assert {rule.rule_id for rule in default_rules()} == ALL_RULE_IDS
