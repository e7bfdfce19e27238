"""Shared fixtures for hexlint tests.

- FakeEngine: scriptable engine with per-file outcomes, gates and failures
- context / build_pass: a build context backed by an in-memory filesystem
"""

from __future__ import annotations

import asyncio
from collections.abc import Sequence

import pytest

from hexlint.drivers.filesystem.memory import InMemoryOutputFileSystem
from hexlint.kernel.domain.build import BuildContext, BuildPass
from hexlint.kernel.linting.models import LintMessage, LintResult


def error(text: str = "bad", rule_id: str = "rule-e") -> LintMessage:
    return LintMessage(rule_id=rule_id, severity="error", text=text, line=1, column=1)


def warning(text: str = "meh", rule_id: str = "rule-w") -> LintMessage:
    return LintMessage(rule_id=rule_id, severity="warning", text=text, line=2, column=1)


def sources_formatter(results: Sequence[LintResult]) -> str:
    """Render ``source:count`` pairs; enough to assert on membership."""
    return "\n".join(f"{r.source}:{len(r.messages)}" for r in results)


def upper_formatter(results: Sequence[LintResult]) -> str:
    return sources_formatter(results).upper()


class FakeEngine:
    """Engine whose outcomes are scripted per file."""

    default_formatter = "sources"

    def __init__(self, threads: int = 1) -> None:
        self.threads = threads
        self.formatters = {"sources": sources_formatter, "upper": upper_formatter}
        self.outcomes: dict[str, list[LintResult]] = {}
        self.gates: dict[str, asyncio.Event] = {}
        self.failing: set[str] = set()
        self.calls: list[list[str]] = []
        self.events: list[str] = []
        self.cleanups = 0

    def script(self, *results: LintResult) -> None:
        """Queue results; each ``alint`` call for a file consumes the next one."""
        for result in results:
            self.outcomes.setdefault(result.source, []).append(result)

    def gate(self, file: str) -> asyncio.Event:
        """Block jobs containing ``file`` until the returned event is set."""
        event = self.gates[file] = asyncio.Event()
        return event

    async def alint(self, files: list[str]) -> list[LintResult]:
        self.calls.append(list(files))
        for file in files:
            if file in self.gates:
                await self.gates[file].wait()
        self.events.append(f"alint:{','.join(files)}")
        if self.failing.intersection(files):
            raise RuntimeError(f"engine crashed on {sorted(self.failing.intersection(files))}")

        results = []
        for file in files:
            queued = self.outcomes.get(file)
            results.append(queued.pop(0) if queued else LintResult(source=file))
        return results

    async def acleanup(self) -> None:
        self.cleanups += 1
        self.events.append("cleanup")


@pytest.fixture
def engine() -> FakeEngine:
    return FakeEngine()


@pytest.fixture
def file_system() -> InMemoryOutputFileSystem:
    return InMemoryOutputFileSystem()


@pytest.fixture
def context(file_system: InMemoryOutputFileSystem) -> BuildContext:
    return BuildContext(output_path="/out", output_file_system=file_system, name="test")


@pytest.fixture
def build_pass(context: BuildContext) -> BuildPass:
    return context.new_pass()
