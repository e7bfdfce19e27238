"""Local in-process lint engine.

Reads files with non-blocking I/O and runs the built-in line rules over
them. This is the default engine; real deployments usually point
``LinterOptions.engine`` at an adapter around their own analyser.
"""

from __future__ import annotations

import asyncio
import fnmatch
from collections.abc import Iterable
from pathlib import PurePath
from typing import Any

import aiofiles

from hexlint.kernel.exceptions import ValidationError
from hexlint.kernel.linting.models import Formatter, LintResult
from hexlint.kernel.logging import get_logger
from hexlint.stdlib.formatters import DEFAULT_FORMATTER, FORMATTERS
from hexlint.stdlib.rules import (
    ALL_RULE_IDS,
    DEFAULT_MAX_LINE_LENGTH,
    LintRule,
    default_rules,
    run_rules,
)

logger = get_logger(__name__)


class LocalRuleEngine:
    """Engine running line rules over local files.

    Parameters
    ----------
    threads : int
        Maximum number of files read and checked at once within a batch
    max_line_length : int
        Limit for the ``max-line-length`` rule
    ignore_patterns : Iterable[str]
        Glob patterns; matching files produce ignored results
    disable : Iterable[str]
        Rule IDs to skip
    encoding : str
        Encoding used to read files

    Examples
    --------
    Example usage::

        engine = LocalRuleEngine(threads=4, ignore_patterns=["vendor/*"])
        results = await engine.alint(["src/app.css"])

    From configuration::

        [tool.hexlint.linter]
        engine = "hexlint.drivers.engines.local.LocalRuleEngine"
        threads = 4

        [tool.hexlint.linter.engine_options]
        max_line_length = 100
        disable = ["final-newline"]
    """

    default_formatter = DEFAULT_FORMATTER

    def __init__(
        self,
        threads: int = 1,
        max_line_length: int = DEFAULT_MAX_LINE_LENGTH,
        ignore_patterns: Iterable[str] = (),
        disable: Iterable[str] = (),
        encoding: str = "utf-8",
        **kwargs: Any,
    ) -> None:
        if threads < 1:
            raise ValidationError("threads", "must be at least 1", value=threads)
        if kwargs:
            raise ValidationError("engine_options", "unknown option(s)", value=sorted(kwargs))

        disabled = set(disable)
        unknown = disabled - ALL_RULE_IDS
        if unknown:
            raise ValidationError("disable", "unknown rule id(s)", value=sorted(unknown))

        self.threads = threads
        self.ignore_patterns = tuple(ignore_patterns)
        self.encoding = encoding
        self.formatters: dict[str, Formatter] = dict(FORMATTERS)
        self.rules: list[LintRule] = [
            rule for rule in default_rules(max_line_length) if rule.rule_id not in disabled
        ]
        self.files_linted = 0

    def is_ignored(self, file: str) -> bool:
        """Check a path against the ignore patterns."""
        posix = PurePath(file).as_posix()
        return any(fnmatch.fnmatch(posix, pattern) for pattern in self.ignore_patterns)

    async def alint(self, files: list[str]) -> list[LintResult]:
        """Analyse files concurrently, preserving input order.

        Raises
        ------
        OSError
            If a non-ignored file cannot be read
        """
        semaphore = asyncio.Semaphore(self.threads)

        async def lint_one(file: str) -> LintResult:
            if self.is_ignored(file):
                return LintResult(source=file, ignored=True)
            async with semaphore:
                async with aiofiles.open(file, encoding=self.encoding) as f:
                    text = await f.read()
            self.files_linted += 1
            return LintResult(source=file, messages=run_rules(self.rules, text))

        return list(await asyncio.gather(*(lint_one(file) for file in files)))

    async def acleanup(self) -> None:
        """Log and reset the per-pass counter."""
        if self.files_linted:
            logger.debug("Engine analysed {count} file(s) this pass", count=self.files_linted)
        self.files_linted = 0
