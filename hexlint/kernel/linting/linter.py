"""Scheduling analysis jobs and aggregating their results across passes.

The linter sits between "a set of files was (re)analysed" and "here is the
current report". Results are kept in a store shared by every pass of one
build context, so a report always covers the whole project even when a pass
only re-analysed the files that changed.

Examples
--------
Example usage::

    linter = Linter("css", options, build_pass)
    linter.lint(["src/a.css", "src/b.css"])
    linter.lint("src/c.css")

    report = await linter.report()
    if report.errors:
        build_pass.errors.append(report.errors)
    if report.generate_report_asset:
        await report.generate_report_asset(build_pass)
"""

from __future__ import annotations

import asyncio
import itertools
from collections.abc import Iterable
from typing import TYPE_CHECKING

from hexlint.kernel.exceptions import EngineSetupError
from hexlint.kernel.linting.formatting import (
    format_results,
    load_formatter,
    parse_results,
    remove_ignored,
)
from hexlint.kernel.linting.models import Formatter, GenerateReport, LintResult, Report
from hexlint.kernel.linting.report_writer import ReportWriter, resolve_report_path
from hexlint.kernel.linting.storage import get_result_storage
from hexlint.kernel.logging import get_logger
from hexlint.kernel.resolver import get_engine

if TYPE_CHECKING:
    from hexlint.kernel.config.models import LinterOptions
    from hexlint.kernel.domain.build import BuildPass
    from hexlint.kernel.ports.engine import LintEngine

__all__ = ["Linter", "arrify"]

logger = get_logger(__name__)


def arrify(files: str | Iterable[str]) -> list[str]:
    """Normalize one path or an iterable of paths to a list."""
    if isinstance(files, str):
        return [files]
    return list(files)


class Linter:
    """Schedules lint jobs and folds their results into the cross-run store.

    Parameters
    ----------
    key : str | None
        Engine cache key; passes sharing a key share one engine
    options : LinterOptions
        Linter options
    build_pass : BuildPass
        Current pass; its ``errors`` list receives failed jobs and its context
        selects the result store
    engine : LintEngine | None
        Engine to use instead of resolving ``options.engine``

    Raises
    ------
    EngineSetupError
        If the engine cannot be acquired
    """

    def __init__(
        self,
        key: str | None,
        options: LinterOptions,
        build_pass: BuildPass,
        engine: LintEngine | None = None,
    ) -> None:
        self.options = options
        self.build_pass = build_pass
        self._pending: list[asyncio.Task[list[LintResult]]] = []
        self._storage = get_result_storage(build_pass)

        if engine is None:
            try:
                engine = get_engine(key, options)
            except Exception as e:
                raise EngineSetupError(str(e)) from e
        self.engine = engine

    @property
    def threads(self) -> int:
        """Number of files the engine analyses concurrently."""
        return self.engine.threads

    def lint(self, files: str | Iterable[str]) -> None:
        """Schedule ``files`` for analysis.

        Stored results for these files are evicted immediately, before the
        job runs. Must be called from inside a running event loop.
        """
        batch = arrify(files)
        if not batch:
            return

        for file in batch:
            self._storage.pop(file, None)

        task = asyncio.get_running_loop().create_task(self._run_job(batch))
        self._pending.append(task)
        logger.debug("Scheduled lint job for {count} file(s)", count=len(batch))

    async def _run_job(self, files: list[str]) -> list[LintResult]:
        try:
            return await self.engine.alint(files)
        except Exception as e:
            logger.warning(
                "Lint job for {count} file(s) failed: {error}", count=len(files), error=e
            )
            self.build_pass.errors.append(e)
            return []

    async def report(self) -> Report:
        """Drain finished and running jobs and build the current report.

        Jobs scheduled while this call is waiting are left for the next call.
        """
        # Swap before the first await so concurrent lint() calls land in the next cycle
        pending, self._pending = self._pending, []
        logger.debug("Draining {count} lint job(s)", count=len(pending))

        batches = await asyncio.gather(*pending)
        results = remove_ignored(itertools.chain.from_iterable(batches))

        await self.engine.acleanup()

        for result in results:
            self._storage[str(result.source)] = result

        results = list(self._storage.values())
        if not results:
            return Report()

        formatter = load_formatter(self.engine, self.options.formatter)
        partitioned = parse_results(self.options, results)
        errors, warnings = format_results(formatter, partitioned)
        logger.debug(
            "Lint report: {files} file(s), {errors} with errors, {warnings} with warnings",
            files=len(results),
            errors=len(partitioned.errors),
            warnings=len(partitioned.warnings),
        )

        return Report(
            errors=errors,
            warnings=warnings,
            generate_report_asset=self._report_asset_generator(results, formatter),
        )

    def _report_asset_generator(
        self, results: list[LintResult], formatter: Formatter
    ) -> GenerateReport:
        """Bind the results of one report cycle to an asset writer."""
        options = self.options
        engine = self.engine

        async def generate_report_asset(build_pass: BuildPass) -> None:
            output_report = options.output_report
            if not output_report or not output_report.file_path:
                return

            if output_report.formatter:
                content = load_formatter(engine, output_report.formatter)(results)
            else:
                content = formatter(results)

            context = build_pass.context
            path = resolve_report_path(output_report.file_path, context.output_path)
            await ReportWriter(context.output_file_system).asave(path, content)

        return generate_report_asset
