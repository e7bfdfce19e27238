"""Lint command for the hexlint CLI."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from hexlint.cli.utils import (
    DEFAULT_EXTENSIONS,
    apply_logging_config,
    batched,
    collect_files,
    console,
    err_console,
    parse_extensions,
)
from hexlint.drivers.filesystem.local import LocalOutputFileSystem
from hexlint.kernel.config.loader import load_config
from hexlint.kernel.config.models import LinterOptions, OutputReportOptions
from hexlint.kernel.domain.build import BuildContext, BuildPass
from hexlint.kernel.exceptions import (
    ConfigurationError,
    EngineSetupError,
    ReportWriteError,
)
from hexlint.kernel.linting.linter import Linter
from hexlint.kernel.linting.models import Report


def lint(
    ctx: typer.Context,
    paths: Annotated[
        list[Path],
        typer.Argument(help="Files or directories to lint", exists=True, readable=True),
    ],
    formatter: Annotated[
        str | None,
        typer.Option("--format", "-f", help="Formatter name (string, compact, unix, json, verbose)"),
    ] = None,
    output_report: Annotated[
        str | None,
        typer.Option("--output-report", "-o", help="Also write the full report to this file"),
    ] = None,
    report_format: Annotated[
        str | None,
        typer.Option("--report-format", help="Formatter for the --output-report file"),
    ] = None,
    no_warnings: Annotated[
        bool, typer.Option("--no-warnings", help="Do not report warnings")
    ] = False,
    no_errors: Annotated[bool, typer.Option("--no-errors", help="Do not report errors")] = False,
    config_path: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to pyproject.toml or kind: Config YAML"),
    ] = None,
    extensions: Annotated[
        str,
        typer.Option("--ext", help="Comma-separated extensions searched in directories"),
    ] = ",".join(DEFAULT_EXTENSIONS),
    batch_size: Annotated[
        int, typer.Option("--batch-size", min=1, help="Files per lint job")
    ] = 50,
) -> None:
    """Lint files and print the report.

    Exits with 1 when errors (or warnings, with fail_on_warning) are
    reported or an analysis job failed, and 2 on setup or write failures.

    Examples
    --------
    hexlint lint src/
    hexlint lint src/ --format compact --no-warnings
    hexlint lint src/ -o reports/lint.json --report-format json
    """
    try:
        config = load_config(config_path)
    except (ConfigurationError, FileNotFoundError) as e:
        err_console.print(f"[red]Configuration error:[/red] {escape(str(e))}")
        raise typer.Exit(2) from e
    apply_logging_config(ctx, config.logging)

    options = _apply_overrides(
        config.linter,
        formatter=formatter,
        output_report=output_report,
        report_format=report_format,
        no_warnings=no_warnings,
        no_errors=no_errors,
    )

    files = collect_files(paths, parse_extensions(extensions))
    if not files:
        console.print("[yellow]No files to lint.[/yellow]")
        return

    context = BuildContext(
        output_path=str(Path.cwd()), output_file_system=LocalOutputFileSystem(), name="cli"
    )
    build_pass = context.new_pass()

    try:
        report = asyncio.run(_run(options, build_pass, files, batch_size))
    except EngineSetupError as e:
        err_console.print(f"[red]Engine setup failed:[/red] {escape(str(e))}")
        raise typer.Exit(2) from e

    _print_report(report, build_pass, len(files))

    if report.generate_report_asset:
        try:
            asyncio.run(report.generate_report_asset(build_pass))
        except ReportWriteError as e:
            err_console.print(f"[red]{escape(str(e))}[/red]")
            raise typer.Exit(2) from e

    failed = bool(build_pass.errors)
    failed |= options.fail_on_error and report.errors is not None
    failed |= options.fail_on_warning and report.warnings is not None
    if failed:
        raise typer.Exit(1)


def _apply_overrides(
    options: LinterOptions,
    *,
    formatter: str | None,
    output_report: str | None,
    report_format: str | None,
    no_warnings: bool,
    no_errors: bool,
) -> LinterOptions:
    """Layer command-line flags over configured options."""
    update: dict[str, object] = {}
    if formatter:
        update["formatter"] = formatter
    if no_warnings:
        update["emit_warning"] = False
    if no_errors:
        update["emit_error"] = False
    if output_report:
        update["output_report"] = OutputReportOptions(
            file_path=output_report, formatter=report_format
        )
    elif report_format and options.output_report:
        update["output_report"] = options.output_report.model_copy(
            update={"formatter": report_format}
        )
    return options.model_copy(update=update)


async def _run(
    options: LinterOptions, build_pass: BuildPass, files: list[str], batch_size: int
) -> Report:
    linter = Linter(None, options, build_pass)
    for batch in batched(files, batch_size):
        linter.lint(batch)

    return await linter.report()


def _print_report(report: Report, build_pass: BuildPass, file_count: int) -> None:
    """Print job failures, errors and warnings."""
    for error in build_pass.errors:
        err_console.print(f"[red]Lint job failed:[/red] {escape(str(error))}", highlight=False)

    if report.errors:
        console.print(report.errors.text, markup=False, highlight=False)
    if report.warnings:
        console.print(report.warnings.text, markup=False, highlight=False)

    if not report.errors and not report.warnings and not build_pass.errors:
        console.print(f"[green]No problems found[/green] in {file_count} file(s)")
