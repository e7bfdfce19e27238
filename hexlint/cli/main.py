"""hexlint CLI - Main entrypoint."""

import sys

try:
    import typer
except ImportError:
    print("Error: CLI dependencies not installed.")
    print("Please install with:")
    print("  pip install hexlint[cli]")
    sys.exit(1)

from hexlint import __version__
from hexlint.cli.commands import formatters_cmd, lint_cmd
from hexlint.cli.utils import LoggingOverrides, console
from hexlint.kernel.logging import configure_logging

app = typer.Typer(
    name="hexlint",
    help="hexlint - incremental linting with results that persist across passes.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    pretty_exceptions_enable=False,
)

app.command(name="lint", help="Lint files and print the report")(lint_cmd.lint)
app.command(name="formatters", help="List available formatters")(formatters_cmd.formatters)


@app.callback(invoke_without_command=True)
def callback(
    ctx: typer.Context,
    *,
    quiet: bool = typer.Option(False, "-q", "--quiet", help="Only log errors"),
    verbose: bool = typer.Option(False, "-V", "--verbose", help="Enable debug logging"),
    log_level: str | None = typer.Option(
        None, "--log-level", help="debug|info|warning|error (overrides config)"
    ),
    log_format: str | None = typer.Option(
        None, "--log-format", help="console|json|structured|rich (overrides config)"
    ),
    version: bool = typer.Option(False, "--version", "-v", help="Show version and exit"),
) -> None:
    """hexlint CLI."""
    if quiet:
        log_level = "error"
    elif verbose:
        log_level = "debug"

    # Commands re-apply these on top of the loaded [tool.hexlint.logging]
    ctx.obj = LoggingOverrides(
        level=log_level.upper() if log_level else None,
        format=log_format.lower() if log_format else None,
    )
    configure_logging(
        level=ctx.obj.level or "WARNING",  # type: ignore[arg-type]
        format=ctx.obj.format or "console",  # type: ignore[arg-type]
    )

    if version:
        console.print(f"[bold blue]hexlint[/bold blue] version [green]{__version__}[/green]")
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())
        raise typer.Exit()


def main() -> None:
    """Main CLI entrypoint."""
    app()


if __name__ == "__main__":
    main()
