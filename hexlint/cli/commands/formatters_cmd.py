"""List the formatters the configured engine provides."""

from __future__ import annotations

import inspect
from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from hexlint.cli.utils import apply_logging_config, console, err_console
from hexlint.kernel.config.loader import load_config
from hexlint.kernel.exceptions import ConfigurationError, HexLintError
from hexlint.kernel.resolver import get_engine


def formatters(
    ctx: typer.Context,
    config_path: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to pyproject.toml or kind: Config YAML"),
    ] = None,
) -> None:
    """Show the named formatters of the configured engine."""
    try:
        config = load_config(config_path)
        apply_logging_config(ctx, config.logging)
        engine = get_engine(None, config.linter)
    except (ConfigurationError, FileNotFoundError) as e:
        err_console.print(f"[red]Configuration error:[/red] {escape(str(e))}")
        raise typer.Exit(2) from e
    except HexLintError as e:
        err_console.print(f"[red]Engine setup failed:[/red] {escape(str(e))}")
        raise typer.Exit(2) from e

    table = Table(show_header=True, border_style="dim")
    table.add_column("Name", style="cyan")
    table.add_column("Description")

    for name, formatter in sorted(engine.formatters.items()):
        label = f"{name} (default)" if name == engine.default_formatter else name
        summary = (inspect.getdoc(formatter) or "").splitlines()
        table.add_row(label, summary[0] if summary else "")

    console.print(table)
