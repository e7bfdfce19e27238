"""CLI helper utilities for hexlint commands."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from rich.console import Console

from hexlint.kernel.logging import configure_from_config

if TYPE_CHECKING:
    import typer

    from hexlint.kernel.config.models import LoggingConfig

DEFAULT_EXTENSIONS = ("css", "scss", "less", "py", "js", "ts")

console = Console()
err_console = Console(stderr=True)


def parse_extensions(value: str) -> tuple[str, ...]:
    """Parse a comma-separated extension list (``"css, .scss"`` -> ``("css", "scss")``)."""
    return tuple(ext.strip().lstrip(".").lower() for ext in value.split(",") if ext.strip())


def collect_files(paths: Iterable[Path], extensions: Iterable[str]) -> list[str]:
    """Expand files and directories into a sorted, de-duplicated file list.

    Explicit files are always kept. Directories are searched recursively for
    files with one of ``extensions``; hidden directories are skipped.
    """
    wanted = {ext.lower() for ext in extensions}
    found: set[str] = set()

    for path in paths:
        if path.is_dir():
            for candidate in path.rglob("*"):
                relative = candidate.relative_to(path)
                if any(part.startswith(".") for part in relative.parts[:-1]):
                    continue
                if candidate.is_file() and candidate.suffix.lstrip(".").lower() in wanted:
                    found.add(str(candidate))
        else:
            found.add(str(path))

    return sorted(found)


def batched(items: list[str], size: int) -> Iterator[list[str]]:
    """Yield consecutive chunks of at most ``size`` items."""
    for start in range(0, len(items), size):
        yield items[start : start + size]


@dataclass(frozen=True, slots=True)
class LoggingOverrides:
    """Logging flags given to the top-level command; None means "use config"."""

    level: str | None = None
    format: str | None = None


def apply_logging_config(ctx: typer.Context, config: LoggingConfig) -> None:
    """Configure logging from the loaded config, letting command-line flags win."""
    overrides = ctx.obj if isinstance(ctx.obj, LoggingOverrides) else LoggingOverrides()
    configure_from_config(
        config,
        level=overrides.level,  # type: ignore[arg-type]
        format=overrides.format,  # type: ignore[arg-type]
    )
