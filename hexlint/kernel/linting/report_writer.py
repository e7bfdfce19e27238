"""Persisting a formatted report to the build's output filesystem."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from hexlint.kernel.exceptions import ReportWriteError
from hexlint.kernel.logging import get_logger

if TYPE_CHECKING:
    from hexlint.kernel.ports.filesystem import OutputFileSystem

__all__ = ["ReportWriter", "resolve_report_path"]

logger = get_logger(__name__)


def resolve_report_path(file_path: str | Path, output_path: str | Path) -> Path:
    """Resolve a report path against the build output directory.

    Examples
    --------
    >>> str(resolve_report_path("report.json", "/out"))
    '/out/report.json'
    >>> str(resolve_report_path("/abs/report.json", "/out"))
    '/abs/report.json'
    """
    path = Path(file_path)
    if path.is_absolute():
        return path
    return Path(output_path) / path


class ReportWriter:
    """Writes report content, creating parent directories first.

    Examples
    --------
    Example usage::

        writer = ReportWriter(build_context.output_file_system)
        await writer.asave(Path("/out/lint/report.txt"), content)
    """

    def __init__(self, file_system: OutputFileSystem) -> None:
        self._file_system = file_system

    async def asave(self, path: Path, content: str | bytes) -> None:
        """Ensure ``path``'s directory exists, then write ``content``.

        Raises
        ------
        ReportWriteError
            If creating the directory or writing the file fails
        """
        try:
            await self._file_system.amkdir(str(path.parent), recursive=True)
        except Exception as e:
            raise ReportWriteError(str(path), f"cannot create directory: {e}") from e

        try:
            await self._file_system.awrite_file(str(path), content)
        except Exception as e:
            raise ReportWriteError(str(path), str(e)) from e

        logger.info("Lint report written to {path}", path=str(path))
