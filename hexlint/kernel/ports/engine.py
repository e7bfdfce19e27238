"""Port interface for the analysis engine."""

from collections.abc import Mapping
from typing import Protocol, runtime_checkable

from hexlint.kernel.linting.models import Formatter, LintResult


@runtime_checkable
class LintEngine(Protocol):
    """Port for the engine that analyses files and owns the formatters.

    The engine is an external collaborator: rule evaluation, file discovery
    and ignore-file resolution all live behind this interface.

    Attributes
    ----------
    formatters : Mapping[str, Formatter]
        Named formatters the engine ships with
    default_formatter : str
        Name of the formatter used when none is configured or a name is unknown
    threads : int
        Number of files the engine analyses concurrently
    """

    formatters: Mapping[str, Formatter]
    default_formatter: str
    threads: int

    async def alint(self, files: list[str]) -> list[LintResult]:
        """Analyse ``files`` and return one result per analysed file.

        Parameters
        ----------
        files : list[str]
            Paths to analyse

        Returns
        -------
        list[LintResult]
            Results in engine order

        Raises
        ------
        Exception
            Any failure; this is the engine's only error channel
        """
        ...

    async def acleanup(self) -> None:
        """Release resources held between passes."""
        ...
