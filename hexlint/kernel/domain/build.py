"""Build context and build pass domain objects.

A :class:`BuildContext` is the long-lived identity of one build session (a
compiler instance in watch mode). Each rebuild is a :class:`BuildPass`. The
result store is keyed weakly by the context, so every pass of one session
sees the same results and the store goes away with the session.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from hexlint.kernel.ports.filesystem import OutputFileSystem


@dataclass(eq=False)
class BuildContext:
    """Long-lived build session.

    Attributes
    ----------
    output_path : str
        Directory that relative report paths are resolved against
    output_file_system : OutputFileSystem
        Filesystem the report asset is written to
    name : str
        Display name used in logs
    """

    output_path: str
    output_file_system: OutputFileSystem
    name: str = "build"

    def new_pass(self) -> BuildPass:
        """Start a new pass over this build context."""
        return BuildPass(context=self)


@dataclass(eq=False)
class BuildPass:
    """One pass (compilation) of a build context.

    ``errors`` is the build-level error sink; failed analysis jobs append
    their exception here.
    """

    context: BuildContext
    errors: list[Exception] = field(default_factory=list)
