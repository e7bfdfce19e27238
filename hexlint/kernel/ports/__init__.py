"""Port interfaces for the application."""

from hexlint.kernel.ports.engine import LintEngine
from hexlint.kernel.ports.filesystem import OutputFileSystem

__all__ = ["LintEngine", "OutputFileSystem"]
