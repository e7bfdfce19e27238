"""Output filesystem drivers."""

from hexlint.drivers.filesystem.local import LocalOutputFileSystem
from hexlint.drivers.filesystem.memory import InMemoryOutputFileSystem

__all__ = ["InMemoryOutputFileSystem", "LocalOutputFileSystem"]
