"""In-memory output filesystem driver.

Keeps written files in a dict, like the in-memory filesystems used by dev
servers that never touch the disk. Paths are POSIX-style.
"""

from __future__ import annotations

import posixpath


class InMemoryOutputFileSystem:
    """Output filesystem backed by a dict.

    Attributes
    ----------
    files : dict[str, bytes]
        Written files by normalized path
    directories : set[str]
        Existing directories; the roots ``/`` and ``.`` always exist
    """

    def __init__(self) -> None:
        self.files: dict[str, bytes] = {}
        self.directories: set[str] = {"/", "."}

    async def amkdir(self, path: str, recursive: bool = False) -> None:
        """Create a directory.

        Raises
        ------
        FileExistsError
            If ``path`` exists and ``recursive`` is False, or is a file
        FileNotFoundError
            If the parent is missing and ``recursive`` is False
        """
        path = posixpath.normpath(path)
        if path in self.files:
            raise FileExistsError(f"File exists: {path}")
        if path in self.directories:
            if recursive:
                return
            raise FileExistsError(f"Directory exists: {path}")

        parent = posixpath.dirname(path) or "."
        if parent not in self.directories:
            if not recursive:
                raise FileNotFoundError(f"No such directory: {parent}")
            await self.amkdir(parent, recursive=True)
        self.directories.add(path)

    async def awrite_file(self, path: str, content: str | bytes) -> None:
        """Write a file; the parent directory must exist.

        Raises
        ------
        FileNotFoundError
            If the parent directory does not exist
        IsADirectoryError
            If ``path`` is a directory
        """
        path = posixpath.normpath(path)
        if path in self.directories:
            raise IsADirectoryError(f"Is a directory: {path}")
        parent = posixpath.dirname(path) or "."
        if parent not in self.directories:
            raise FileNotFoundError(f"No such directory: {parent}")
        self.files[path] = content.encode("utf-8") if isinstance(content, str) else content

    def read_text(self, path: str) -> str:
        """Return a written file decoded as UTF-8."""
        return self.files[posixpath.normpath(path)].decode("utf-8")
