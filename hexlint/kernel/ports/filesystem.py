"""Output filesystem port definition."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class OutputFileSystem(Protocol):
    """Port for the filesystem a build writes its output assets to.

    Both operations complete exactly once, raising on failure.
    """

    async def amkdir(self, path: str, recursive: bool = False) -> None:
        """Create a directory.

        Parameters
        ----------
        path : str
            Directory to create
        recursive : bool
            Create missing parents and accept an existing directory
        """
        ...

    async def awrite_file(self, path: str, content: str | bytes) -> None:
        """Write ``content`` to ``path``, replacing any existing file.

        Parameters
        ----------
        path : str
            Destination file path
        content : str | bytes
            Content to write; text is encoded as UTF-8
        """
        ...
