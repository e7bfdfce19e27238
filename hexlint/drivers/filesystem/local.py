"""Local disk output filesystem driver."""

from __future__ import annotations

import aiofiles
import aiofiles.os

from hexlint.kernel.logging import get_logger

logger = get_logger(__name__)


class LocalOutputFileSystem:
    """Writes build output to the local disk with non-blocking I/O.

    Examples
    --------
    Example usage::

        fs = LocalOutputFileSystem()
        await fs.amkdir("/tmp/out/reports", recursive=True)
        await fs.awrite_file("/tmp/out/reports/lint.txt", "ok")
    """

    async def amkdir(self, path: str, recursive: bool = False) -> None:
        """Create ``path``; ``recursive`` also creates parents and accepts existing dirs."""
        if recursive:
            await aiofiles.os.makedirs(path, exist_ok=True)
        else:
            await aiofiles.os.mkdir(path)

    async def awrite_file(self, path: str, content: str | bytes) -> None:
        """Write ``content`` to ``path`` (UTF-8 for text)."""
        data = content.encode("utf-8") if isinstance(content, str) else content
        async with aiofiles.open(path, "wb") as f:
            await f.write(data)
        logger.debug("Wrote {size} bytes to {path}", size=len(data), path=path)
