"""Loguru-based logging for hexlint.

``get_logger`` hands out loggers bound to a module name. The first call
configures logging from ``HEXLINT_LOG_LEVEL`` and ``HEXLINT_LOG_FORMAT``
unless ``configure_logging`` already ran.

Output formats:

- ``console``: plain single-line records
- ``structured``: level, location and message, colored on a TTY
- ``json``: one serialized record per line
- ``rich``: rendered by ``rich.logging.RichHandler``

Examples
--------
>>> from hexlint.kernel.logging import get_logger
>>> logger = get_logger(__name__)
>>> logger.info("Report ready for {count} file(s)", count=3)

Embedding applications usually call this once at startup::

    from hexlint.kernel.logging import configure_logging
    configure_logging(level="DEBUG", format="rich")
"""

import inspect
import logging
import os
import sys
from contextlib import suppress
from functools import lru_cache
from pathlib import Path
from typing import TYPE_CHECKING, Any, Literal

from loguru import logger
from rich.logging import RichHandler

if TYPE_CHECKING:
    import types

    from loguru import Logger

    from hexlint.kernel.config.models import LoggingConfig

LogLevel = Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LogFormat = Literal["console", "json", "structured", "rich"]

_active_settings: dict[str, Any] | None = None
_HANDLER_IDS: list[int] = []


def _stderr(message: str) -> None:
    # Looked up per record: sys.stderr may be replaced after configuration
    sys.stderr.write(message)


def _stream_handler(format: LogFormat, use_color: bool, include_timestamp: bool) -> dict[str, Any]:
    """Keyword arguments for ``logger.add`` describing the stderr handler."""
    if format == "rich":
        return {
            "sink": RichHandler(rich_tracebacks=True, markup=False, show_time=include_timestamp),
            "format": "{message}",
        }
    if format == "json":
        return {"sink": _stderr, "serialize": True}

    stamp = "{time:YYYY-MM-DD HH:mm:ss} " if include_timestamp else ""
    if format == "console":
        return {
            "sink": _stderr,
            "format": stamp + "{level: <8} | {name} | {message}",
            "colorize": False,
        }

    # structured; markup tags are stripped when not colorizing
    stamp = f"<green>{stamp}</green>" if stamp else ""
    return {
        "sink": _stderr,
        "format": stamp + "<level>{level: <8}</level> <cyan>{name}:{line}</cyan> | {message}",
        "colorize": use_color and sys.stderr.isatty(),
    }


def configure_logging(
    level: LogLevel = "INFO",
    format: LogFormat = "structured",
    output_file: str | Path | None = None,
    use_color: bool = True,
    include_timestamp: bool = True,
    force_reconfigure: bool = False,
    enable_stdlib_bridge: bool = False,
    diagnose: bool = False,
) -> None:
    """Install hexlint's log handlers, replacing any it installed before.

    Handlers added by other code (pytest's capture, an embedding
    application) are left alone.

    Parameters
    ----------
    level : LogLevel
        Minimum level for every handler
    format : LogFormat
        Format of the stderr handler
    output_file : str | Path | None
        Also append JSON records to this file, rotated at 10 MB
    use_color : bool
        Colorize ``structured`` output when stderr is a TTY
    include_timestamp : bool
        Prefix records with a timestamp
    force_reconfigure : bool
        Rebuild handlers even when the settings are unchanged
    enable_stdlib_bridge : bool
        Route stdlib ``logging`` records through Loguru
    diagnose : bool
        Show local variable values in tracebacks
    """
    global _active_settings

    settings = {
        "level": level,
        "format": format,
        "output_file": str(output_file) if output_file else None,
        "use_color": use_color,
        "include_timestamp": include_timestamp,
        "enable_stdlib_bridge": enable_stdlib_bridge,
        "diagnose": diagnose,
    }
    if settings == _active_settings and not force_reconfigure:
        return

    while _HANDLER_IDS:
        with suppress(ValueError):
            logger.remove(_HANDLER_IDS.pop())

    stream = _stream_handler(format, use_color, include_timestamp)
    _HANDLER_IDS.append(logger.add(level=level, diagnose=diagnose, **stream))

    if output_file:
        path = Path(output_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        _HANDLER_IDS.append(
            logger.add(
                sink=path,
                level=level,
                serialize=True,
                rotation="10 MB",
                retention="1 week",
                diagnose=diagnose,
            )
        )

    if enable_stdlib_bridge:
        enable_stdlib_logging_bridge()

    _active_settings = settings


def configure_from_config(
    config: "LoggingConfig",
    *,
    level: LogLevel | None = None,
    format: LogFormat | None = None,
) -> None:
    """Apply a ``[tool.hexlint.logging]`` section; ``level``/``format`` override it."""
    configure_logging(
        level=level or config.level,
        format=format or config.format,
        output_file=config.output_file,
        use_color=config.use_color,
        include_timestamp=config.include_timestamp,
    )


@lru_cache(maxsize=256)
def get_logger(name: str) -> "Logger":
    """Return a logger bound with ``module=name``."""
    if _active_settings is None:
        configure_logging(
            level=os.getenv("HEXLINT_LOG_LEVEL", "INFO").upper(),  # type: ignore[arg-type]
            format=os.getenv("HEXLINT_LOG_FORMAT", "structured").lower(),  # type: ignore[arg-type]
        )
    return logger.bind(module=name)


class _InterceptHandler(logging.Handler):
    """Forward stdlib records to Loguru, keeping the caller's location."""

    def emit(self, record: logging.LogRecord) -> None:
        level: str | int
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame: "types.FrameType | None" = inspect.currentframe()
        depth = 0
        while frame is not None and (depth == 0 or frame.f_code.co_filename == logging.__file__):
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def enable_stdlib_logging_bridge() -> None:
    """Send records from libraries using stdlib ``logging`` through Loguru."""
    logging.basicConfig(handlers=[_InterceptHandler()], level=0, force=True)
