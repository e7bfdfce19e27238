"""Engine resolution and per-key engine caching.

Engines are resolved by their full module path, like any other component,
and instantiated once per linter key so that consecutive passes of the same
build reuse one engine.

Examples
--------
>>> from hexlint.kernel.resolver import resolve
>>> LocalRuleEngine = resolve("hexlint.drivers.engines.local.LocalRuleEngine")
"""

from __future__ import annotations

import importlib
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from hexlint.kernel.exceptions import ResolveError
from hexlint.kernel.logging import get_logger

if TYPE_CHECKING:
    from hexlint.kernel.config.models import LinterOptions
    from hexlint.kernel.ports.engine import LintEngine

__all__ = ["clear_engine_cache", "get_engine", "resolve"]

logger = get_logger(__name__)

# Engines by linter key; a None key is never cached
_engine_cache: dict[str, LintEngine] = {}


def resolve(kind: str) -> Callable[..., Any]:
    """Resolve a full module path to a class or factory function.

    Parameters
    ----------
    kind : str
        Full module path (e.g. ``"hexlint.drivers.engines.local.LocalRuleEngine"``)

    Returns
    -------
    Callable
        The resolved class or function

    Raises
    ------
    ResolveError
        If the module or attribute cannot be found, or is not callable
    """
    if "." not in kind:
        raise ResolveError(kind, "Must be a full module path (e.g., 'myapp.engines.MyEngine')")

    module_path, attr_name = kind.rsplit(".", 1)

    try:
        module = importlib.import_module(module_path)
    except ModuleNotFoundError as e:
        raise ResolveError(kind, f"Module '{module_path}' not found: {e}") from e
    except ImportError as e:
        raise ResolveError(kind, f"Failed to import '{module_path}': {e}") from e

    try:
        target = getattr(module, attr_name)
    except AttributeError as e:
        available = [name for name in dir(module) if not name.startswith("_")]
        raise ResolveError(
            kind,
            f"'{attr_name}' not found in '{module_path}'. Available: {', '.join(available[:10])}",
        ) from e

    if not callable(target):
        raise ResolveError(kind, f"'{attr_name}' is not callable (got {type(target).__name__})")

    return target


def get_engine(key: str | None, options: LinterOptions) -> LintEngine:
    """Return the engine for ``key``, creating it on first use.

    The factory named by ``options.engine`` is called with
    ``threads=options.threads`` and ``**options.engine_options``.
    """
    if key is not None and key in _engine_cache:
        return _engine_cache[key]

    factory = resolve(options.engine)
    engine: LintEngine = factory(threads=options.threads, **options.engine_options)
    logger.debug("Created engine {engine} for key {key}", engine=options.engine, key=key)

    if key is not None:
        _engine_cache[key] = engine
    return engine


def clear_engine_cache() -> None:
    """Forget all cached engines.

    This is primarily useful for testing.
    """
    _engine_cache.clear()
