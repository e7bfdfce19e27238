"""Cross-run result storage keyed weakly by build context."""

from __future__ import annotations

import weakref

from hexlint.kernel.domain.build import BuildContext, BuildPass
from hexlint.kernel.linting.models import LintResult

LintResultMap = dict[str, LintResult]

# The key is weak: a finished build session drops its results with it
_result_storage: weakref.WeakKeyDictionary[BuildContext, LintResultMap] = (
    weakref.WeakKeyDictionary()
)


def get_result_storage(build: BuildPass | BuildContext) -> LintResultMap:
    """Return the result map of a build context, creating it on first use.

    Parameters
    ----------
    build : BuildPass | BuildContext
        A pass (its context is used) or the context itself

    Returns
    -------
    dict[str, LintResult]
        The same mutable mapping for every call with the same context

    Examples
    --------
    >>> from hexlint.drivers.filesystem.memory import InMemoryOutputFileSystem
    >>> context = BuildContext("/out", InMemoryOutputFileSystem())
    >>> get_result_storage(context) is get_result_storage(context.new_pass())
    True
    """
    context = build.context if isinstance(build, BuildPass) else build
    storage = _result_storage.get(context)
    if storage is None:
        storage = _result_storage[context] = {}
    return storage
