"""Tests for hexlint.kernel.linting.storage."""

import gc
import weakref

from hexlint.drivers.filesystem.memory import InMemoryOutputFileSystem
from hexlint.kernel.domain.build import BuildContext
from hexlint.kernel.linting import storage as storage_module
from hexlint.kernel.linting.models import LintResult
from hexlint.kernel.linting.storage import get_result_storage


class TestGetResultStorage:
    def test_same_mapping_for_same_context(self, context) -> None:
        assert get_result_storage(context) is get_result_storage(context)

    def test_passes_share_their_context_mapping(self, context) -> None:
        first, second = context.new_pass(), context.new_pass()
        assert get_result_storage(first) is get_result_storage(second)
        assert get_result_storage(first) is get_result_storage(context)

    def test_contexts_are_isolated(self, context) -> None:
        other = BuildContext("/out", InMemoryOutputFileSystem())
        get_result_storage(context)["a.css"] = LintResult(source="a.css")
        assert get_result_storage(other) == {}

    def test_starts_empty(self, context) -> None:
        assert get_result_storage(context) == {}

    def test_storage_does_not_keep_context_alive(self) -> None:
        context = BuildContext("/out", InMemoryOutputFileSystem())
        get_result_storage(context)["a.css"] = LintResult(source="a.css")
        ref = weakref.ref(context)
        gc.collect()
        entries_before = len(storage_module._result_storage)

        del context
        gc.collect()

        assert ref() is None
        assert len(storage_module._result_storage) == entries_before - 1
