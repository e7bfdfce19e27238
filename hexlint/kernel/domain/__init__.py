"""Domain models."""

from hexlint.kernel.domain.build import BuildContext, BuildPass

__all__ = ["BuildContext", "BuildPass"]
