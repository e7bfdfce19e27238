"""Lint engine drivers."""

from hexlint.drivers.engines.local import LocalRuleEngine

__all__ = ["LocalRuleEngine"]
