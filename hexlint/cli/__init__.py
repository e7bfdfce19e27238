"""hexlint command line interface."""

from hexlint.cli.main import app, main

__all__ = ["app", "main"]
