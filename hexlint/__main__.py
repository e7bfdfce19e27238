"""Entry point for ``python -m hexlint``."""

from __future__ import annotations


def main() -> None:
    """Main entry point for module execution."""
    from hexlint.cli import main as cli_main

    cli_main()


if __name__ == "__main__":
    main()
