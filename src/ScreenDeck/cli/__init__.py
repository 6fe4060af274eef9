"""CLI package for ScreenDeck."""

from __future__ import annotations

__all__ = ["CommandRunner", "main"]

from ScreenDeck.cli.runner import CommandRunner
from ScreenDeck.cli.ui import cli


def main() -> None:
    """Run ScreenDeck CLI.

    Entry point referenced by console script in pyproject.toml.
    """
    cli()
