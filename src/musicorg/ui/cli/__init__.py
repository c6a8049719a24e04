"""Command line interface for musicorg."""

from musicorg.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
